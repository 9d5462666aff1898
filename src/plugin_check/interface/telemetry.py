"""Telemetry on the standard logging module."""

import logging
from typing import Optional

from plugin_check.domain.constants import LOGGER_NAME
from plugin_check.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """TelemetryPort that writes progress and problems to the plugin_check logger."""

    def __init__(self, project_name: str, logger: Optional[logging.Logger] = None) -> None:
        self.project_name = project_name
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    @staticmethod
    def configure(level: str) -> None:
        """
        Install a stderr handler and set the plugin_check logger level.

        The level is set on the plugin_check logger itself, so it applies even
        when an earlier root-level warning already set up logging.
        """
        numeric_level = getattr(logging, level.upper(), logging.WARNING)
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger(LOGGER_NAME).setLevel(numeric_level)

    def handshake(self) -> None:
        self.logger.info("%s online", self.project_name)

    def step(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)
