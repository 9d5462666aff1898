"""Configuration for plugin-check. Immutable value object created by Infrastructure."""

import logging

from plugin_check.domain.constants import (
    DEFAULT_JSON_INDENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
)

_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ConfigurationLoader:
    """
    Immutable configuration read from [tool.plugin-check].

    Created by Infrastructure from (config_dict, tool_section). Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict, tool_section) at composition root.
    Invalid values log a warning and fall back to defaults.
    """

    def __init__(
        self,
        config_dict: dict[str, object],
        tool_section: dict[str, object],
    ) -> None:
        self._config = config_dict
        self._tool_section = tool_section
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about values that will be ignored."""
        output_format = config.get("output_format")
        if output_format is not None and output_format not in OUTPUT_FORMATS:
            logging.warning(
                "Configuration Warning: 'output_format' must be one of %s, got %r. Using %r.",
                sorted(OUTPUT_FORMATS), output_format, DEFAULT_OUTPUT_FORMAT,
            )
        indent = config.get("json_indent")
        if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int) or indent < 0):
            logging.warning(
                "Configuration Warning: 'json_indent' must be a non-negative integer, got %r.",
                indent,
            )
        level = config.get("log_level")
        if level is not None and str(level).upper() not in _LOG_LEVELS:
            logging.warning("Configuration Warning: unknown 'log_level' %r.", level)
        fail = config.get("fail_on_annotations")
        if fail is not None and not isinstance(fail, bool):
            logging.warning(
                "Configuration Warning: 'fail_on_annotations' must be true or false, got %r. Using true.",
                fail,
            )

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def tool_section(self) -> dict[str, object]:
        """Return the full [tool] section."""
        return self._tool_section

    @property
    def output_format(self) -> str:
        """json (default) or text."""
        raw = self._config.get("output_format", DEFAULT_OUTPUT_FORMAT)
        return raw if raw in OUTPUT_FORMATS else DEFAULT_OUTPUT_FORMAT

    @property
    def json_indent(self) -> int:
        """Indent for JSON output; 0 means compact."""
        raw = self._config.get("json_indent", DEFAULT_JSON_INDENT)
        if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
            return DEFAULT_JSON_INDENT
        return raw

    @property
    def fail_on_annotations(self) -> bool:
        """Whether a non-empty response exits with status 1."""
        raw = self._config.get("fail_on_annotations", True)
        return raw if isinstance(raw, bool) else True

    @property
    def log_level(self) -> str:
        """Logging level name."""
        raw = str(self._config.get("log_level", DEFAULT_LOG_LEVEL)).upper()
        return raw if raw in _LOG_LEVELS else DEFAULT_LOG_LEVEL
