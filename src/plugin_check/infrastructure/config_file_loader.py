"""Load [tool.plugin-check] and [tool] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path
from typing import Optional

from plugin_check.domain.constants import CONFIG_SECTION


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml, walking up from a start directory.
    """

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> tuple[dict[str, object], dict[str, object]]:
        """Return (config_dict, tool_section). Both are empty when no pyproject.toml is found."""
        current_path = (start or Path.cwd()).resolve()
        empty: dict[str, object] = {}
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logging.warning("Configuration Warning: could not read %s: %s", config_file, e)
                continue
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(CONFIG_SECTION, {}) or {}
            return (config_dict, tool_section)
        return (empty, empty)
