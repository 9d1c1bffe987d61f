"""Load [tool.type-name] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

from type_name_linter.domain.constants import TOOL_SECTION
from type_name_linter.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml, walking up from start_dir.
    """

    @staticmethod
    def find_config_file(start_dir: Path | None = None) -> Path | None:
        current_path = (start_dir or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if config_file.is_file():
                return config_file
        return None

    @staticmethod
    def load_config_from_fs(start_dir: Path | None = None) -> dict[str, object]:
        """Return the [tool.type-name] table, or {} when there is no pyproject.toml or no section."""
        config_file = ConfigFileLoader.find_config_file(start_dir)
        if config_file is None:
            logger.debug("No pyproject.toml found; using default configuration")
            return {}
        return ConfigFileLoader.load_config_file(config_file)

    @staticmethod
    def load_config_file(config_file: Path) -> dict[str, object]:
        try:
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
        except toml_lib.TOMLDecodeError as e:
            raise ConfigurationError(f"{config_file}: invalid TOML: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"{config_file}: cannot read: {e}") from e
        tool_section = data.get("tool", {}) or {}
        config_dict = tool_section.get(TOOL_SECTION, {}) or {}
        if not isinstance(config_dict, dict):
            raise ConfigurationError(f"{config_file}: [tool.{TOOL_SECTION}] must be a table")
        logger.debug("Loaded [tool.%s] from %s", TOOL_SECTION, config_file)
        return config_dict
