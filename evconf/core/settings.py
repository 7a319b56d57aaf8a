"""
Pydantic Settings for evconf's own behaviour.

Settings come from (highest priority first) explicit init values,
EVCONF_* environment variables, a TOML file, and model defaults. The TOML
file is .evconf/config.toml or the [tool.evconf] table of a pyproject.toml,
searched from the working directory upwards.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .exceptions import SettingsError
from .models.config import LoggingConfig, ParserConfig

CONFIG_DIR_NAME = ".evconf"
CONFIG_FILE_NAME = "config.toml"


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .evconf/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.evconf] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
            except (tomllib.TOMLDecodeError, OSError):
                # Someone else's broken pyproject; keep searching upwards.
                continue
            if "evconf" in data.get("tool", {}):
                return pyproject

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise SettingsError(f"Failed to parse settings file: {e}", file_path=str(path), cause=e) from e
        except OSError as e:
            raise SettingsError(f"Failed to read settings file: {e}", file_path=str(path), cause=e) from e

        if path.name == "pyproject.toml":
            data = data.get("tool", {}).get("evconf", {})

        self._data = data
        self._data["_config_file"] = str(path)
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class EvconfSettings(BaseSettings):
    """evconf settings with TOML and environment variable support.

    Environment variables use the EVCONF_ prefix and a double underscore
    for nesting, e.g. EVCONF_LOGGING__LEVEL=debug.
    """

    model_config = SettingsConfigDict(
        env_prefix="EVCONF_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)

    # Internal fields (not from config)
    _config_file: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source below environment variables.

        settings_cls gives no way to pass the config path through, so it
        travels via module-level variables set by load_settings().
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> str | None:
        """Path of the TOML file the settings were read from, if any."""
        return self._config_file

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "logging": self.logging.model_dump(),
            "parser": self.parser.model_dump(),
        }
        if self._config_file:
            result["_config_file"] = self._config_file
        return result


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> EvconfSettings:
    """Load evconf settings from config file and environment.

    Args:
        config_path: Explicit path to a settings file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        EvconfSettings instance with all sources merged

    Raises:
        SettingsError: If the settings file exists but cannot be read or parsed
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        settings = EvconfSettings()

        toml_data = TomlConfigSource(EvconfSettings, config_path, start_dir)()
        if "_config_file" in toml_data:
            settings._config_file = toml_data["_config_file"]

        return settings
    finally:
        _current_config_path = None
        _current_start_dir = None
