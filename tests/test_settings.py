"""
Tests for evconf's own settings: defaults, TOML files, environment variables
and how the parser picks them up after bootstrap.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from evconf import Configuration
from evconf.core.bootstrap import bootstrap, is_initialized
from evconf.core.container import get_container
from evconf.core.exceptions import SettingsError
from evconf.core.models.config import LoggingConfig, ParserConfig
from evconf.core.settings import EvconfSettings, find_config_file, load_settings


def write_settings(root: Path, text: str) -> Path:
    path = root / ".evconf" / "config.toml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestDefaults:
    """Tests for settings without any file or environment."""

    def test_defaults(self, tmp_path):
        settings = load_settings(start_dir=str(tmp_path))
        assert settings.logging.level == "warning"
        assert settings.logging.console is False
        assert settings.logging.file is False
        assert settings.parser.encoding == "utf-8"
        assert settings.config_file is None

    def test_to_dict(self, tmp_path):
        data = load_settings(start_dir=str(tmp_path)).to_dict()
        assert data == {
            "logging": {"level": "warning", "console": False, "file": False},
            "parser": {"encoding": "utf-8"},
        }


class TestTomlFiles:
    """Tests for .evconf/config.toml and pyproject.toml."""

    def test_config_toml(self, tmp_path):
        path = write_settings(tmp_path, '[logging]\nlevel = "DEBUG"\nconsole = true\n')

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.logging.level == "debug"
        assert settings.logging.console is True
        assert settings.config_file == str(path)

    def test_found_from_subdirectory(self, tmp_path):
        path = write_settings(tmp_path, '[parser]\nencoding = "latin-1"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(str(nested)) == path
        assert load_settings(start_dir=str(nested)).parser.encoding == "latin-1"

    def test_pyproject_tool_table(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n\n[tool.evconf.parser]\nencoding = "latin-1"\n')

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.parser.encoding == "latin-1"
        assert settings.config_file == str(tmp_path / "pyproject.toml")

    def test_pyproject_without_table_is_ignored(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n')
        assert find_config_file(str(tmp_path)) is None

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[logging]\nlevel = "error"\n')

        settings = load_settings(config_path=path)

        assert settings.logging.level == "error"

    def test_invalid_toml(self, tmp_path):
        write_settings(tmp_path, "[logging\nlevel = ")
        with pytest.raises(SettingsError, match="Failed to parse"):
            load_settings(start_dir=str(tmp_path))

    def test_invalid_level(self, tmp_path):
        write_settings(tmp_path, '[logging]\nlevel = "loud"\n')
        with pytest.raises(ValidationError):
            load_settings(start_dir=str(tmp_path))


class TestEnvironment:
    """Tests for EVCONF_* environment variables."""

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        write_settings(tmp_path, '[logging]\nlevel = "debug"\n')
        monkeypatch.setenv("EVCONF_LOGGING__LEVEL", "ERROR")

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.logging.level == "error"

    def test_unknown_encoding_rejected(self, tmp_path, monkeypatch):
        monkeypatch.setenv("EVCONF_PARSER__ENCODING", "no-such-codec")
        with pytest.raises(ValidationError, match="Unknown encoding"):
            load_settings(start_dir=str(tmp_path))


class TestSettingsModels:
    """Tests for the plain settings models."""

    def test_level_is_case_insensitive(self):
        assert LoggingConfig(level=" Info ").level == "info"

    def test_encoding_is_checked(self):
        assert ParserConfig(encoding="latin-1").encoding == "latin-1"
        with pytest.raises(ValidationError, match="Unknown encoding"):
            ParserConfig(encoding="no-such-codec")


class TestBootstrap:
    """Tests for settings reaching the parser through the container."""

    def test_bootstrap_registers_settings(self, tmp_path):
        write_settings(tmp_path, '[parser]\nencoding = "latin-1"\n')

        container = bootstrap()

        assert is_initialized()
        assert container.resolve(EvconfSettings).parser.encoding == "latin-1"
        assert bootstrap() is container

    def test_parser_uses_configured_encoding(self, tmp_path):
        write_settings(tmp_path, '[parser]\nencoding = "latin-1"\n')
        path = tmp_path / "latin.conf"
        path.write_bytes("[ greeting ]\nword = 'café'\n".encode("latin-1"))
        bootstrap()

        conf = Configuration(path)
        conf.parse_config()

        assert conf.encoding == "latin-1"
        assert conf.get("greeting", "word") == "café"

    def test_broken_settings_fall_back_to_utf8(self, tmp_path):
        write_settings(tmp_path, "not = [valid")
        bootstrap()

        assert get_container().is_registered(EvconfSettings)
        assert Configuration(tmp_path / "x.conf").encoding == "utf-8"
