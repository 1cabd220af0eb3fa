"""
Unit tests for converter configuration loading.
"""

from pathlib import Path

import pytest

from cpa005.core.config import (
    FILE_CREATION_NUMBER_ENV,
    LOG_LEVEL_ENV,
    ConfigError,
    ConfigLoader,
    ConverterConfig,
    build_config,
    load_config,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(FILE_CREATION_NUMBER_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


class TestConverterConfig:
    """Tests for ConverterConfig"""

    def test_defaults(self):
        config = ConverterConfig()

        assert config.file_creation_number == 1
        assert config.log_level == "INFO"
        assert config.log_format == "json"
        assert config.output_extension == ".txt"

    @pytest.mark.parametrize(
        "settings",
        [
            {"file_creation_number": 0},
            {"file_creation_number": 10000},
            {"log_level": "VERBOSE"},
            {"output_extension": "txt"},
            {"unknown": 1},
        ],
    )
    def test_invalid_settings(self, settings):
        with pytest.raises(ConfigError):
            build_config(settings)


class TestConfigLoader:
    """Tests for ConfigLoader"""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader(tmp_path / "missing.yaml")

    def test_load(self, tmp_path):
        path = tmp_path / "converter.yaml"
        path.write_text("converter:\n  file_creation_number: 7\n  log_format: text\n")

        config = ConfigLoader(path).load()

        assert config.file_creation_number == 7
        assert config.log_format == "text"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "converter.yaml"
        path.write_text("")

        assert ConfigLoader(path).load() == ConverterConfig()

    def test_missing_section(self, tmp_path):
        path = tmp_path / "converter.yaml"
        path.write_text("other:\n  value: 1\n")

        with pytest.raises(ConfigError, match="'converter' section"):
            ConfigLoader(path).load()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "converter.yaml"
        path.write_text("converter: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            ConfigLoader(path).load()

    def test_shipped_config_loads(self):
        path = Path(__file__).resolve().parents[2] / "config" / "converter.yaml"
        config = ConfigLoader(path).load()
        assert config.file_creation_number == 1


class TestLoadConfig:
    """Tests for load_config environment overrides"""

    def test_without_file(self):
        assert load_config() == ConverterConfig()

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv(FILE_CREATION_NUMBER_ENV, "42")
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

        config = load_config()

        assert config.file_creation_number == 42
        assert config.log_level == "DEBUG"

    def test_env_override_beats_file(self, tmp_path, monkeypatch):
        path = tmp_path / "converter.yaml"
        path.write_text("converter:\n  file_creation_number: 7\n")
        monkeypatch.setenv(FILE_CREATION_NUMBER_ENV, "8")

        assert load_config(path).file_creation_number == 8

    def test_non_integer_env_override(self, monkeypatch):
        monkeypatch.setenv(FILE_CREATION_NUMBER_ENV, "seven")

        with pytest.raises(ConfigError, match=FILE_CREATION_NUMBER_ENV):
            load_config()
