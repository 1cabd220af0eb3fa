"""
Converter configuration.

Loads converter settings from YAML files and applies environment overrides.
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

FILE_CREATION_NUMBER_ENV = "CPA005_FILE_CREATION_NUMBER"
LOG_LEVEL_ENV = "LOG_LEVEL"


class ConfigError(ValueError):
    """Raised when a configuration file or override is invalid."""


class ConverterConfig(BaseModel):
    """
    Settings for a conversion run.

    Attributes:
        file_creation_number: Number written to the header and trailer (1-9999)
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_format: "json" for structured logs, "text" for local use
        output_extension: Extension of files written by the CLI
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    file_creation_number: int = Field(1, ge=1, le=9999)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    output_extension: str = Field(".txt", pattern=r"^\.[A-Za-z0-9]+$")


class ConfigLoader:
    """
    Loads ConverterConfig from a YAML file.

    Expected YAML format:
    ```yaml
    converter:
      file_creation_number: 1
      log_level: INFO
      log_format: json
      output_extension: .txt
    ```
    """

    SECTION = "converter"

    def __init__(self, config_path: str | Path):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Converter configuration file not found: {config_path}")

    def load(self) -> ConverterConfig:
        """
        Parse the configuration file.

        Raises:
            ConfigError: If the YAML is invalid or holds unknown/invalid settings
        """
        with open(self.config_path, encoding="utf-8") as f:
            try:
                document = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        if document is None:
            return ConverterConfig()

        if not isinstance(document, dict) or self.SECTION not in document:
            raise ConfigError(f"Configuration file must contain a '{self.SECTION}' section")

        return build_config(document[self.SECTION] or {})


def build_config(settings: dict[str, Any]) -> ConverterConfig:
    """
    Validate a settings mapping.

    Raises:
        ConfigError: If any setting is unknown or invalid
    """
    try:
        return ConverterConfig(**settings)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid converter configuration: {e}") from e


def load_config(config_path: str | Path | None = None) -> ConverterConfig:
    """
    Load configuration from an optional file, then apply environment overrides.

    Environment:
        CPA005_FILE_CREATION_NUMBER: overrides file_creation_number
        LOG_LEVEL: overrides log_level

    Raises:
        ConfigError: If the file or an override is invalid
    """
    config = ConfigLoader(config_path).load() if config_path else ConverterConfig()
    settings = config.model_dump()

    file_creation_number = os.getenv(FILE_CREATION_NUMBER_ENV)
    if file_creation_number:
        try:
            settings["file_creation_number"] = int(file_creation_number)
        except ValueError:
            raise ConfigError(
                f"{FILE_CREATION_NUMBER_ENV} must be an integer, got {file_creation_number!r}"
            ) from None

    log_level = os.getenv(LOG_LEVEL_ENV)
    if log_level:
        settings["log_level"] = log_level.upper()

    return build_config(settings)
