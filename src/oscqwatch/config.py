# src/oscqwatch/config.py
"""Configuration loading and validation using Pydantic."""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from . import paths
from .errors import ConfigError


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    level: str = "INFO"
    json_format: bool = Field(False, alias="json")


class WatchdogConfig(BaseModel):
    """
    Root configuration model.

    Only 'httpPort' is required; it is the same file the helper service reads,
    so any keys the watchdog does not know about are ignored.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    http_port: int = Field(alias="httpPort", ge=0, le=65535, strict=True)
    executable: Path = Field(default_factory=paths.get_default_executable_path)
    poll_interval: float = Field(1.0, alias="pollInterval", gt=0)
    http_timeout: float = Field(5.0, alias="httpTimeout", gt=0)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("executable", mode="before")
    @classmethod
    def _expand_executable(cls, value: Any) -> Any:
        if isinstance(value, (str, Path)):
            return paths.expand_path(value)
        return value


def load_config(path: Optional[Path] = None) -> WatchdogConfig:
    """
    Load, parse, and validate the watchdog configuration file.

    Args:
        path: The path to the configuration file. If None, uses the default path.

    Returns:
        A validated WatchdogConfig instance.

    Raises:
        ConfigError: If the file is not found, cannot be read, or fails validation.
    """
    config_path = Path(path) if path else paths.get_default_config_path()
    if not config_path.is_file():
        raise ConfigError(f"Configuration file not found at '{config_path}'.")

    try:
        content = config_path.read_bytes()
        data = yaml.safe_load(content)
        return WatchdogConfig.model_validate(data)
    except OSError as e:
        raise ConfigError(f"Failed to read configuration file '{config_path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse configuration file '{config_path}': {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed:\n{e}") from e
