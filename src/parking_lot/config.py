"""Configuration models and loading utilities."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from .exceptions import ConfigError


class LotConfig(BaseModel):
    """Parking lot defaults."""

    default_capacity: int = 10  # Lot size before any create_parking_lot
    allow_non_positive_capacity: bool = False  # Accept capacity <= 0 as an always-full lot

    @model_validator(mode="after")
    def check_default_capacity(self) -> "LotConfig":
        """Reject a non-positive default capacity unless explicitly allowed."""
        if self.default_capacity <= 0 and not self.allow_non_positive_capacity:
            raise ValueError(f"default_capacity must be positive, got {self.default_capacity}")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Upper-case the level name and reject unknown levels."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


class MetricsConfig(BaseModel):
    """Prometheus textfile export configuration."""

    textfile_path: Optional[str] = None  # Written at exit when set

    @field_validator("textfile_path", mode="before")
    @classmethod
    def resolve_env_var(cls, v: Optional[str]) -> Optional[str]:
        """Resolve environment variable references like ${VAR_NAME}."""
        if isinstance(v, str) and v.startswith("${") and v.endswith("}"):
            env_var = v[2:-1]
            return os.environ.get(env_var) or None
        return v


class AppConfig(BaseModel):
    """Main application configuration."""

    lot: LotConfig = LotConfig()
    logging: LoggingConfig = LoggingConfig()
    metrics: MetricsConfig = MetricsConfig()


def load_config(path: str | Path) -> AppConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If config is invalid
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration root must be a mapping: {config_path}")

    try:
        return AppConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e


def get_config_path() -> Optional[Path]:
    """Get the default configuration file path, or None if there is none."""
    local_config = Path("config/config.yaml")
    if local_config.exists():
        return local_config

    return None
