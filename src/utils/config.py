"""Configuration management for the password strength service.

Settings live in a YAML file validated by pydantic models. The file is
``configs/config.yaml`` unless ``PASSWORD_STRENGTH_CONFIG`` names another;
a missing or empty file yields the defaults.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PASSWORD_STRENGTH_CONFIG"
DEFAULT_CONFIG_PATH = Path("configs/config.yaml")


class MeterConfig(BaseModel):
    """Configuration for the sign-up strength meter."""

    max_suggestions: int = Field(default=3, ge=0)


class ApiConfig(BaseModel):
    """Configuration for the HTTP API server."""

    host: str = "0.0.0.0"
    port: int = 8000
    max_password_length: int = Field(default=4096, gt=0)


class AppConfig(BaseModel):
    """Top-level application configuration."""

    meter: MeterConfig = Field(default_factory=MeterConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    log_level: str = "INFO"


def config_path() -> Path:
    """Return the configuration path, honouring the environment override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None) -> AppConfig:
    """Read and validate the application configuration.

    Args:
        path: YAML file to read. Defaults to ``config_path()``.

    Returns:
        Validated application configuration.

    Raises:
        ValueError: If the file holds something other than a mapping.
    """
    path = path or config_path()
    if not path.exists():
        logger.debug("Config file %s not found, using defaults", path)
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    logger.debug("Loaded configuration from %s", path)
    return AppConfig.model_validate(raw)
