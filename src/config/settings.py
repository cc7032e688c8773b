"""Configuration management for the stock dashboard.

Centralizes the tracked ticker universe and the static company table.
"""

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from src.config.models import CompanyInfo, DashboardConfig, UniverseConfig
from src.core.errors import ConfigurationError


class Config(BaseModel):
    """Root configuration model."""

    universe: UniverseConfig
    dashboard: DashboardConfig = Field(default_factory=DashboardConfig)

    @property
    def symbols(self) -> list[str]:
        return self.universe.symbols

    @property
    def companies(self) -> dict[str, CompanyInfo]:
        return self.universe.companies


def load_config(config_path: Path = Path("config/config.yaml")) -> Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml file

    Returns:
        Parsed configuration object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is malformed
        ConfigurationError: If the content does not validate
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.info(f"Loading configuration from {config_path}")

    with config_path.open("r") as f:
        raw_config: dict[str, Any] = yaml.safe_load(f) or {}

    try:
        config = Config(**raw_config)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e

    logger.debug(f"Tracking {len(config.symbols)} symbols: {config.symbols}")
    return config
