"""Application configuration using Pydantic V2."""

import sys
from enum import Enum
from pathlib import Path

from loguru import logger
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.errors import ConfigurationError


class DataSource(str, Enum):
    """Where the dashboard gets its quotes from."""

    DEMO = "demo"
    LIVE = "live"


class Settings(BaseSettings):
    """Application settings and configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="stock-dashboard", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Ticker universe and company table
    config_path: Path = Field(default=Path("config/config.yaml"))

    # Upstream quote provider
    alpha_vantage_key: SecretStr | None = Field(
        default=None, description="Alpha Vantage API key, required by the API"
    )
    alpha_vantage_url: str = Field(default="https://www.alphavantage.co/query")
    request_timeout_sec: float | None = Field(
        default=10.0, gt=0, description="Timeout per upstream call, None disables it"
    )
    max_workers: int = Field(default=1, ge=1, description="Symbols fetched in parallel")

    # API server
    api_host: str = Field(default="127.0.0.1")
    api_port: int = Field(default=8000)

    # Dashboard
    data_source: DataSource = Field(default=DataSource.DEMO)
    stocks_api_url: str = Field(default="http://localhost:8000/api/stocks")

    @field_validator("request_timeout_sec", mode="before")
    @classmethod
    def blank_timeout_is_none(cls, v: object) -> object:
        """Blank, "none" and "null" disable the timeout."""
        if isinstance(v, str) and v.strip().lower() in ("", "none", "null"):
            return None
        return v

    def require_api_key(self) -> str:
        """Return the upstream API key or fail at startup."""
        if self.alpha_vantage_key is None or not self.alpha_vantage_key.get_secret_value():
            raise ConfigurationError(
                "ALPHA_VANTAGE_KEY is not set. Add it to the environment or .env file."
            )
        return self.alpha_vantage_key.get_secret_value()


def setup_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with one at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=(level or settings.log_level).upper())


# Singleton instance
settings = Settings()
