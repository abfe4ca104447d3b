"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or a local .env file.

Files that USE this module:
- cnbrates.app (default currencies, logging configuration)
- cnbrates.adapters.providers.cnb (bulletin URL and HTTP timeout)

Files that this module USES:
- cnbrates.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Log level names
from typing import List, Optional  # Type hints for lists and optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from cnbrates.shared.validators import (
    split_currency_codes,  # Parse the comma separated currency list
    validate_currency_code,  # Validate 3-letter currency codes
    validate_url,  # Validate the bulletin URL
)

DEFAULT_CNB_URL = (
    "https://www.cnb.cz/en/financial-markets/foreign-exchange-market/"
    "central-bank-exchange-rate-fixing/central-bank-exchange-rate-fixing/daily.txt"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Bulletin source ---
    cnb_url: str = Field(default=DEFAULT_CNB_URL, alias="CNB_URL")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Requested currencies (comma separated) ---
    currencies: str = Field(default="USD,EUR,CZK,JPY,KES,RUB,THB,TRY,XYZ", alias="CNB_CURRENCIES")

    # --- Logging ---
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=False, alias="CNBRATES_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def currency_codes(self) -> List[str]:
        """Requested currency codes as a list, in configured order."""
        return split_currency_codes(self.currencies)

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return logging.getLevelName(self.log_level)

    @field_validator("cnb_url")
    @classmethod
    def validate_cnb_url(cls, v: str) -> str:
        """Validate bulletin URL format."""
        if not validate_url(v):
            raise ValueError("CNB_URL must be an http(s) URL")
        return v

    @field_validator("currencies")
    @classmethod
    def validate_currencies(cls, v: str) -> str:
        """Validate every configured currency code."""
        bad = [code for code in split_currency_codes(v) if not validate_currency_code(code)]
        if bad:
            raise ValueError(f"Invalid currency codes in CNB_CURRENCIES: {', '.join(bad)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v


# Global settings instance
settings = Settings()
