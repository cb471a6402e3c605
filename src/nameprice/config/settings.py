"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables (and a .env file) with validation.

Files that USE this module:
- nameprice.shared.number (default digits of precision for scaling)
- nameprice.shared.logging_conf (default logging options)
- tests.test_settings (unit tests)

Files that this module USES:
- None (pure configuration module)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Level names for log_level validation
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic


class Settings(BaseSettings):
    """Price model settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Fixed-point scaling ---
    # Significant digits kept from a float factor before integer multiplication
    scale_digits_of_precision: int = Field(default=20, alias="NAMEPRICE_SCALE_DIGITS", ge=1, le=40)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="NAMEPRICE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES", ge=1)  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT", ge=0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the log level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return level


# Global settings instance
settings = Settings()
