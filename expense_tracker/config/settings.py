"""
Configuration Management for Expense Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Every setting can be overridden with an EXPENSE_TRACKER_* environment
variable or a .env file in the working directory.
"""

import logging
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrackerSettings(BaseSettings):
    """
    Main application settings.
    
    Loads configuration from environment variables and .env file.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    # Storage
    data_file: Path = Field(
        default=Path("expenses.txt"),
        description="Flat file the expenses are loaded from and saved to"
    )
    
    # Presentation
    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Symbol printed in front of amounts"
    )
    
    # Validation thresholds
    max_amount: Optional[Decimal] = Field(
        default=None,
        gt=0,
        description="Largest accepted single expense (unset = no limit)"
    )
    
    # Diagnostics
    log_level: str = Field(
        default="WARNING",
        description="Log level for diagnostics written to stderr"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug logging"
    )
    
    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept level names the logging module knows."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
    
    @property
    def effective_log_level(self) -> int:
        """Numeric log level, taking debug mode into account."""
        if self.debug_mode:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> TrackerSettings:
    """
    Get application settings (cached).
    
    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return TrackerSettings()
