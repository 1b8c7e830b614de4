# src/frankrate/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and an optional .env file.

Files that USE this module:
- frankrate.app (builds the service, cache backend and logging from settings)
- tests.test_settings (unit tests)

Files that this module USES:
- frankrate.shared.validators (validation functions for settings)
- frankrate.application.service_config (default hostname)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from datetime import timedelta  # Cache TTL conversion
from pathlib import Path  # Object-oriented filesystem paths
from typing import List, Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from frankrate.application.service_config import DEFAULT_HOSTNAME  # Default API base URL
from frankrate.shared.validators import (
    parse_symbols,  # Split and validate the currency whitelist
    validate_cache_backend,  # Validate cache backend name
    validate_hostname,  # Validate API hostname
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )
    
    # --- Frankfurter API ---
    hostname: str = Field(default=DEFAULT_HOSTNAME, alias="FRANKFURTER_HOSTNAME")
    symbols: str = Field(default="", alias="FRANKFURTER_SYMBOLS")  # comma separated whitelist
    multiconversion: bool = Field(default=False, alias="FRANKFURTER_MULTICONVERSION")
    
    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)
    
    # --- Cache Settings ---
    cache_backend: str = Field(default="null", alias="CACHE_BACKEND")
    cache_dir: Path = Field(default=Path("./data/cache"), alias="CACHE_DIR")
    cache_ttl_seconds: int = Field(default=3600, alias="CACHE_TTL_SECONDS", ge=1, le=7 * 24 * 3600)
    
    # --- Logging ---
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="FRANKRATE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")
    
    @property
    def symbol_list(self) -> Optional[List[str]]:
        """Whitelisted currency codes, or None when every currency is allowed."""
        return parse_symbols(self.symbols)
    
    @property
    def cache_ttl(self) -> timedelta:
        return timedelta(seconds=self.cache_ttl_seconds)
    
    @field_validator("hostname")
    @classmethod
    def validate_hostname(cls, v: str) -> str:
        """Validate hostname format."""
        v = v.strip()
        if not validate_hostname(v):
            raise ValueError("Invalid FRANKFURTER_HOSTNAME")
        return v
    
    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, v: str) -> str:
        """Normalize the whitelist to upper-case comma separated codes."""
        codes = parse_symbols(v)
        return ",".join(codes) if codes else ""
    
    @field_validator("cache_backend")
    @classmethod
    def validate_cache_backend(cls, v: str) -> str:
        """Validate cache backend name."""
        v = v.strip().lower()
        if not validate_cache_backend(v):
            raise ValueError("CACHE_BACKEND must be 'null', 'memory' or 'file'")
        return v
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level name."""
        v = v.strip().upper()
        if v not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v


# Global settings instance
settings = Settings()
