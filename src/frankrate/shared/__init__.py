# src/frankrate/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Decimal formatting
- User-Agent construction
- Logging configuration
"""

from frankrate.shared.decimals import format_decimal, parse_decimal
from frankrate.shared.validators import (
    CACHE_BACKENDS,
    parse_symbols,
    validate_cache_backend,
    validate_currency_code,
    validate_hostname,
)
from frankrate.shared.user_agent import build_user_agent

__all__ = [
    "format_decimal",
    "parse_decimal",
    "CACHE_BACKENDS",
    "parse_symbols",
    "validate_cache_backend",
    "validate_currency_code",
    "validate_hostname",
    "build_user_agent",
]
