# src/frankrate/shared/validators.py
"""
Input Validation Utilities - Configuration Validation

This module provides validation functions for configuration values:
currency code whitelists, cache backend names and hostnames.

Files that USE this module:
- frankrate.config.settings (uses validation functions in Settings field validators)
- frankrate.app (validates command-line currency codes)

Files that this module USES:
- None (pure utility functions)
"""
import re
from typing import List, Optional

CACHE_BACKENDS = ("null", "memory", "file")


def validate_currency_code(code: str) -> bool:
    """
    Validate a three-letter currency code (e.g. EUR, USD).
    
    Args:
        code: Currency code to validate (upper case expected)
        
    Returns:
        True if valid, False otherwise
    """
    if not code:
        return False
    return bool(re.match(r'^[A-Z]{3}$', code))


def parse_symbols(raw: str) -> Optional[List[str]]:
    """
    Split a comma separated whitelist into upper-case currency codes.
    
    Args:
        raw: Comma separated list such as "usd, jpy,PHP"
        
    Returns:
        List of codes in the given order, or None for an empty string
        
    Raises:
        ValueError: If any code is malformed
    """
    codes = [part.strip().upper() for part in (raw or "").split(",") if part.strip()]
    if not codes:
        return None
    invalid = [code for code in codes if not validate_currency_code(code)]
    if invalid:
        raise ValueError(f"Invalid currency codes: {', '.join(invalid)}")
    return codes


def validate_cache_backend(name: str) -> bool:
    return name in CACHE_BACKENDS


def validate_hostname(hostname: str) -> bool:
    """
    Validate an API hostname, with or without scheme.
    
    Whitespace is never valid; everything else is left to the HTTP client.
    """
    if not hostname:
        return False
    return not re.search(r'\s', hostname)
