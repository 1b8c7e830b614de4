# src/frankrate/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the request dispatcher and the pure steps it
orchestrates: URL building, cache lookup and result interpretation.
"""

from frankrate.application.cache_gateway import CacheGateway, cache_key
from frankrate.application.frankfurter_service import FrankfurterService
from frankrate.application.interpreter import interpret
from frankrate.application.query_builder import build_url
from frankrate.application.service_config import (
    DEFAULT_HOSTNAME,
    DEFAULT_TTL,
    FrankfurterConfig,
    normalize_hostname,
)

__all__ = [
    "FrankfurterService",
    "FrankfurterConfig",
    "DEFAULT_HOSTNAME",
    "DEFAULT_TTL",
    "normalize_hostname",
    "build_url",
    "CacheGateway",
    "cache_key",
    "interpret",
]
