# src/frankrate/adapters/cache/base.py
"""
Base Cache Interface for Rate Table Caching

This module defines the abstract cache capability consumed by the cache
gateway, and the NullCache used when no backend is configured.

Files that USE this module:
- frankrate.adapters.cache.memory (MemoryCache implements RateCache)
- frankrate.adapters.cache.file_store (FileCache implements RateCache)
- frankrate.application.cache_gateway (reads and writes through RateCache)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, Optional


class RateCache(ABC):
    """
    Key/value cache with per-entry TTL.

    Values are JSON-compatible (dicts, lists, strings, numbers). A value set
    under a key must be returned by get() until its TTL elapses.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None on a miss or expired entry."""
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: Any, ttl: timedelta) -> None:
        """Store value under key for ttl."""
        raise NotImplementedError


class NullCache(RateCache):
    """Cache that never hits."""

    def get(self, key: str) -> Optional[Any]:
        return None

    def set(self, key: str, value: Any, ttl: timedelta) -> None:
        return None
