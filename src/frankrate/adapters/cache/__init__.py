# src/frankrate/adapters/cache/__init__.py
"""
Cache Adapters - Pluggable Rate Table Caches

All backends implement the RateCache interface.
"""

from frankrate.adapters.cache.base import NullCache, RateCache
from frankrate.adapters.cache.file_store import FileCache
from frankrate.adapters.cache.memory import MemoryCache

__all__ = [
    "RateCache",
    "NullCache",
    "MemoryCache",
    "FileCache",
]
