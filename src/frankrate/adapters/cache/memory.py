# src/frankrate/adapters/cache/memory.py
"""
In-Memory Cache Backend

Process-local TTL cache, shared by every service instance that receives the
same MemoryCache object.

Files that USE this module:
- frankrate.app (CACHE_BACKEND=memory)
- tests.* (fresh MemoryCache per test)
"""
from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

from frankrate.adapters.cache.base import RateCache

log = logging.getLogger(__name__)


class MemoryCache(RateCache):
    def __init__(self):
        self._entries: Dict[str, Tuple[Any, datetime]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if datetime.now(timezone.utc) >= expires_at:
                del self._entries[key]
                log.debug("Memory cache entry expired: %s", key)
                return None
            return value

    def set(self, key: str, value: Any, ttl: timedelta) -> None:
        with self._lock:
            self._entries[key] = (value, datetime.now(timezone.utc) + ttl)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
