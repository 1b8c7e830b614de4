# src/frankrate/adapters/cache/file_store.py
"""
File Cache - Rate Table Persistence Between Runs

This module stores cache entries as JSON files, one file per key, so that
rate tables survive between command-line invocations. Each file holds the
value together with its expiry timestamp.

Files that USE this module:
- frankrate.app (CACHE_BACKEND=file)
- tests.test_cache (unit tests)

Files that this module USES:
- frankrate.adapters.cache.base (RateCache interface)
"""
from __future__ import annotations

import hashlib
import json
import logging
import os
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Optional, Union

from frankrate.adapters.cache.base import RateCache

log = logging.getLogger(__name__)


class FileCache(RateCache):
    """
    JSON file cache rooted at a directory.

    Expired or corrupt entries are treated as misses and removed.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        digest = hashlib.sha1(key.encode("utf-8")).hexdigest()
        return self.directory / f"{digest}.json"

    def get(self, key: str) -> Optional[Any]:
        p = self._path(key)
        if not p.exists():
            return None

        try:
            with p.open("r", encoding="utf-8") as f:
                entry = json.load(f)
            expires_at = datetime.fromisoformat(entry["expires_at"])
            if expires_at.tzinfo is None:
                raise ValueError(f"expires_at has no timezone: {entry['expires_at']!r}")
            value = entry["value"]
        except (OSError, ValueError, KeyError, TypeError) as e:
            log.warning("Cache file %s is corrupt, discarding: %s", p, e)
            self._discard(p)
            return None

        if entry.get("key") != key:
            # sha1 collision or foreign file
            return None

        if datetime.now(timezone.utc) >= expires_at:
            log.debug("File cache entry expired: %s", key)
            self._discard(p)
            return None

        return value

    def set(self, key: str, value: Any, ttl: timedelta) -> None:
        """
        Write an entry using an atomic write.
        
        Uses temporary file + atomic rename so readers never see a partial file.
        
        Raises:
            RuntimeError: If the entry cannot be written
        """
        p = self._path(key)
        entry = {
            "key": key,
            "expires_at": (datetime.now(timezone.utc) + ttl).isoformat(),
            "value": value,
        }

        temp_fd, temp_path = tempfile.mkstemp(
            suffix=".json.tmp",
            dir=str(self.directory),
            text=True
        )

        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(entry, f, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())

            os.replace(temp_path, str(p))
        except Exception as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise RuntimeError(f"Failed to write cache file: {e}") from e

    @staticmethod
    def _discard(p: Path) -> None:
        try:
            p.unlink()
        except OSError as e:
            log.error("Failed to remove cache file %s: %s", p, e)
