# src/frankrate/application/cache_gateway.py
"""
Cache Gateway - URL-keyed Rate Table Caching

This module short-circuits the HTTP fetch when a rate table for the exact
same URL is cached. Only successfully parsed tables are written; not-found
answers and failures propagate before any write, so the next call with the
same URL goes to the network again.

Files that USE this module:
- frankrate.application.frankfurter_service (wraps every fetch)
- tests.test_cache (unit tests)

Files that this module USES:
- frankrate.adapters.cache.base (RateCache interface)
- frankrate.domain.rate_table (revalidation of cached entries)
"""
from __future__ import annotations

import hashlib
import logging
from datetime import timedelta
from typing import Callable

from frankrate.adapters.cache.base import RateCache
from frankrate.domain.rate_table import RateTable, load_rate_table

log = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "frankrate|frankfurter|"


def cache_key(url: str) -> str:
    """Namespaced SHA-1 fingerprint of the full request URL."""
    return CACHE_KEY_PREFIX + hashlib.sha1(url.encode("utf-8")).hexdigest()


class CacheGateway:
    def __init__(self, cache: RateCache, ttl: timedelta):
        self.cache = cache
        self.ttl = ttl

    def fetch_rates(self, url: str, fetch: Callable[[str], RateTable]) -> RateTable:
        """
        Return the rate table for url, from cache or from fetch(url).
        
        Args:
            url: Fully built request URL
            fetch: Callable performing the HTTP request on a miss
            
        Returns:
            RateTable from cache or network
        """
        key = cache_key(url)

        cached = self.cache.get(key)
        if cached is not None:
            log.debug("Using cached rates for %s", url)
            return load_rate_table(cached)

        table = fetch(url)

        # JSON-compatible form so any backend can store it
        self.cache.set(key, table.model_dump(mode="json"), self.ttl)
        log.debug("Cached rates for %s (ttl=%s)", url, self.ttl)
        return table
