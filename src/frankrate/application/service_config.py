# src/frankrate/application/service_config.py
"""
Service Configuration - Immutable Frankfurter Settings

Files that USE this module:
- frankrate.application.query_builder (hostname, symbols, multiconversion)
- frankrate.application.frankfurter_service (builds the config once)
- frankrate.config.settings (DEFAULT_HOSTNAME)
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional, Tuple

DEFAULT_HOSTNAME = "https://api.frankfurter.dev"
DEFAULT_TTL = timedelta(hours=1)

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]+://.", re.IGNORECASE)


def normalize_hostname(hostname: str) -> str:
    """
    Prefix with https:// when no scheme is given and strip trailing slashes.

    Examples: "api.x.local" -> "https://api.x.local",
    "http://api.x.local/" -> "http://api.x.local".
    """
    if not _SCHEME_RE.match(hostname):
        hostname = "https://" + hostname
    return hostname.rstrip("/")


@dataclass(frozen=True)
class FrankfurterConfig:
    """
    Attributes:
        hostname: Base URL of the API, normalized on construction
        symbols: Optional whitelist of quote currencies, in request order
        multiconversion: Fetch the whole whitelist for conversions too
        ttl: Lifetime of every cache entry
    """
    hostname: str = DEFAULT_HOSTNAME
    symbols: Optional[Tuple[str, ...]] = None
    multiconversion: bool = False
    ttl: timedelta = field(default=DEFAULT_TTL)

    def __post_init__(self):
        object.__setattr__(self, "hostname", normalize_hostname(self.hostname))
        if self.symbols is not None:
            object.__setattr__(self, "symbols", tuple(self.symbols))
