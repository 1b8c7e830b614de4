# src/frankrate/shared/user_agent.py
"""
User-Agent Helper

Files that USE this module:
- frankrate.adapters.http.fetcher (sets the User-Agent header on every request)
"""
from typing import Optional

from frankrate import __version__

SERVICE_NAME = "frankfurter"


def build_user_agent(existing: Optional[str] = None) -> str:
    """
    Build the User-Agent string for outgoing requests.

    A User-Agent already attached by the caller's request factory is kept
    in front of ours.
    """
    ours = f"frankrate/{__version__} (+{SERVICE_NAME})"
    if existing:
        return f"{existing} {ours}"
    return ours
