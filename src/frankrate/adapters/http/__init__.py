# src/frankrate/adapters/http/__init__.py
"""
HTTP Adapters - Frankfurter API Client

This package contains the requests-based HTTP capability and the rate fetcher.
"""

from frankrate.adapters.http.fetcher import RatesFetcher
from frankrate.adapters.http.session import HttpClient, HttpSession, RequestFactory

__all__ = [
    "HttpClient",
    "HttpSession",
    "RequestFactory",
    "RatesFetcher",
]
