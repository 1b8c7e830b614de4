# src/frankrate/adapters/http/session.py
"""
HTTP Capability - requests-based Client

The fetcher only needs `send(prepared_request) -> Response`; any object
with that method can be injected. HttpSession is the default one.

Files that USE this module:
- frankrate.adapters.http.fetcher (HttpClient protocol)
- frankrate.application.frankfurter_service (default client)
- frankrate.app (builds a session with the configured timeout)
"""
from typing import Any, Callable, Protocol

import requests

RequestFactory = Callable[[str, str], requests.Request]


class HttpClient(Protocol):
    """Protocol for objects able to send a prepared request."""
    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        ...


class HttpSession(requests.Session):
    """requests.Session that applies a default timeout to every request."""

    def __init__(self, timeout: float = 10):
        super().__init__()
        self.timeout = timeout

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        kwargs.setdefault("timeout", self.timeout)
        return super().send(request, **kwargs)
