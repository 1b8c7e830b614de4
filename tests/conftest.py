# tests/conftest.py
"""
Shared Test Fixtures - Fake Frankfurter API

Provides a fake HTTP client that records every prepared request and serves
canned Frankfurter payloads keyed by the full request URL, plus a fresh
in-memory cache per test.

Files that USE this module:
- pytest (fixtures are injected into every test module)

Files that this module USES:
- requests (Response objects returned by the fake client)
- frankrate.adapters.cache.memory (MemoryCache fixture)
"""
import json  # Payload serialization

import pytest  # Testing framework for writing and running tests
import requests  # HTTP library (Response objects for the fake client)

from frankrate.adapters.cache.memory import MemoryCache  # Cache backend used by service tests

API = "https://api.frankfurter.dev"
LATEST_DATE = "2025-12-17"
HISTORICAL_DATE = "2025-06-13"


def rates_body(day, base, rates, amount=1.0):
    return json.dumps({"amount": amount, "base": base, "date": day, "rates": rates})


NOT_FOUND = (404, json.dumps({"message": "not found"}))


def _routes(path, day):
    prefix = f"{API}/v1/{path}"
    return {
        # rates, all currencies
        f"{prefix}?amount=1&base=EUR": (200, rates_body(day, "EUR", {
            "USD": 1.1722 if path == "latest" else 1.1512,
            "JPY": 182.38 if path == "latest" else 165.94,
            "PHP": 69.122 if path == "latest" else 64.71,
            "CNY": 8.2554 if path == "latest" else 8.2691,
        })),
        f"{prefix}?amount=1&base=USD": (200, rates_body(day, "USD", {
            "EUR": 0.8531 if path == "latest" else 0.86866,
            "PHP": 58.669 if path == "latest" else 56.207,
            "JPY": 155.59 if path == "latest" else 144.14,
        })),
        f"{prefix}?amount=1&base=PHP": (200, rates_body(day, "PHP", {
            "EUR": 0.01454 if path == "latest" else 0.01545,
            "USD": 0.01705 if path == "latest" else 0.01779,
            "JPY": 2.652 if path == "latest" else 2.5645,
        })),
        f"{prefix}?amount=1&base=XBT": NOT_FOUND,
        # rates, whitelist EUR,USD
        f"{prefix}?amount=1&base=EUR&symbols=EUR%2CUSD": (200, rates_body(day, "EUR", {
            "USD": 1.1722 if path == "latest" else 1.1512,
        })),
        f"{prefix}?amount=1&base=USD&symbols=EUR%2CUSD": (200, rates_body(day, "USD", {
            "EUR": 0.8531 if path == "latest" else 0.86866,
        })),
        f"{prefix}?amount=1&base=PHP&symbols=EUR%2CUSD": (200, rates_body(day, "PHP", {
            "EUR": 0.01454 if path == "latest" else 0.01545,
            "USD": 0.01705 if path == "latest" else 0.01779,
        })),
        # unknown currencies in single conversions
        f"{prefix}?amount=1&base=XBT&symbols=USD": NOT_FOUND,
        f"{prefix}?amount=1&base=USD&symbols=XBT": NOT_FOUND,
    }


ROUTES = {
    **_routes("latest", LATEST_DATE),
    **_routes(HISTORICAL_DATE, HISTORICAL_DATE),
    # current single conversions
    f"{API}/v1/latest?amount=1234.56&base=EUR&symbols=USD": (200, rates_body(
        LATEST_DATE, "EUR", {"USD": 1447.15}, 1234.56)),
    f"{API}/v1/latest?amount=1234.56&base=USD&symbols=PHP": (200, rates_body(
        LATEST_DATE, "USD", {"PHP": 72431}, 1234.56)),
    f"{API}/v1/latest?amount=1234.56&base=PHP&symbols=CNY": (200, rates_body(
        LATEST_DATE, "PHP", {"CNY": 148.23}, 1234.56)),
    # current multiconversions
    f"{API}/v1/latest?amount=1234.56&base=EUR": (200, rates_body(
        LATEST_DATE, "EUR", {"USD": 1447.15, "JPY": 225159, "PHP": 84903, "CNY": 10192}, 1234.56)),
    f"{API}/v1/latest?amount=12.3456&base=EUR": (200, rates_body(
        LATEST_DATE, "EUR", {"USD": 14.4715, "JPY": 2251.59, "PHP": 849.03}, 12.3456)),
    f"{API}/v1/latest?amount=1234.56&base=USD": (200, rates_body(
        LATEST_DATE, "USD", {"EUR": 1053.2, "JPY": 192088, "PHP": 72431}, 1234.56)),
    f"{API}/v1/latest?amount=1234.56&base=EUR&symbols=USD%2CJPY%2CPHP%2CBYN": (200, rates_body(
        LATEST_DATE, "EUR", {"USD": 1447.15, "JPY": 225159, "PHP": 84903}, 1234.56)),
    # historical single conversions
    f"{API}/v1/{HISTORICAL_DATE}?amount=1234.56&base=EUR&symbols=USD": (200, rates_body(
        HISTORICAL_DATE, "EUR", {"USD": 1421.23}, 1234.56)),
    f"{API}/v1/{HISTORICAL_DATE}?amount=1234.56&base=USD&symbols=CNY": (200, rates_body(
        HISTORICAL_DATE, "USD", {"CNY": 8867}, 1234.56)),
    f"{API}/v1/{HISTORICAL_DATE}?amount=1234.56&base=CNY&symbols=PHP": (200, rates_body(
        HISTORICAL_DATE, "CNY", {"PHP": 9661}, 1234.56)),
    # historical multiconversions
    f"{API}/v1/{HISTORICAL_DATE}?amount=1234.56&base=EUR": (200, rates_body(
        HISTORICAL_DATE, "EUR", {"USD": 1421.23, "JPY": 204863, "PHP": 79883}, 1234.56)),
    f"{API}/v1/{HISTORICAL_DATE}?amount=12.3456&base=EUR": (200, rates_body(
        HISTORICAL_DATE, "EUR", {"USD": 14.2123, "JPY": 2048.63, "PHP": 798.83}, 12.3456)),
    f"{API}/v1/{HISTORICAL_DATE}?amount=1234.56&base=USD": (200, rates_body(
        HISTORICAL_DATE, "USD", {"EUR": 1072.41, "JPY": 177953, "PHP": 69391}, 1234.56)),
    f"{API}/v1/{HISTORICAL_DATE}?amount=1234.56&base=EUR&symbols=USD%2CJPY%2CPHP%2CBYN": (200, rates_body(
        HISTORICAL_DATE, "EUR", {"USD": 1421.23, "JPY": 204863, "PHP": 79883}, 1234.56)),
}


def make_response(status, body, request=None):
    response = requests.Response()
    response.status_code = status
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    if request is not None:
        response.request = request
        response.url = request.url
    return response


class FakeHttpClient:
    """Records prepared requests and answers from a URL -> (status, body) table."""

    def __init__(self, routes=None, default=None):
        self.routes = dict(ROUTES if routes is None else routes)
        self.default = default
        self.requests = []

    def send(self, request, **kwargs):
        self.requests.append(request)
        if request.url in self.routes:
            status, body = self.routes[request.url]
        elif self.default is not None:
            status, body = self.default
        else:
            raise LookupError(f"Non-mocked URL: {request.url}")
        return make_response(status, body, request)

    @property
    def last_request(self):
        return self.requests[-1]


@pytest.fixture
def http():
    return FakeHttpClient()


@pytest.fixture
def make_http():
    """Factory for fake clients with custom routes or a default answer."""
    return FakeHttpClient


@pytest.fixture
def cache():
    return MemoryCache()
