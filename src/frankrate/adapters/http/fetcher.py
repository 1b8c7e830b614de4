# src/frankrate/adapters/http/fetcher.py
"""
Frankfurter Rate Fetcher - HTTP Executor

This module issues the GET request for a fully built Frankfurter URL and
classifies the outcome:
- 200: the body is parsed into a RateTable
- 404 with {"message": "not found"}: RatesNotFoundError (recoverable)
- anything else: HttpFailureError (fatal)

Files that USE this module:
- frankrate.application.frankfurter_service (passes fetch() to the cache gateway)
- tests.test_fetcher (unit tests)

Files that this module USES:
- frankrate.adapters.http.session (HttpClient protocol, RequestFactory)
- frankrate.domain.rate_table (response parsing)
- frankrate.shared.user_agent (User-Agent header)
"""
import json
import logging
from typing import Optional

import requests
from requests.structures import CaseInsensitiveDict

from frankrate.adapters.http.session import HttpClient, HttpSession, RequestFactory
from frankrate.domain.errors import HttpFailureError, RatesNotFoundError
from frankrate.domain.rate_table import RateTable, parse_rate_table
from frankrate.shared.user_agent import build_user_agent

log = logging.getLogger(__name__)


class RatesFetcher:
    """
    Sends GET requests to the Frankfurter API through an injected HTTP client.

    No retries are attempted; timeouts belong to the HTTP client.
    """

    def __init__(
        self,
        http_client: Optional[HttpClient] = None,
        request_factory: RequestFactory = requests.Request,
    ):
        """
        Initialize the fetcher.
        
        Args:
            http_client: Object with send(prepared_request) (defaults to HttpSession())
            request_factory: Callable(method, url) returning a requests.Request
        """
        self.http_client = http_client if http_client is not None else HttpSession()
        self.request_factory = request_factory

    def _prepare(self, url: str) -> requests.PreparedRequest:
        request = self.request_factory("GET", url)
        headers = CaseInsensitiveDict(request.headers or {})
        headers["User-Agent"] = build_user_agent(headers.get("User-Agent"))
        request.headers = headers
        return request.prepare()

    @staticmethod
    def _is_not_found(response: requests.Response) -> bool:
        try:
            body = json.loads(response.text)
        except ValueError:
            return False
        return isinstance(body, dict) and body.get("message") == "not found"

    def fetch(self, url: str) -> RateTable:
        """
        Fetch and parse the rate table behind url.
        
        Returns:
            Parsed RateTable
            
        Raises:
            RatesNotFoundError: The API reported the pair or date as not found
            HttpFailureError: Any other non-200 answer
            MalformedResponseError: A 200 answer without a valid rate table
            requests.exceptions.RequestException: Network level failures
        """
        prepared = self._prepare(url)

        log.info("Fetching rates from %s", prepared.url)
        try:
            response = self.http_client.send(prepared)
        except requests.exceptions.RequestException as e:
            log.error("Frankfurter request failed: %s", e)
            raise

        if response.status_code == 404 and self._is_not_found(response):
            log.warning("Frankfurter has no rates for %s", prepared.url)
            raise RatesNotFoundError.from_response(response)

        if response.status_code != 200:
            log.error("Frankfurter HTTP error %d for %s", response.status_code, prepared.url)
            raise HttpFailureError.from_response(response)

        return parse_rate_table(response.text)
