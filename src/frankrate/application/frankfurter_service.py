# src/frankrate/application/frankfurter_service.py
"""
Frankfurter Service - Request Dispatcher

This module is the entry point of the adapter. It accepts the four exchange
request variants, builds the Frankfurter URL, fetches the rate table through
the cache gateway and interprets it into a typed result.

Two error channels are kept apart:
- DomainError values (unsupported request, rate not found, conversion not
  performed) are returned wrapped in ErrorResponse
- HttpFailureError and MalformedResponseError are raised to the caller

Files that USE this module:
- frankrate.app (composition root builds the service from settings)
- tests.* (service level tests)

Files that this module USES:
- frankrate.application.query_builder (URL building)
- frankrate.application.cache_gateway (cache short-circuit)
- frankrate.application.interpreter (result classification)
- frankrate.adapters.http.fetcher (HTTP executor)
- frankrate.adapters.cache.base (NullCache default)
"""
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Iterable, Optional

import requests

from frankrate.adapters.cache.base import NullCache, RateCache
from frankrate.adapters.http.fetcher import RatesFetcher
from frankrate.adapters.http.session import HttpClient, RequestFactory
from frankrate.adapters.providers.base import ExchangeRateService
from frankrate.application.cache_gateway import CacheGateway
from frankrate.application.interpreter import interpret
from frankrate.application.query_builder import build_url
from frankrate.application.service_config import DEFAULT_HOSTNAME, DEFAULT_TTL, FrankfurterConfig
from frankrate.domain.errors import RatesNotFoundError, RequestNotSupportedError, rate_not_found
from frankrate.domain.models import (
    SUPPORTED_REQUEST_TYPES,
    AnyExchangeRequest,
    ErrorResponse,
    ServiceResponse,
)

log = logging.getLogger(__name__)


class FrankfurterService(ExchangeRateService):
    """
    Exchange rate service backed by the Frankfurter API.

    Every collaborator is passed explicitly; the defaults are a NullCache,
    a fresh HttpSession and requests.Request.
    """

    def __init__(
        self,
        hostname: str = DEFAULT_HOSTNAME,
        symbols: Optional[Iterable[str]] = None,
        multiconversion: bool = False,
        cache: Optional[RateCache] = None,
        ttl: timedelta = DEFAULT_TTL,
        http_client: Optional[HttpClient] = None,
        request_factory: RequestFactory = requests.Request,
    ):
        """
        Initialize the Frankfurter service.
        
        Args:
            hostname: API base URL; https:// is added when no scheme is given
            symbols: Optional whitelist of quote currencies
            multiconversion: Fetch the whole whitelist for conversions, so
                conversions sharing base, date and amount reuse one cache entry
            cache: Cache backend (defaults to NullCache)
            ttl: Lifetime of cache entries (defaults to 1 hour)
            http_client: Object with send(prepared_request) (defaults to HttpSession)
            request_factory: Callable(method, url) returning a requests.Request
        """
        self.config = FrankfurterConfig(
            hostname=hostname,
            symbols=tuple(symbols) if symbols is not None else None,
            multiconversion=multiconversion,
            ttl=ttl,
        )
        self._gateway = CacheGateway(cache if cache is not None else NullCache(), self.config.ttl)
        self._fetcher = RatesFetcher(http_client, request_factory)

    @property
    def hostname(self) -> str:
        return self.config.hostname

    def supports(self, request: object) -> bool:
        return isinstance(request, SUPPORTED_REQUEST_TYPES)

    def send(self, request: object) -> ServiceResponse:
        """
        Answer an exchange rate or conversion request.
        
        Returns:
            ExchangeRateResponse, ConversionResponse, or ErrorResponse for
            unsupported requests and unknown currency pairs
            
        Raises:
            HttpFailureError: The API answered with an unexpected status
            MalformedResponseError: The API answered 200 without a rate table
        """
        if not self.supports(request):
            log.warning("Unsupported request type: %s", type(request).__name__)
            return ErrorResponse(RequestNotSupportedError.from_request(request))
        return self._perform(request)

    def _perform(self, request: AnyExchangeRequest) -> ServiceResponse:
        url = build_url(request, self.config)
        log.debug("Request %r mapped to %s", request, url)

        try:
            table = self._gateway.fetch_rates(url, self._fetcher.fetch)
        except RatesNotFoundError as e:
            return ErrorResponse(rate_not_found(request, cause=e))

        return interpret(table, request)
