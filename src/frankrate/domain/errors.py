# src/frankrate/domain/errors.py
"""
Domain Errors - Exchange Rate Exceptions

This module defines the two error channels of the adapter:
- DomainError subclasses are recoverable outcomes, returned wrapped in an
  ErrorResponse (unsupported request, rate not found, conversion not performed)
- HttpFailureError and MalformedResponseError are fatal and always raised
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

import requests

from frankrate.domain.models import AnyExchangeRequest, is_conversion, is_current
from frankrate.shared.decimals import format_decimal


class ErrorKind(str, Enum):
    UNSUPPORTED_REQUEST = "unsupported_request"
    RATE_NOT_FOUND = "rate_not_found"
    CONVERSION_NOT_PERFORMED = "conversion_not_performed"


class DomainError(Exception):
    """Base exception for errors returned to the caller as values."""
    kind: ErrorKind


class RequestNotSupportedError(DomainError):
    """The service does not handle this kind of request."""
    kind = ErrorKind.UNSUPPORTED_REQUEST

    @classmethod
    def from_request(cls, request: object) -> "RequestNotSupportedError":
        return cls(f'Unsupported request type: "{type(request).__name__}"')


def _date_suffix(request: AnyExchangeRequest) -> str:
    if is_current(request):
        return ""
    return f" on {request.date.isoformat()}"


class ExchangeRateNotFoundError(DomainError):
    """No rate is available for the requested currency pair."""
    kind = ErrorKind.RATE_NOT_FOUND

    @classmethod
    def from_request(
        cls, request: AnyExchangeRequest, cause: Optional[BaseException] = None
    ) -> "ExchangeRateNotFoundError":
        error = cls(
            f"Unable to find exchange rate for {request.base}/{request.quote}"
            f"{_date_suffix(request)}"
        )
        error.__cause__ = cause
        return error


class ConversionNotPerformedError(DomainError):
    """The requested amount could not be converted."""
    kind = ErrorKind.CONVERSION_NOT_PERFORMED

    @classmethod
    def from_request(
        cls, request: AnyExchangeRequest, cause: Optional[BaseException] = None
    ) -> "ConversionNotPerformedError":
        error = cls(
            f"Unable to convert {format_decimal(request.amount)} {request.base} "
            f"to {request.quote}{_date_suffix(request)}"
        )
        error.__cause__ = cause
        return error


def rate_not_found(
    request: AnyExchangeRequest, cause: Optional[BaseException] = None
) -> DomainError:
    """
    Build the not-found error matching the request variant.

    Conversion requests report ConversionNotPerformedError, rate requests
    report ExchangeRateNotFoundError.

    Args:
        request: The request that could not be answered
        cause: Optional underlying failure (the remote 404), chained as __cause__
    """
    if is_conversion(request):
        return ConversionNotPerformedError.from_request(request, cause)
    return ExchangeRateNotFoundError.from_request(request, cause)


class HttpFailureError(RuntimeError):
    """Raised when the remote API answers with an unexpected HTTP status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f'HTTP error {status_code}. Response is "{body}"')
        self.status_code = status_code
        self.body = body

    @classmethod
    def from_response(cls, response: requests.Response) -> "HttpFailureError":
        return cls(response.status_code, response.text)


class RatesNotFoundError(HttpFailureError):
    """The documented 404 {"message": "not found"} answer for an unknown pair or date."""


class MalformedResponseError(RuntimeError):
    """A successful response (or cached entry) does not hold a valid rate table."""
