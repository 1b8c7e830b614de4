# src/frankrate/domain/models.py
"""
Domain Models - Requests and Results

This module contains the domain objects that flow through the adapter:
- The four exchange request variants (current/historical, rate/conversion)
- The typed results returned to callers

Files that USE this module:
- frankrate.application.* (query builder, gateway, interpreter, service)
- frankrate.domain.errors (message formatting for not-found errors)
- tests.* (tests build requests and inspect results)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import datetime as dt  # Calendar dates for historical requests and results
from dataclasses import dataclass  # Decorator for creating data classes
from decimal import Decimal  # Arbitrary-precision amounts and rates
from typing import TYPE_CHECKING, Optional, Union  # Type hints

if TYPE_CHECKING:  # pragma: no cover
    from frankrate.domain.errors import DomainError, ErrorKind


class ExchangeRequest:
    """Marker base class for the supported request variants."""
    __slots__ = ()


@dataclass(frozen=True)
class CurrentExchangeRateRequest(ExchangeRequest):
    """Latest rate of `quote` priced in `base`."""
    base: str
    quote: str


@dataclass(frozen=True)
class HistoricalExchangeRateRequest(ExchangeRequest):
    """Rate of `quote` priced in `base` on a given date."""
    base: str
    quote: str
    date: dt.date


@dataclass(frozen=True)
class CurrentConversionRequest(ExchangeRequest):
    """Convert `amount` of `base` into `quote` at the latest rate."""
    amount: Decimal
    base: str
    quote: str


@dataclass(frozen=True)
class HistoricalConversionRequest(ExchangeRequest):
    """Convert `amount` of `base` into `quote` at the rate of a given date."""
    amount: Decimal
    base: str
    quote: str
    date: dt.date


AnyExchangeRequest = Union[
    CurrentExchangeRateRequest,
    HistoricalExchangeRateRequest,
    CurrentConversionRequest,
    HistoricalConversionRequest,
]

# Every ExchangeRequest subclass must be listed here (checked in tests)
SUPPORTED_REQUEST_TYPES = (
    CurrentExchangeRateRequest,
    HistoricalExchangeRateRequest,
    CurrentConversionRequest,
    HistoricalConversionRequest,
)


def is_current(request: AnyExchangeRequest) -> bool:
    """True when the request carries no explicit date."""
    return isinstance(request, (CurrentExchangeRateRequest, CurrentConversionRequest))


def is_conversion(request: AnyExchangeRequest) -> bool:
    """True when the request carries an amount to convert."""
    return isinstance(request, (CurrentConversionRequest, HistoricalConversionRequest))


@dataclass(frozen=True)
class ExchangeRateResponse:
    rate: Decimal
    date: dt.date


@dataclass(frozen=True)
class ConversionResponse:
    amount: Decimal
    date: dt.date


@dataclass(frozen=True)
class ErrorResponse:
    """
    Recoverable domain error returned by value.

    Fatal transport failures are raised instead and never end up here.
    """
    exception: DomainError

    @property
    def kind(self) -> ErrorKind:
        return self.exception.kind

    @property
    def message(self) -> str:
        return str(self.exception)

    @property
    def cause(self) -> Optional[BaseException]:
        return self.exception.__cause__


ServiceResponse = Union[ExchangeRateResponse, ConversionResponse, ErrorResponse]
