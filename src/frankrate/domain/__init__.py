# src/frankrate/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains request variants, rate tables, results and the
error taxonomy. No dependencies on HTTP or cache backends.
"""

from frankrate.domain.models import (
    SUPPORTED_REQUEST_TYPES,
    ConversionResponse,
    CurrentConversionRequest,
    CurrentExchangeRateRequest,
    ErrorResponse,
    ExchangeRateResponse,
    ExchangeRequest,
    HistoricalConversionRequest,
    HistoricalExchangeRateRequest,
    is_conversion,
    is_current,
)
from frankrate.domain.errors import (
    ConversionNotPerformedError,
    DomainError,
    ErrorKind,
    ExchangeRateNotFoundError,
    HttpFailureError,
    MalformedResponseError,
    RatesNotFoundError,
    RequestNotSupportedError,
    rate_not_found,
)
from frankrate.domain.rate_table import RateTable, load_rate_table, parse_rate_table

__all__ = [
    "ExchangeRequest",
    "CurrentExchangeRateRequest",
    "HistoricalExchangeRateRequest",
    "CurrentConversionRequest",
    "HistoricalConversionRequest",
    "SUPPORTED_REQUEST_TYPES",
    "is_current",
    "is_conversion",
    "RateTable",
    "load_rate_table",
    "parse_rate_table",
    "ExchangeRateResponse",
    "ConversionResponse",
    "ErrorResponse",
    "DomainError",
    "ErrorKind",
    "RequestNotSupportedError",
    "ExchangeRateNotFoundError",
    "ConversionNotPerformedError",
    "rate_not_found",
    "HttpFailureError",
    "RatesNotFoundError",
    "MalformedResponseError",
]
