# src/frankrate/app.py
"""
Application Entry Point - Service Wiring and Command Line

This module serves as the composition root for frankrate. It wires the
cache backend, HTTP session and Frankfurter service from settings, and
exposes a small command line:

    frankrate EUR USD
    frankrate EUR USD --amount 1234.56 --date 2025-06-13

Files that USE this module:
- frankrate console script (pyproject entry point)
- python -m frankrate.app

Files that this module USES:
- frankrate.shared.logging_conf (setup_logging for logging configuration)
- frankrate.config (settings for configuration management)
- frankrate.application.frankfurter_service (FrankfurterService)
- frankrate.adapters.cache (cache backends)
- frankrate.adapters.http.session (HttpSession with timeout)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import argparse  # Command line parsing
import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from datetime import date  # Historical request dates
from typing import List, Optional  # Type hints

import requests  # Network level exceptions

from frankrate.adapters.cache import FileCache, MemoryCache, NullCache, RateCache  # Cache backends
from frankrate.adapters.http.session import HttpSession  # Default HTTP client
from frankrate.application.frankfurter_service import FrankfurterService  # Request dispatcher
from frankrate.config import Settings, settings  # Pydantic settings and global instance
from frankrate.domain.errors import HttpFailureError, MalformedResponseError  # Fatal failures
from frankrate.domain.models import (
    AnyExchangeRequest,
    ConversionResponse,
    CurrentConversionRequest,
    CurrentExchangeRateRequest,
    ErrorResponse,
    ExchangeRateResponse,
    HistoricalConversionRequest,
    HistoricalExchangeRateRequest,
    ServiceResponse,
)
from frankrate.shared.decimals import format_decimal, parse_decimal  # Amount parsing and output
from frankrate.shared.logging_conf import setup_logging  # Configure logging with file rotation
from frankrate.shared.validators import validate_currency_code  # Currency code checks

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DOMAIN_ERROR = 1
EXIT_FAILURE = 2


def build_cache(cfg: Settings) -> RateCache:
    """
    Create the cache backend selected by CACHE_BACKEND.

    Args:
        cfg: Application settings

    Returns:
        NullCache, MemoryCache or FileCache rooted at CACHE_DIR
    """
    if cfg.cache_backend == "file":
        return FileCache(cfg.cache_dir)
    if cfg.cache_backend == "memory":
        return MemoryCache()
    return NullCache()


def build_service(cfg: Optional[Settings] = None) -> FrankfurterService:
    """
    Wire a FrankfurterService from settings.

    Args:
        cfg: Settings to use (defaults to the global settings instance)
    """
    cfg = cfg or settings

    return FrankfurterService(
        hostname=cfg.hostname,
        symbols=cfg.symbol_list,
        multiconversion=cfg.multiconversion,
        cache=build_cache(cfg),
        ttl=cfg.cache_ttl,
        http_client=HttpSession(timeout=cfg.http_timeout_seconds),
    )


def build_request(
    base: str,
    quote: str,
    amount: Optional[str] = None,
    on: Optional[str] = None,
) -> AnyExchangeRequest:
    """
    Pick the request variant from the optional amount and date.

    Raises:
        ValueError: If a currency code, amount or date is malformed
    """
    base, quote = base.upper(), quote.upper()
    for code in (base, quote):
        if not validate_currency_code(code):
            raise ValueError(f"Invalid currency code: {code!r}")

    day = date.fromisoformat(on) if on else None

    if amount is None:
        if day is None:
            return CurrentExchangeRateRequest(base, quote)
        return HistoricalExchangeRateRequest(base, quote, day)

    value = parse_decimal(amount)
    if day is None:
        return CurrentConversionRequest(value, base, quote)
    return HistoricalConversionRequest(value, base, quote, day)


def format_response(request: AnyExchangeRequest, response: ServiceResponse) -> str:
    if isinstance(response, ExchangeRateResponse):
        return f"{request.base}/{request.quote} {format_decimal(response.rate)} ({response.date.isoformat()})"
    if isinstance(response, ConversionResponse):
        return (
            f"{format_decimal(request.amount)} {request.base} = "
            f"{format_decimal(response.amount)} {request.quote} ({response.date.isoformat()})"
        )
    return response.message


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frankrate",
        description="Exchange rates and conversions from the Frankfurter API.",
    )
    parser.add_argument("base", help="base currency code, e.g. EUR")
    parser.add_argument("quote", help="quote currency code, e.g. USD")
    parser.add_argument("--amount", help="amount of base currency to convert")
    parser.add_argument("--date", dest="on", help="historical date, YYYY-MM-DD")
    return parser


def main(argv: Optional[List[str]] = None, cfg: Optional[Settings] = None) -> int:
    """
    Command line entry point.

    Returns:
        0 on success, 1 when the rate is not available, 2 on failures
    """
    parser = _parser()
    args = parser.parse_args(argv)

    cfg = cfg or settings

    setup_logging(
        level=cfg.log_level,
        log_file=cfg.log_file,
        log_dir=cfg.log_dir,
        max_bytes=cfg.log_max_bytes,
        backup_count=cfg.log_backup_count,
        log_stdout=cfg.log_stdout,
    )

    try:
        request = build_request(args.base, args.quote, args.amount, args.on)
    except ValueError as e:
        parser.error(str(e))

    service = build_service(cfg)
    try:
        response = service.send(request)
    except (HttpFailureError, MalformedResponseError, requests.exceptions.RequestException) as e:
        log.error("Request failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if isinstance(response, ErrorResponse):
        print(response.message, file=sys.stderr)
        return EXIT_DOMAIN_ERROR

    print(format_response(request, response))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
