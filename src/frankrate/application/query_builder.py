# src/frankrate/application/query_builder.py
"""
Query Builder - Request to Frankfurter URL

Deterministic mapping from a request variant and the service configuration
to the endpoint URL. No I/O.

Files that USE this module:
- frankrate.application.frankfurter_service (builds the URL for every request)
- tests.test_query_builder (unit tests)
"""
from typing import Dict
from urllib.parse import quote, urlencode

from frankrate.application.service_config import FrankfurterConfig
from frankrate.domain.models import AnyExchangeRequest, is_conversion, is_current
from frankrate.shared.decimals import format_decimal

LATEST_ENDPOINT = "/v1/latest"
HISTORICAL_ENDPOINT = "/v1/{date}"


def build_query(request: AnyExchangeRequest, config: FrankfurterConfig) -> Dict[str, str]:
    """
    Build query parameters in wire order: amount, base, symbols.
    
    Rate requests, and conversions in multiconversion mode, ask for the whole
    whitelist (no symbols parameter without a whitelist). A single conversion
    asks for its quote currency only.
    """
    conversion = is_conversion(request)
    query = {
        "amount": format_decimal(request.amount) if conversion else "1",
        "base": request.base,
    }

    if not conversion or config.multiconversion:
        if config.symbols is not None:
            query["symbols"] = ",".join(config.symbols)
    else:
        query["symbols"] = request.quote

    return query


def build_path(request: AnyExchangeRequest) -> str:
    if is_current(request):
        return LATEST_ENDPOINT
    return HISTORICAL_ENDPOINT.format(date=request.date.isoformat())


def build_url(request: AnyExchangeRequest, config: FrankfurterConfig) -> str:
    # RFC 3986 encoding: "," becomes %2C, spaces become %20
    query = urlencode(build_query(request, config), quote_via=quote)
    return f"{config.hostname}{build_path(request)}?{query}"
