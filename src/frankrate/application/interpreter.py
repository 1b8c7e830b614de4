# src/frankrate/application/interpreter.py
"""
Response Interpreter - Rate Table to Typed Result

Files that USE this module:
- frankrate.application.frankfurter_service
- tests.test_interpreter (unit tests)
"""
from frankrate.domain.errors import rate_not_found
from frankrate.domain.models import (
    AnyExchangeRequest,
    ConversionResponse,
    ErrorResponse,
    ExchangeRateResponse,
    ServiceResponse,
    is_conversion,
)
from frankrate.domain.rate_table import RateTable


def interpret(table: RateTable, request: AnyExchangeRequest) -> ServiceResponse:
    """
    Pick the requested quote currency out of the rate table.

    The value is returned as-is: for conversions the server already applied
    the amount. The result date is always the date reported by the server.
    """
    value = table.rates.get(request.quote)
    if value is None:
        return ErrorResponse(rate_not_found(request))

    if is_conversion(request):
        return ConversionResponse(amount=value, date=table.date)
    return ExchangeRateResponse(rate=value, date=table.date)
