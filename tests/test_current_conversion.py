# tests/test_current_conversion.py
"""
Current Conversion Tests - Latest Conversions and Multiconversion Caching

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- frankrate.application.frankfurter_service (FrankfurterService)
- frankrate.domain (request variants, responses and errors)
"""
from datetime import date
from decimal import Decimal

from frankrate.application.frankfurter_service import FrankfurterService
from frankrate.domain.errors import ConversionNotPerformedError, ErrorKind
from frankrate.domain.models import ConversionResponse, CurrentConversionRequest, ErrorResponse

TODAY = date(2025, 12, 17)
AMOUNT = Decimal("1234.56")


class TestCurrentConversion:
    def test_conversion(self, http, cache):
        service = FrankfurterService(cache=cache, http_client=http)

        response = service.send(CurrentConversionRequest(AMOUNT, "EUR", "USD"))
        assert isinstance(response, ConversionResponse)
        assert str(response.amount) == "1447.15"
        assert response.date == TODAY

        response = service.send(CurrentConversionRequest(AMOUNT, "USD", "PHP"))
        assert isinstance(response, ConversionResponse)
        assert str(response.amount) == "72431"
        assert response.date == TODAY

        response = service.send(CurrentConversionRequest(AMOUNT, "PHP", "CNY"))
        assert isinstance(response, ConversionResponse)
        assert str(response.amount) == "148.23"

        assert http.requests[0].url == (
            "https://api.frankfurter.dev/v1/latest?amount=1234.56&base=EUR&symbols=USD"
        )

    def test_multiconversion(self, http, cache):
        service = FrankfurterService(multiconversion=True, cache=cache, http_client=http)

        response = service.send(CurrentConversionRequest(AMOUNT, "EUR", "USD"))
        assert str(response.amount) == "1447.15"

        response = service.send(CurrentConversionRequest(AMOUNT, "EUR", "JPY"))
        assert isinstance(response, ConversionResponse)
        assert str(response.amount) == "225159"
        assert response.date == TODAY

        response = service.send(CurrentConversionRequest(AMOUNT, "EUR", "PHP"))
        assert str(response.amount) == "84903"

        assert len(http.requests) == 1

        # different amount
        response = service.send(CurrentConversionRequest(Decimal("12.3456"), "EUR", "USD"))
        assert str(response.amount) == "14.4715"

        # different currency
        response = service.send(CurrentConversionRequest(AMOUNT, "USD", "EUR"))
        assert str(response.amount) == "1053.2"
        assert response.date == TODAY

        assert len(http.requests) == 3

    def test_multiconversion_with_symbols(self, http, cache):
        service = FrankfurterService(
            symbols=["USD", "JPY", "PHP", "BYN"],
            multiconversion=True,
            cache=cache,
            http_client=http,
        )

        response = service.send(CurrentConversionRequest(AMOUNT, "EUR", "USD"))
        assert str(response.amount) == "1447.15"

        response = service.send(CurrentConversionRequest(AMOUNT, "EUR", "JPY"))
        assert str(response.amount) == "225159"

        response = service.send(CurrentConversionRequest(AMOUNT, "EUR", "TRY"))
        assert isinstance(response, ErrorResponse)
        assert isinstance(response.exception, ConversionNotPerformedError)
        assert response.kind is ErrorKind.CONVERSION_NOT_PERFORMED
        assert response.message == "Unable to convert 1234.56 EUR to TRY"

        assert len(http.requests) == 1

    def test_single_conversions_do_not_share_cache(self, http, cache):
        service = FrankfurterService(cache=cache, http_client=http)

        service.send(CurrentConversionRequest(AMOUNT, "EUR", "USD"))
        service.send(CurrentConversionRequest(AMOUNT, "EUR", "USD"))  # cached
        service.send(CurrentConversionRequest(AMOUNT, "USD", "PHP"))

        assert len(http.requests) == 2

    def test_invalid_base_currency(self, http, cache):
        service = FrankfurterService(cache=cache, http_client=http)

        response = service.send(CurrentConversionRequest(Decimal(1), "XBT", "USD"))
        assert isinstance(response, ErrorResponse)
        assert isinstance(response.exception, ConversionNotPerformedError)
        assert response.message == "Unable to convert 1 XBT to USD"

    def test_invalid_quote_currency(self, http, cache):
        service = FrankfurterService(cache=cache, http_client=http)

        response = service.send(CurrentConversionRequest(Decimal(1), "USD", "XBT"))
        assert isinstance(response, ErrorResponse)
        assert isinstance(response.exception, ConversionNotPerformedError)
        assert response.message == "Unable to convert 1 USD to XBT"
