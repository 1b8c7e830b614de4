# src/frankrate/shared/decimals.py
"""
Decimal Helpers - Canonical Decimal Strings

Files that USE this module:
- frankrate.application.query_builder (amount query parameter)
- frankrate.domain.errors (amounts in conversion error messages)
- frankrate.app (amount argument parsing)
"""
from decimal import Decimal, InvalidOperation
from typing import Union


def format_decimal(value: Union[Decimal, int, str]) -> str:
    """
    Render a decimal in plain notation without trailing fractional zeros.

    Examples: Decimal("1234.56") -> "1234.56", Decimal("1E+3") -> "1000",
    Decimal("12.50") -> "12.5", 1 -> "1".
    """
    text = format(Decimal(value), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def parse_decimal(text: str) -> Decimal:
    """
    Parse a user-supplied amount.

    Raises:
        ValueError: If the text is not a finite decimal number
    """
    try:
        value = Decimal(text.strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid decimal amount: {text!r}") from e
    if not value.is_finite():
        raise ValueError(f"Invalid decimal amount: {text!r}")
    return value
