# src/frankrate/domain/rate_table.py
"""
Rate Table - Remote Payload Schema

The Frankfurter body is validated here, at the parse boundary, for both
freshly fetched responses and cached entries.

Files that USE this module:
- frankrate.adapters.http.fetcher (parses HTTP bodies)
- frankrate.application.cache_gateway (revalidates cached entries)
- frankrate.application.interpreter (reads rates and date)
"""
from __future__ import annotations

import datetime as dt
import json
import logging
from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, ValidationError

from frankrate.domain.errors import MalformedResponseError

log = logging.getLogger(__name__)


class RateTable(BaseModel):
    """
    Parsed Frankfurter response body.

    Attributes:
        date: Date the server resolved the request to
        rates: Currency code -> rate (or converted amount for conversions)
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    date: dt.date
    rates: Dict[str, Decimal]


def load_rate_table(data: Any) -> RateTable:
    """
    Validate decoded JSON as a rate table.

    Raises:
        MalformedResponseError: If date or rates are missing or invalid
    """
    try:
        return RateTable.model_validate(data)
    except ValidationError as e:
        log.error("Unexpected rate table structure: %s", data)
        raise MalformedResponseError(f"Unexpected response: {e.error_count()} invalid field(s)") from e


def parse_rate_table(body: str) -> RateTable:
    """
    Decode a response body into a rate table.

    Numbers are decoded as Decimal so the textual value sent by the server
    is kept exactly.

    Raises:
        MalformedResponseError: If the body is not JSON or not a rate table
    """
    try:
        data = json.loads(body, parse_float=Decimal)
    except ValueError as e:
        log.error("Rate table response is not JSON: %r", body[:200])
        raise MalformedResponseError("Unexpected response: body is not JSON") from e
    return load_rate_table(data)
