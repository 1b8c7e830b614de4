# src/frankrate/adapters/providers/__init__.py
"""
Provider Adapters - Exchange Rate Service Interface

All services implement the ExchangeRateService interface.
"""

from frankrate.adapters.providers.base import ExchangeRateService

__all__ = [
    "ExchangeRateService",
]
