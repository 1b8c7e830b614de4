# src/frankrate/adapters/providers/base.py
"""
Base Service Interface for Exchange Rate Services

This module defines the abstract base class for exchange rate services.
It establishes the contract that all service implementations must follow.

Files that USE this module:
- frankrate.application.frankfurter_service (FrankfurterService implements ExchangeRateService)
- frankrate.app (type of the service built from settings)

Files that this module USES:
- frankrate.domain.models (response types)
"""
from abc import ABC, abstractmethod

from frankrate.domain.models import ServiceResponse


class ExchangeRateService(ABC):
    @abstractmethod
    def send(self, request: object) -> ServiceResponse:
        """Answer a request; unsupported requests yield an ErrorResponse."""
        raise NotImplementedError

    @abstractmethod
    def supports(self, request: object) -> bool:
        """Return True when send() would handle the request."""
        raise NotImplementedError
