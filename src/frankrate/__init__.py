# src/frankrate/__init__.py
"""
frankrate - Frankfurter Exchange Rate Adapter

Fetches current and historical exchange rates and currency conversions
from the Frankfurter rate-table API, with pluggable HTTP and cache backends
and typed success/error results.
"""

__version__ = "1.0.0"
