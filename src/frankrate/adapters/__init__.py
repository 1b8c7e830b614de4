# src/frankrate/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- HTTP (requests-based client and rate fetcher)
- Cache (null, in-memory and file backends)
- Providers (exchange rate service interface)
"""

__all__ = []
