# src/frankrate/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and an optional .env file.
"""

from frankrate.config.settings import DEFAULT_HOSTNAME, Settings, settings

__all__ = ["DEFAULT_HOSTNAME", "Settings", "settings"]
