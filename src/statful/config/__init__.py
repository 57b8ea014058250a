"""Config package for statful-client.

Provides configuration loading, validation, and sensible defaults.
"""
from __future__ import annotations

from statful.config.defaults import DEFAULT_CONFIG
from statful.config.loader import ConfigLoader
from statful.config.schema import ClientConfiguration, validate_config

__all__ = [
    "ClientConfiguration",
    "validate_config",
    "ConfigLoader",
    "DEFAULT_CONFIG",
]
