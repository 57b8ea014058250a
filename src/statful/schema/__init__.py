"""Schema package for statful-client.

Exports the error taxonomy and the validated client configuration model.
"""
from __future__ import annotations

from statful.schema.config import ClientConfiguration
from statful.schema.errors import (
    ConfigurationError,
    ErrorSeverity,
    MessageBuildError,
    StatfulError,
    TransportError,
)

__all__ = [
    # Errors
    "ErrorSeverity",
    "StatfulError",
    "ConfigurationError",
    "MessageBuildError",
    "TransportError",
    # Config
    "ClientConfiguration",
]
