"""Config schema re-export and validation helpers for statful-client.

Re-exports ``ClientConfiguration`` from the canonical schema module so that
``statful.config`` is a complete import path.

Shipped in this module
----------------------
- ClientConfiguration — re-export with full Pydantic v2 validation
- validate_config     — standalone validation helper
"""
from __future__ import annotations

from pydantic import ValidationError

from statful.schema.config import ClientConfiguration
from statful.schema.errors import ConfigurationError

__all__ = ["ClientConfiguration", "validate_config"]


def validate_config(data: dict[str, object]) -> ClientConfiguration:
    """Validate a raw dict against the ``ClientConfiguration`` schema.

    Raises
    ------
    ConfigurationError
        If the data fails Pydantic validation.  The original
        ``ValidationError`` is attached as the ``__cause__``.

    Examples
    --------
    >>> validate_config({"namespace": "checkout"}).namespace
    'checkout'
    """
    try:
        return ClientConfiguration.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Configuration validation failed: {exc}",
            context={"errors": exc.errors()},
        ) from exc
