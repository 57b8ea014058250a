"""Error taxonomy for statful-client.

All exceptions raised by statful-client derive from ``StatfulError`` so that
callers can catch the entire family with a single ``except StatfulError``
clause while still being able to distinguish individual failure modes.

Shipped in this module
----------------------
- ErrorSeverity      — ordered severity enum
- StatfulError       — root exception with severity and context payload
- Domain subclasses  — ConfigurationError, MessageBuildError,
                       TransportError
"""
from __future__ import annotations

from enum import Enum


class ErrorSeverity(str, Enum):
    """Ordered severity levels for ``StatfulError`` instances.

    Severity is advisory metadata only; logging and alerting code can use
    it to filter by impact level.
    """

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


class StatfulError(Exception):
    """Root exception for all statful-client failures.

    Parameters
    ----------
    message:
        Human-readable description of what went wrong.
    severity:
        Advisory ``ErrorSeverity`` level.  Defaults to ``HIGH``.
    context:
        Optional dict of structured metadata (metric names, paths, etc.).

    Examples
    --------
    >>> try:
    ...     raise StatfulError("something broke", ErrorSeverity.MEDIUM)
    ... except StatfulError as exc:
    ...     print(exc.severity.value)
    medium
    """

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        context: dict[str, object] | None = None,
    ) -> None:
        super().__init__(message)
        self.severity: ErrorSeverity = severity
        self.context: dict[str, object] = context or {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"message={str(self)!r}, "
            f"severity={self.severity.value!r})"
        )


class ConfigurationError(StatfulError):
    """Raised when configuration loading or validation fails.

    Examples: sample rate out of range, unknown aggregation, bad YAML.
    """


class MessageBuildError(StatfulError):
    """Raised by ``MessageBuilder.build`` when the metric name or value is missing.

    The current build is aborted and no line is produced.
    """


class TransportError(StatfulError):
    """Raised when a transport cannot deliver an encoded line."""
