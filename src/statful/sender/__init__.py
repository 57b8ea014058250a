"""Sender package for statful-client.

Provides the metric sender abstraction and line transports.
"""
from __future__ import annotations

from statful.sender.base import MetricsSender, TransportMetricsSender
from statful.sender.transport import (
    ConsoleTransport,
    FileTransport,
    MemoryTransport,
    NullTransport,
    Transport,
)

__all__ = [
    "MetricsSender",
    "TransportMetricsSender",
    "Transport",
    "ConsoleTransport",
    "FileTransport",
    "MemoryTransport",
    "NullTransport",
]
