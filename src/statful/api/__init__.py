"""API package for statful-client.

Exposes the fluent ``MetricsSenderAPI`` used by instrumented code.
"""
from __future__ import annotations

from statful.api.sender_api import MetricsSenderAPI

__all__ = ["MetricsSenderAPI"]
