"""Default configuration constants for statful-client.

``DEFAULT_CONFIG`` is the starting point used by ``ConfigLoader.load_auto()``
before applying file or environment overrides.
"""
from __future__ import annotations

from statful.schema.config import ClientConfiguration

DEFAULT_CONFIG: ClientConfiguration = ClientConfiguration(
    namespace="application",
    sample_rate=100,
    tags={},
    aggregations=[],
    aggregation_frequency=None,
    dry_run=False,
)
"""Baseline ``ClientConfiguration`` used when no file or env config is present."""
