"""Domain value objects for statful-client: tags and aggregations."""
from __future__ import annotations

from statful.domain.aggregations import Aggregation, AggregationFrequency, Aggregations
from statful.domain.tags import Tags

__all__ = [
    "Tags",
    "Aggregation",
    "AggregationFrequency",
    "Aggregations",
]
