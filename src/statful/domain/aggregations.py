"""Aggregation vocabulary and the ordered aggregation set.

Shipped in this module
----------------------
- Aggregation           — server-side reduction functions (``avg``, ``p90``...)
- AggregationFrequency  — window, in seconds, over which aggregations run
- Aggregations          — insertion-ordered set of ``Aggregation`` values
"""
from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, IntEnum


class Aggregation(str, Enum):
    """Reduction functions the Statful backend can apply to a metric."""

    AVG = "avg"
    P90 = "p90"
    COUNT = "count"
    LAST = "last"
    SUM = "sum"
    FIRST = "first"
    P95 = "p95"
    P99 = "p99"
    MIN = "min"
    MAX = "max"


class AggregationFrequency(IntEnum):
    """Aggregation window in seconds."""

    FREQ_10 = 10
    FREQ_30 = 30
    FREQ_60 = 60
    FREQ_120 = 120
    FREQ_180 = 180
    FREQ_300 = 300


class Aggregations:
    """Ordered, duplicate-free collection of ``Aggregation`` values.

    Entries iterate in the order they were first added, so a message built
    from the same calls always renders the same aggregation clause.

    Examples
    --------
    >>> aggs = Aggregations.from_values(Aggregation.AVG, Aggregation.COUNT)
    >>> aggs.put(Aggregation.AVG)
    >>> [a.value for a in aggs]
    ['avg', 'count']
    """

    def __init__(self) -> None:
        # ordered set
        self._aggregations: dict[Aggregation, None] = {}

    @classmethod
    def from_values(cls, *aggregations: Aggregation | None) -> "Aggregations":
        """Build a set from *aggregations*, skipping ``None`` entries."""
        result = cls()
        for aggregation in aggregations:
            result.put(aggregation)
        return result

    def put(self, aggregation: Aggregation | None) -> None:
        """Add *aggregation* unless it is ``None`` or already present."""
        if aggregation is None:
            return
        self._aggregations.setdefault(Aggregation(aggregation), None)

    def merge(self, other: "Aggregations | None") -> "Aggregations":
        """Append the entries of *other* after the existing ones.

        Duplicates are skipped; ``None`` or an empty set is a no-op.
        Returns ``self`` for chaining.
        """
        if other is not None:
            for aggregation in other:
                self.put(aggregation)
        return self

    @property
    def aggregations(self) -> list[Aggregation]:
        """Entries as a list, in insertion order."""
        return list(self._aggregations)

    def __iter__(self) -> Iterator[Aggregation]:
        return iter(self._aggregations)

    def __len__(self) -> int:
        return len(self._aggregations)

    def __contains__(self, aggregation: object) -> bool:
        return aggregation in self._aggregations

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Aggregations):
            return NotImplemented
        return self.aggregations == other.aggregations

    def __repr__(self) -> str:
        names = ", ".join(a.value for a in self._aggregations)
        return f"Aggregations([{names}])"
