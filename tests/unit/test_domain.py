"""Unit tests for statful.domain — Tags, Aggregations and their enums."""
from __future__ import annotations

import pytest

from statful.domain.aggregations import Aggregation, AggregationFrequency, Aggregations
from statful.domain.tags import Tags


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------


class TestTags:
    def test_new_tags_are_empty(self) -> None:
        tags = Tags()
        assert len(tags) == 0
        assert not tags

    def test_put_tag_and_get_value(self) -> None:
        tags = Tags()
        tags.put_tag("unit", "ms")
        assert tags.get_value("unit") == "ms"

    def test_put_tag_overwrites(self) -> None:
        tags = Tags().put_tag("unit", "ms").put_tag("unit", "s")
        assert tags.get_value("unit") == "s"
        assert len(tags) == 1

    def test_put_tag_does_not_validate_content(self) -> None:
        tags = Tags().put_tag("a key, =", "a value, =")
        assert tags.get_value("a key, =") == "a value, ="

    def test_get_value_unknown_key_returns_none(self) -> None:
        assert Tags().get_value("ghost") is None

    def test_from_pair(self) -> None:
        tags = Tags.from_pair("app", "statful")
        assert tags.tags == {"app": "statful"}

    def test_from_tokens_pairs_alternating_tokens(self) -> None:
        tags = Tags.from_tokens(["unit", "s", "app", "statful"])
        assert tags.tags == {"unit": "s", "app": "statful"}

    def test_from_tokens_empty(self) -> None:
        assert len(Tags.from_tokens([])) == 0

    def test_from_tokens_odd_length_raises(self) -> None:
        with pytest.raises(ValueError, match="pairs"):
            Tags.from_tokens(["unit", "s", "dangling"])

    def test_from_tags_copies(self) -> None:
        original = Tags.from_pair("k", "v")
        copy = Tags.from_tags(original)
        copy.put_tag("k2", "v2")
        assert "k2" not in original
        assert copy.get_value("k") == "v"

    def test_from_tags_none_gives_empty(self) -> None:
        assert len(Tags.from_tags(None)) == 0

    def test_merge_overwrites_collisions(self) -> None:
        local = Tags().put_tag("unit", "ms").put_tag("app", "a")
        local.merge(Tags().put_tag("unit", "s").put_tag("env", "prod"))
        assert local.tags == {"unit": "s", "app": "a", "env": "prod"}

    def test_merge_none_is_noop(self) -> None:
        tags = Tags.from_pair("k", "v")
        assert tags.merge(None) is tags
        assert tags.tags == {"k": "v"}

    def test_merge_returns_self(self) -> None:
        tags = Tags()
        assert tags.merge(Tags.from_pair("a", "b")) is tags

    def test_merge_does_not_mutate_argument(self) -> None:
        other = Tags.from_pair("a", "b")
        Tags.from_pair("c", "d").merge(other)
        assert other.tags == {"a": "b"}

    def test_iteration_yields_items(self) -> None:
        tags = Tags.from_tokens(["a", "1", "b", "2"])
        assert set(tags) == {("a", "1"), ("b", "2")}

    def test_contains(self) -> None:
        tags = Tags.from_pair("a", "1")
        assert "a" in tags
        assert "b" not in tags

    def test_equality(self) -> None:
        assert Tags.from_tokens(["a", "1", "b", "2"]) == Tags.from_tokens(["b", "2", "a", "1"])
        assert Tags.from_pair("a", "1") != Tags.from_pair("a", "2")

    def test_is_empty_or_none(self) -> None:
        assert Tags.is_empty_or_none("k", None)
        assert Tags.is_empty_or_none("", "v")
        assert not Tags.is_empty_or_none("k", "v")

    def test_repr(self) -> None:
        assert "unit" in repr(Tags.from_pair("unit", "s"))


# ---------------------------------------------------------------------------
# Aggregation / AggregationFrequency enums
# ---------------------------------------------------------------------------


class TestAggregationEnums:
    def test_aggregation_values(self) -> None:
        assert {a.value for a in Aggregation} == {
            "avg", "p90", "count", "last", "sum", "first", "p95", "p99", "min", "max",
        }

    def test_aggregation_is_str(self) -> None:
        assert Aggregation.AVG == "avg"

    def test_frequency_values(self) -> None:
        assert [int(f) for f in AggregationFrequency] == [10, 30, 60, 120, 180, 300]

    def test_frequency_lookup_by_int(self) -> None:
        assert AggregationFrequency(120) is AggregationFrequency.FREQ_120


# ---------------------------------------------------------------------------
# Aggregations
# ---------------------------------------------------------------------------


class TestAggregations:
    def test_new_set_is_empty(self) -> None:
        assert len(Aggregations()) == 0

    def test_put_preserves_insertion_order(self) -> None:
        aggs = Aggregations()
        aggs.put(Aggregation.SUM)
        aggs.put(Aggregation.AVG)
        aggs.put(Aggregation.P90)
        assert aggs.aggregations == [Aggregation.SUM, Aggregation.AVG, Aggregation.P90]

    def test_put_collapses_duplicates(self) -> None:
        aggs = Aggregations()
        aggs.put(Aggregation.AVG)
        aggs.put(Aggregation.AVG)
        assert len(aggs) == 1

    def test_put_none_is_noop(self) -> None:
        aggs = Aggregations()
        aggs.put(None)
        assert len(aggs) == 0

    def test_put_accepts_string_value(self) -> None:
        aggs = Aggregations()
        aggs.put("count")  # type: ignore[arg-type]
        assert Aggregation.COUNT in aggs

    def test_put_unknown_string_raises(self) -> None:
        with pytest.raises(ValueError):
            Aggregations().put("median")  # type: ignore[arg-type]

    def test_merge_appends_after_existing(self) -> None:
        aggs = Aggregations.from_values(Aggregation.AVG, Aggregation.COUNT)
        aggs.merge(Aggregations.from_values(Aggregation.COUNT, Aggregation.P99, Aggregation.MIN))
        assert aggs.aggregations == [
            Aggregation.AVG,
            Aggregation.COUNT,
            Aggregation.P99,
            Aggregation.MIN,
        ]

    def test_merge_none_is_noop(self) -> None:
        aggs = Aggregations.from_values(Aggregation.AVG)
        assert aggs.merge(None) is aggs
        assert aggs.aggregations == [Aggregation.AVG]

    def test_merge_empty_is_noop(self) -> None:
        aggs = Aggregations.from_values(Aggregation.AVG)
        aggs.merge(Aggregations())
        assert aggs.aggregations == [Aggregation.AVG]

    def test_from_values_skips_none(self) -> None:
        aggs = Aggregations.from_values(None, Aggregation.LAST)
        assert aggs.aggregations == [Aggregation.LAST]

    def test_iteration_order(self) -> None:
        aggs = Aggregations.from_values(Aggregation.MAX, Aggregation.FIRST)
        assert [a.value for a in aggs] == ["max", "first"]

    def test_equality_is_order_sensitive(self) -> None:
        a = Aggregations.from_values(Aggregation.AVG, Aggregation.SUM)
        b = Aggregations.from_values(Aggregation.SUM, Aggregation.AVG)
        assert a == Aggregations.from_values(Aggregation.AVG, Aggregation.SUM)
        assert a != b

    def test_repr_lists_values(self) -> None:
        assert repr(Aggregations.from_values(Aggregation.AVG)) == "Aggregations([avg])"
