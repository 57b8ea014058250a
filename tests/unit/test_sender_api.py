"""Unit tests for statful.api.sender_api (MetricsSenderAPI)."""
from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from statful.api.sender_api import MetricsSenderAPI
from statful.domain.aggregations import Aggregation, AggregationFrequency, Aggregations
from statful.domain.tags import Tags
from statful.schema.config import ClientConfiguration
from statful.sender.base import MetricsSender, TransportMetricsSender
from statful.sender.transport import MemoryTransport


@pytest.fixture()
def sender() -> MagicMock:
    return MagicMock(spec=MetricsSender)


@pytest.fixture()
def api(sender: MagicMock) -> MetricsSenderAPI:
    return MetricsSenderAPI(sender)


# ---------------------------------------------------------------------------
# Fluent setters
# ---------------------------------------------------------------------------


class TestMetricsSenderAPISetters:
    def test_with_returns_self(self, api: MetricsSenderAPI) -> None:
        assert api.with_() is api

    def test_metric_name_and_value(self, api: MetricsSenderAPI) -> None:
        api.metric_name("response_time").value("3")
        assert api.current_metric_name == "response_time"
        assert api.current_value == "3"

    def test_empty_strings_are_ignored(self, api: MetricsSenderAPI) -> None:
        api.metric_name("m").metric_name("").value("1").value("").namespace("ns").namespace("")
        assert api.current_metric_name == "m"
        assert api.current_value == "1"
        assert api.current_namespace == "ns"

    def test_numeric_value(self, api: MetricsSenderAPI) -> None:
        assert api.value(42).current_value == "42"

    def test_tag_adds_entry(self, api: MetricsSenderAPI) -> None:
        api.tag("unit", "ms")
        assert api.current_tags is not None
        assert api.current_tags.get_value("unit") == "ms"

    def test_tag_skips_empty_key_or_value(self, api: MetricsSenderAPI) -> None:
        api.tag("", "ms").tag("unit", None)
        assert api.current_tags is None

    def test_tags_are_merged(self, api: MetricsSenderAPI) -> None:
        api.tag("unit", "ms").tags(Tags().put_tag("unit", "s").put_tag("app", "x"))
        assert api.current_tags is not None
        assert api.current_tags.tags == {"unit": "s", "app": "x"}

    def test_tags_none_is_noop(self, api: MetricsSenderAPI) -> None:
        api.tags(None)
        assert api.current_tags is None

    def test_aggregations_from_values_and_sets(self, api: MetricsSenderAPI) -> None:
        api.aggregations(Aggregation.AVG, None)
        api.aggregations(Aggregations.from_values(Aggregation.AVG, Aggregation.P90))
        assert api.current_aggregations is not None
        assert api.current_aggregations.aggregations == [Aggregation.AVG, Aggregation.P90]

    def test_agg_freq(self, api: MetricsSenderAPI) -> None:
        api.agg_freq(AggregationFrequency.FREQ_30).agg_freq(None)
        assert api.current_aggregation_freq is AggregationFrequency.FREQ_30


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class TestMetricsSenderAPIConfiguration:
    def test_configuration_applies_namespace_and_sample_rate(self, api: MetricsSenderAPI) -> None:
        api.configuration(ClientConfiguration(namespace="checkout", sample_rate=10))
        assert api.current_namespace == "checkout"
        assert api.current_sample_rate == 10

    def test_configuration_applies_global_tags_and_aggregations(
        self, api: MetricsSenderAPI
    ) -> None:
        cfg = ClientConfiguration(
            tags={"env": "prod"},
            aggregations=["avg", "count"],
            aggregation_frequency=60,
        )
        api.configuration(cfg).tag("unit", "ms")
        assert api.current_tags is not None
        assert api.current_tags.tags == {"env": "prod", "unit": "ms"}
        assert api.current_aggregations is not None
        assert api.current_aggregations.aggregations == [Aggregation.AVG, Aggregation.COUNT]
        assert api.current_aggregation_freq is AggregationFrequency.FREQ_60

    def test_configuration_none_is_noop(self, api: MetricsSenderAPI) -> None:
        api.configuration(None)
        assert api.current_namespace is None
        assert api.current_sample_rate is None


# ---------------------------------------------------------------------------
# send()
# ---------------------------------------------------------------------------


class TestMetricsSenderAPISend:
    def test_send_calls_sender_with_all_fields(
        self, api: MetricsSenderAPI, sender: MagicMock
    ) -> None:
        with patch("statful.api.sender_api.time.time", return_value=1700000000.9):
            (
                api.with_()
                .metric_name("response_time")
                .value("3")
                .namespace("ns")
                .tag("unit", "s")
                .aggregations(Aggregation.AVG)
                .agg_freq(AggregationFrequency.FREQ_10)
                .send()
            )
        sender.put.assert_called_once()
        args = sender.put.call_args.args
        assert args[0] == "response_time"
        assert args[1] == "3"
        assert args[2].tags == {"unit": "s"}
        assert args[3].aggregations == [Aggregation.AVG]
        assert args[4] is AggregationFrequency.FREQ_10
        assert args[5] is None
        assert args[6] == "ns"
        assert args[7] == 1700000000

    def test_send_uses_timestamp_override(self, api: MetricsSenderAPI, sender: MagicMock) -> None:
        api.metric_name("m").value("1").timestamp(123).send()
        assert sender.put.call_args.args[7] == 123

    def test_send_without_name_logs_warning(
        self, api: MetricsSenderAPI, sender: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="statful.api.sender_api"):
            api.value("1").send()
        sender.put.assert_not_called()
        assert "not valid" in caplog.text

    def test_send_without_value_logs_warning(
        self, api: MetricsSenderAPI, sender: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="statful.api.sender_api"):
            api.metric_name("m").send()
        sender.put.assert_not_called()
        assert "not valid" in caplog.text

    def test_send_swallows_sender_exceptions(
        self, api: MetricsSenderAPI, sender: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        sender.put.side_effect = RuntimeError("boom")
        with caplog.at_level(logging.WARNING, logger="statful.api.sender_api"):
            api.metric_name("m").value("1").send()
        assert "boom" in caplog.text

    def test_is_valid(self, api: MetricsSenderAPI) -> None:
        assert not api.is_valid()
        assert api.metric_name("m").value("1").is_valid()

    def test_end_to_end_with_transport_sender(self) -> None:
        transport = MemoryTransport()
        api = MetricsSenderAPI(TransportMetricsSender(transport))
        (
            api.configuration(ClientConfiguration(namespace="TEST_NS"))
            .metric_name("response_time")
            .value("3")
            .aggregations(Aggregation.AVG, Aggregation.COUNT)
            .agg_freq(AggregationFrequency.FREQ_10)
            .timestamp(121232323)
            .send()
        )
        assert transport.lines == ["TEST_NS.response_time 3 121232323 avg,count,10 100"]

    def test_repr(self, api: MetricsSenderAPI) -> None:
        assert "response_time" in repr(api.metric_name("response_time"))
