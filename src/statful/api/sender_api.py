"""Fluent metrics sender API for statful-client.

``MetricsSenderAPI`` collects one metric observation through chained calls
and hands it to a :class:`~statful.sender.base.MetricsSender` on
``send()``.  Invalid metrics and sender failures are logged, never raised,
so instrumentation cannot break the calling code.

Example
-------
::

    from statful import MetricsSenderAPI, TransportMetricsSender, ConsoleTransport

    api = MetricsSenderAPI(TransportMetricsSender(ConsoleTransport()))
    api.with_().metric_name("response_time").value("42").tag("unit", "ms").send()
"""
from __future__ import annotations

import logging
import time

from statful.domain.aggregations import Aggregation, AggregationFrequency, Aggregations
from statful.domain.tags import Tags
from statful.schema.config import ClientConfiguration
from statful.sender.base import MetricsSender

logger = logging.getLogger(__name__)


class MetricsSenderAPI:
    """Builder-style API that validates and sends a single metric.

    Every setter ignores ``None`` and empty strings, leaving the previous
    value in place.

    Parameters
    ----------
    metrics_sender:
        Collaborator that encodes and dispatches the metric.
    """

    def __init__(self, metrics_sender: MetricsSender) -> None:
        self._metrics_sender = metrics_sender
        self._metric_name: str | None = None
        self._value: str | None = None
        self._namespace: str | None = None
        self._tags: Tags | None = None
        self._aggregations: Aggregations | None = None
        self._aggregation_freq: AggregationFrequency | None = None
        self._sample_rate: int | None = None
        self._timestamp: int | None = None

    def with_(self) -> "MetricsSenderAPI":
        """Syntax sugar; returns ``self``."""
        return self

    def metric_name(self, metric_name: str | None) -> "MetricsSenderAPI":
        if metric_name:
            self._metric_name = metric_name
        return self

    def value(self, value: str | int | float | None) -> "MetricsSenderAPI":
        if value is not None and value != "":
            self._value = str(value)
        return self

    def configuration(self, configuration: ClientConfiguration | None) -> "MetricsSenderAPI":
        """Apply namespace, sample rate and global tags/aggregations from *configuration*."""
        if configuration is None:
            return self
        self.namespace(configuration.namespace)
        self._sample_rate = configuration.sample_rate
        for key, tag_value in configuration.tags.items():
            self.tag(key, tag_value)
        self.aggregations(*configuration.aggregations)
        self.agg_freq(configuration.aggregation_frequency)
        return self

    def tag(self, key: str | None, value: str | None) -> "MetricsSenderAPI":
        if not Tags.is_empty_or_none(key, value):
            self._safe_tags().put_tag(key, value)  # type: ignore[arg-type]
        return self

    def tags(self, tags: Tags | None) -> "MetricsSenderAPI":
        if tags is not None:
            self._safe_tags().merge(tags)
        return self

    def aggregations(
        self, *aggregations: Aggregation | Aggregations | None
    ) -> "MetricsSenderAPI":
        """Add individual aggregations and/or merge whole ``Aggregations`` sets."""
        for item in aggregations:
            if item is None:
                continue
            if isinstance(item, Aggregations):
                self._safe_aggregations().merge(item)
            else:
                self._safe_aggregations().put(item)
        return self

    def agg_freq(self, agg_freq: AggregationFrequency | None) -> "MetricsSenderAPI":
        if agg_freq is not None:
            self._aggregation_freq = AggregationFrequency(agg_freq)
        return self

    def namespace(self, namespace: str | None) -> "MetricsSenderAPI":
        if namespace:
            self._namespace = namespace
        return self

    def timestamp(self, timestamp: int | None) -> "MetricsSenderAPI":
        """Override the send-time timestamp (unix seconds)."""
        if timestamp is not None:
            self._timestamp = int(timestamp)
        return self

    def send(self) -> None:
        """Hand the metric to the sender.

        Logs a warning and returns if the metric has no name or value, or if
        the sender raises.
        """
        if not self.is_valid():
            logger.warning(
                "Unable to send metric because it's not valid. "
                "Please set metric name and value."
            )
            return
        try:
            self._metrics_sender.put(
                self._metric_name,  # type: ignore[arg-type]
                self._value,  # type: ignore[arg-type]
                self._tags,
                self._aggregations,
                self._aggregation_freq,
                self._sample_rate,
                self._namespace,
                self._unix_timestamp(),
            )
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "An exception has occurred while sending the metric %r: %s",
                self._metric_name,
                exc,
            )

    def is_valid(self) -> bool:
        return bool(self._metric_name) and bool(self._value)

    def _unix_timestamp(self) -> int:
        if self._timestamp is not None:
            return self._timestamp
        return int(time.time())

    def _safe_tags(self) -> Tags:
        if self._tags is None:
            self._tags = Tags()
        return self._tags

    def _safe_aggregations(self) -> Aggregations:
        if self._aggregations is None:
            self._aggregations = Aggregations()
        return self._aggregations

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def current_metric_name(self) -> str | None:
        return self._metric_name

    @property
    def current_value(self) -> str | None:
        return self._value

    @property
    def current_namespace(self) -> str | None:
        return self._namespace

    @property
    def current_tags(self) -> Tags | None:
        return self._tags

    @property
    def current_aggregations(self) -> Aggregations | None:
        return self._aggregations

    @property
    def current_aggregation_freq(self) -> AggregationFrequency | None:
        return self._aggregation_freq

    @property
    def current_sample_rate(self) -> int | None:
        return self._sample_rate

    def __repr__(self) -> str:
        return (
            f"MetricsSenderAPI(metric_name={self._metric_name!r}, "
            f"value={self._value!r}, namespace={self._namespace!r})"
        )
