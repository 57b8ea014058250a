"""Metric senders for statful-client.

A ``MetricsSender`` receives the fields of one metric observation from the
sender API and is responsible for getting the encoded line to the backend.

Shipped in this module
----------------------
- MetricsSender           — ABC consumed by ``MetricsSenderAPI``
- TransportMetricsSender  — encodes with ``MessageBuilder``, samples, and
                            hands lines to a ``Transport``
"""
from __future__ import annotations

import logging
import random
import threading
from abc import ABC, abstractmethod

from statful.domain.aggregations import AggregationFrequency, Aggregations
from statful.domain.tags import Tags
from statful.message.builder import MessageBuilder
from statful.sender.transport import Transport

logger = logging.getLogger(__name__)

_FULL_SAMPLE_RATE = 100


class MetricsSender(ABC):
    """Abstract collaborator that dispatches one metric observation."""

    @abstractmethod
    def put(
        self,
        name: str,
        value: str,
        tags: Tags | None,
        aggregations: Aggregations | None,
        aggregation_frequency: AggregationFrequency | None,
        sample_rate: int | None,
        namespace: str | None,
        timestamp: int,
    ) -> None:
        """Encode and dispatch one metric.

        Parameters
        ----------
        name:
            Metric name (mandatory).
        value:
            Metric value as a string (mandatory).
        tags:
            Tags to attach, or ``None``.
        aggregations:
            Aggregations the backend should compute, or ``None``.
        aggregation_frequency:
            Aggregation window, or ``None``.
        sample_rate:
            Percentage of observations sent, or ``None`` for all.
        namespace:
            Metric namespace, or ``None``.
        timestamp:
            Unix timestamp in seconds.
        """


class TransportMetricsSender(MetricsSender):
    """Sender that writes encoded lines to a :class:`Transport`.

    When a sample rate below 100 is given, each metric is dispatched with a
    probability of ``sample_rate`` percent.

    Parameters
    ----------
    transport:
        Destination for encoded lines.
    dry_run:
        When ``True`` lines are logged at INFO level instead of sent.
    rng:
        Random source used for sampling.  Defaults to a private
        ``random.Random`` instance.

    Examples
    --------
    >>> from statful.sender.transport import MemoryTransport
    >>> transport = MemoryTransport()
    >>> sender = TransportMetricsSender(transport)
    >>> sender.put("hits", "1", None, None, None, None, "web", 1700000000)
    >>> transport.lines
    ['web.hits 1 1700000000']
    """

    def __init__(
        self,
        transport: Transport,
        *,
        dry_run: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        self._transport = transport
        self._dry_run = dry_run
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._sent = 0
        self._sampled_out = 0

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def sent_count(self) -> int:
        """Number of lines handed to the transport (or logged in dry-run)."""
        with self._lock:
            return self._sent

    @property
    def sampled_out_count(self) -> int:
        """Number of metrics dropped by client-side sampling."""
        with self._lock:
            return self._sampled_out

    def put(
        self,
        name: str,
        value: str,
        tags: Tags | None,
        aggregations: Aggregations | None,
        aggregation_frequency: AggregationFrequency | None,
        sample_rate: int | None,
        namespace: str | None,
        timestamp: int,
    ) -> None:
        """Encode the metric and send it unless sampling drops it.

        Raises
        ------
        MessageBuildError
            If *name* or *value* is empty.
        TransportError
            If the transport fails to deliver the line.
        """
        line = (
            MessageBuilder.new_builder()
            .with_namespace(namespace)
            .with_name(name)
            .with_value(value)
            .with_tags(tags)
            .with_aggregations(aggregations)
            .with_aggregation_freq(aggregation_frequency)
            .with_timestamp(timestamp)
            .with_sample_rate(sample_rate)
            .build()
        )

        if not self._should_send(sample_rate):
            with self._lock:
                self._sampled_out += 1
            logger.debug("Metric %r dropped by sampling (rate=%s)", name, sample_rate)
            return

        if self._dry_run:
            logger.info("Dry run, not sending metric line: %s", line)
        else:
            self._transport.send(line)
            logger.debug("Sent metric line: %s", line)

        with self._lock:
            self._sent += 1

    def flush(self) -> None:
        self._transport.flush()

    def _should_send(self, sample_rate: int | None) -> bool:
        if sample_rate is None or sample_rate >= _FULL_SAMPLE_RATE:
            return True
        return self._rng.randint(1, _FULL_SAMPLE_RATE) <= sample_rate

    def __repr__(self) -> str:
        return (
            f"TransportMetricsSender(transport={type(self._transport).__name__}, "
            f"dry_run={self._dry_run})"
        )
