#!/usr/bin/env python3
"""Example: Quickstart

Encodes one metric with ``MessageBuilder`` and sends another through the
fluent ``MetricsSenderAPI``.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install statful-client
"""
from __future__ import annotations

import statful
from statful import (
    Aggregation,
    AggregationFrequency,
    Aggregations,
    ClientConfiguration,
    ConsoleTransport,
    MessageBuilder,
    MetricsSenderAPI,
    Tags,
    TransportMetricsSender,
)


def main() -> None:
    print(f"statful-client version: {statful.__version__}")

    # Step 1: Encode a line directly
    line = (
        MessageBuilder.new_builder()
        .with_namespace("TEST_NS")
        .with_name("response_time")
        .with_value("3")
        .with_tags(Tags.from_tokens(["unit", "s", "app", "statful"]))
        .with_aggregations(Aggregations.from_values(Aggregation.AVG, Aggregation.COUNT))
        .with_aggregation_freq(AggregationFrequency.FREQ_10)
        .with_timestamp(121232323)
        .with_sample_rate(100)
        .build()
    )
    print(f"Encoded: {line}")

    # Step 2: Send through the API with a configuration
    config = ClientConfiguration(namespace="checkout", tags={"env": "dev"})
    sender = TransportMetricsSender(ConsoleTransport())
    (
        MetricsSenderAPI(sender)
        .configuration(config)
        .metric_name("orders")
        .value(1)
        .aggregations(Aggregation.SUM)
        .agg_freq(AggregationFrequency.FREQ_60)
        .send()
    )
    print(f"Lines sent: {sender.sent_count}")


if __name__ == "__main__":
    main()
