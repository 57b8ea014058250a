"""Benchmark: MessageBuilder encoding throughput.

Measures how many fully-populated metric lines can be built per second,
with and without characters that need escaping.
"""
from __future__ import annotations

import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from statful.domain.aggregations import Aggregation, AggregationFrequency, Aggregations
from statful.domain.tags import Tags
from statful.message.builder import MessageBuilder

_ITERATIONS: int = 50_000


def _run(namespace: str, name: str, tags: Tags, operation: str) -> dict[str, object]:
    aggregations = Aggregations.from_values(Aggregation.AVG, Aggregation.P90, Aggregation.COUNT)

    start = time.perf_counter()
    for i in range(_ITERATIONS):
        (
            MessageBuilder.new_builder()
            .with_namespace(namespace)
            .with_name(name)
            .with_value(i)
            .with_tags(tags)
            .with_aggregations(aggregations)
            .with_aggregation_freq(AggregationFrequency.FREQ_10)
            .with_timestamp(1700000000)
            .with_sample_rate(100)
            .build()
        )
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": operation,
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_encode] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_encode_plain() -> dict[str, object]:
    """Benchmark encoding with no characters to escape."""
    tags = Tags.from_tokens(["unit", "ms", "app", "checkout", "env", "prod"])
    return _run("application", "response_time", tags, "encode_plain")


def bench_encode_escaped() -> dict[str, object]:
    """Benchmark encoding where every field needs escaping."""
    tags = Tags.from_tokens(["a unit,", "m s=", "an app", "check, out"])
    return _run("my application", "response time, p=1", tags, "encode_escaped")


if __name__ == "__main__":
    bench_encode_plain()
    bench_encode_escaped()
