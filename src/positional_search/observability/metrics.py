"""Prometheus metrics for query evaluation."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
import time
from typing import TYPE_CHECKING

from prometheus_client import REGISTRY, Counter, Gauge, Histogram, generate_latest, write_to_textfile


if TYPE_CHECKING:
    from collections.abc import Generator


QUERY_LATENCY = Histogram(
    "positional_search_query_latency_seconds",
    "Query evaluation latency in seconds",
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5),
)

QUERY_COUNT = Counter(
    "positional_search_queries_total",
    "Total queries evaluated",
    ["outcome"],
)

INDEX_DOC_COUNT = Gauge(
    "positional_search_index_document_count",
    "Documents in the loaded index",
)

INDEX_TERM_COUNT = Gauge(
    "positional_search_index_term_count",
    "Terms in the loaded index",
)


@contextmanager
def track_latency(histogram: Histogram) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()


def write_metrics(path: Path | str) -> Path:
    """Write the current metrics to ``path`` in the Prometheus text format.

    The file is replaced atomically, so a node-exporter textfile collector never
    reads a partial snapshot.
    """
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    write_to_textfile(str(output), REGISTRY)
    return output
