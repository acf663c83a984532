"""Prometheus metrics for search latency and index churn."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


SEARCH_LATENCY = Histogram(
    "maglo_search_latency_seconds",
    "Filter-and-rank latency per table",
    ["table"],
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25),
)

SEARCH_RESULTS = Histogram(
    "maglo_search_results",
    "Rows returned per search",
    ["table"],
    buckets=(0, 1, 5, 10, 25, 50, 100, 250, 1000),
)

INDEX_BUILDS = Counter(
    "maglo_search_index_builds_total",
    "Index rebuilds triggered by row collection changes",
    ["table"],
)

INDEX_ROW_COUNT = Gauge(
    "maglo_search_index_rows",
    "Rows in the current index",
    ["table"],
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.labels(**labels).observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()


def get_metrics_content_type() -> str:
    """Get content type for metrics endpoint."""
    return CONTENT_TYPE_LATEST
