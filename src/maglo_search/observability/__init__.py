"""Observability module for tracing, metrics, and logging."""

from maglo_search.observability.context import bind_table, get_trace_context, set_trace_context, trace_context
from maglo_search.observability.logging import JsonFormatter, configure_logging
from maglo_search.observability.metrics import (
    INDEX_BUILDS,
    INDEX_ROW_COUNT,
    SEARCH_LATENCY,
    SEARCH_RESULTS,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)
from maglo_search.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "INDEX_BUILDS",
    "INDEX_ROW_COUNT",
    "SEARCH_LATENCY",
    "SEARCH_RESULTS",
    "JsonFormatter",
    "bind_table",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_metrics_content_type",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "set_trace_context",
    "trace_context",
    "track_latency",
]
