"""Observability module for tracing, metrics, and logging."""

from positional_search.observability.context import get_trace_context, set_trace_context, trace_context
from positional_search.observability.logging import JsonFormatter, configure_logging
from positional_search.observability.metrics import (
    INDEX_DOC_COUNT,
    INDEX_TERM_COUNT,
    QUERY_COUNT,
    QUERY_LATENCY,
    get_metrics,
    track_latency,
    write_metrics,
)
from positional_search.observability.tracing import (
    configure_trace_exporter,
    create_span,
    flush_tracing,
    get_tracer,
    init_tracing,
)


__all__ = [
    "INDEX_DOC_COUNT",
    "INDEX_TERM_COUNT",
    "QUERY_COUNT",
    "QUERY_LATENCY",
    "JsonFormatter",
    "configure_logging",
    "configure_trace_exporter",
    "create_span",
    "flush_tracing",
    "get_metrics",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "set_trace_context",
    "trace_context",
    "track_latency",
    "write_metrics",
]
