"""OpenTelemetry tracing helpers."""

from __future__ import annotations

from contextlib import contextmanager
import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import SpanKind, Status, StatusCode

from positional_search.observability.context import update_trace_context


if TYPE_CHECKING:
    from collections.abc import Generator

    from opentelemetry.trace import Span, Tracer

logger = logging.getLogger(__name__)

_tracer_holder: dict[str, Any] = {"tracer": None, "provider": None, "exporter": None}

TRACE_EXPORTERS = ("none", "console")


def init_tracing(
    service_name: str = "positional-search",
    resource_attributes: dict[str, str] | None = None,
) -> TracerProvider:
    """Initialize OpenTelemetry tracing; later calls return the first provider."""
    existing = _tracer_holder["provider"]
    if isinstance(existing, TracerProvider):
        return existing

    attributes = {"service.name": service_name}
    if resource_attributes:
        attributes.update(resource_attributes)
    provider = TracerProvider(resource=Resource.create(attributes))
    trace.set_tracer_provider(provider)
    _tracer_holder["provider"] = provider
    _tracer_holder["tracer"] = trace.get_tracer(__name__)
    logger.debug("Tracing initialized for service: %s", service_name)
    return provider


def configure_trace_exporter(
    exporter_name: str,
    provider: TracerProvider | None = None,
    *,
    stream: TextIO | None = None,
) -> bool:
    """Attach a span exporter to an initialized tracer provider.

    ``console`` writes one JSON document per finished span to ``stream``
    (stderr by default, so stdout stays free for results). ``none`` keeps spans
    in-process, where they only feed trace ids into log records.

    Returns:
        True when an exporter is attached after the call.
    """
    if exporter_name not in TRACE_EXPORTERS:
        raise ValueError(f"Unknown trace exporter {exporter_name!r}; expected one of {', '.join(TRACE_EXPORTERS)}")
    if exporter_name == "none":
        return False
    if _tracer_holder["exporter"] is not None:
        return True

    active_provider = provider or trace.get_tracer_provider()
    if not isinstance(active_provider, TracerProvider):
        active_provider = init_tracing()

    exporter = ConsoleSpanExporter(out=stream or sys.stderr)
    active_provider.add_span_processor(BatchSpanProcessor(exporter))
    _tracer_holder["exporter"] = exporter
    logger.info("Trace export enabled (%s)", exporter_name)
    return True


def flush_tracing(timeout_millis: int = 5000) -> None:
    """Export any spans still buffered by the batch processor."""
    provider = _tracer_holder["provider"]
    if isinstance(provider, TracerProvider) and not provider.force_flush(timeout_millis):
        logger.warning("Timed out flushing spans after %d ms", timeout_millis)


def get_tracer() -> Tracer:
    """Return the configured tracer, falling back to the global (no-op) one."""
    tracer = _tracer_holder["tracer"]
    if tracer is None:
        tracer = trace.get_tracer(__name__)
        _tracer_holder["tracer"] = tracer
    return tracer


@contextmanager
def create_span(
    name: str,
    kind: SpanKind = SpanKind.INTERNAL,
    attributes: dict[str, Any] | None = None,
) -> Generator[Span, None, None]:
    """Create a traced span and publish its ids to the logging context."""
    tracer = get_tracer()
    with tracer.start_as_current_span(name, kind=kind) as span:
        if attributes:
            for key, value in attributes.items():
                span.set_attribute(key, value)

        ctx = span.get_span_context()
        if ctx.is_valid:
            update_trace_context(format(ctx.trace_id, "032x"), format(ctx.span_id, "016x"))

        try:
            yield span
        except Exception as exc:
            span.set_status(Status(StatusCode.ERROR, str(exc)))
            span.record_exception(exc)
            raise
