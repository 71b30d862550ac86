"""
OpenTelemetry Trace Context Management

Provides tracer setup, span creation and trace context injection so that
JSON-RPC calls can be followed across the client/server boundary.
"""

import logging
from typing import Dict, Any, Optional

from opentelemetry import propagate, trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ALWAYS_ON
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

logger = logging.getLogger(__name__)


def setup_tracer(service_name: str, otlp_endpoint: str = "localhost:4317"):
    """Configure OpenTelemetry tracer

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address
    """
    provider = TracerProvider(
        sampler=ALWAYS_ON,
        resource=Resource.create({"service.name": service_name}),
    )

    otlp_exporter = OTLPSpanExporter(endpoint=otlp_endpoint)
    provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    # Set global TracerProvider
    trace.set_tracer_provider(provider)

    tracer = trace.get_tracer(service_name)

    logger.info(f"OpenTelemetry trace configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")

    return tracer


def inject_trace_context(carrier: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Inject the current trace context into a header carrier

    Uses the globally configured propagator (W3C traceparent/baggage by
    default). Nothing is added when there is no active span.

    Args:
        carrier: Header dictionary to update; a new one is created if None

    Returns:
        Dict[str, str]: The carrier
    """
    if carrier is None:
        carrier = {}
    propagate.inject(carrier)
    return carrier


def create_span(name: str, attributes: Dict[str, Any] = None):
    """Create new client span

    Args:
        name: Span name
        attributes: Span attributes

    Returns:
        Span context manager
    """
    tracer = trace.get_tracer(__name__)
    return tracer.start_as_current_span(
        name,
        attributes=attributes or {},
        kind=trace.SpanKind.CLIENT,
    )
