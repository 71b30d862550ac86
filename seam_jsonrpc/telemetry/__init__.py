"""
OpenTelemetry Integration Module

Provides distributed tracing and metrics collection capabilities:
- tracer: Tracer setup, client spans, trace context injection
- metrics: Declared client instruments and their recording
"""

from .tracer import (
    setup_tracer,
    inject_trace_context,
    create_span
)
from .metrics import (
    setup_metrics,
    increment_counter,
    record_latency
)

__all__ = [
    "setup_tracer",
    "inject_trace_context",
    "create_span",
    "setup_metrics",
    "increment_counter",
    "record_latency"
]
