"""
JSON-RPC Client Metrics

Declares the instruments a client records for each call and exports them
through OpenTelemetry when metrics are set up.
"""

import logging
import threading
from typing import Any, Dict, NamedTuple, Optional

from opentelemetry import metrics
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter

logger = logging.getLogger(__name__)

METER_NAME = "seam_jsonrpc.client"


class Instrument(NamedTuple):
    kind: str
    description: str
    unit: str


CLIENT_INSTRUMENTS: Dict[str, Instrument] = {
    "rpc.client.requests": Instrument(
        "counter", "Requests serialized and handed to the transport", "{request}"),
    "rpc.client.success": Instrument(
        "counter", "Calls that received a valid reply to their own request", "{call}"),
    "rpc.client.errors": Instrument(
        "counter", "Calls that failed, by error kind in the 'type' attribute", "{call}"),
    "rpc.client.latency": Instrument(
        "histogram", "Time from sending a request to receiving the reply bytes", "ms"),
}

# Instruments are created on first use so they bind to the provider in place then
_instruments: Dict[str, Any] = {}
_instruments_lock = threading.Lock()


def setup_metrics(service_name: str, otlp_endpoint: Optional[str] = "localhost:4317", export_interval_ms: int = 5000):
    """Export client metrics to an OTLP collector

    Args:
        service_name: Service name reported with every metric
        otlp_endpoint: OTLP receiver address
        export_interval_ms: Metrics export interval in milliseconds
    """
    reader = PeriodicExportingMetricReader(
        OTLPMetricExporter(endpoint=otlp_endpoint),
        export_interval_millis=export_interval_ms
    )
    provider = MeterProvider(
        metric_readers=[reader],
        resource=Resource.create({"service.name": service_name}),
    )
    metrics.set_meter_provider(provider)

    logger.info(f"Client metrics exported to {otlp_endpoint} every {export_interval_ms}ms")
    return metrics.get_meter(METER_NAME)


def get_instrument(name: str):
    """Return the instrument declared under ``name``, creating it once

    Raises:
        ValueError: ``name`` is not a declared client instrument
    """
    instrument = _instruments.get(name)
    if instrument is not None:
        return instrument

    declared = CLIENT_INSTRUMENTS.get(name)
    if declared is None:
        raise ValueError(f"Unknown client metric: {name}")

    with _instruments_lock:
        instrument = _instruments.get(name)
        if instrument is None:
            meter = metrics.get_meter(METER_NAME)
            create = meter.create_counter if declared.kind == "counter" else meter.create_histogram
            instrument = create(name=name, description=declared.description, unit=declared.unit)
            _instruments[name] = instrument
        return instrument


def increment_counter(name: str, amount: int = 1, attributes: Dict[str, Any] = None):
    """Add ``amount`` to one of the client's counters"""
    get_instrument(name).add(amount, attributes or {})


def record_latency(name: str, value_ms: float, attributes: Dict[str, Any] = None):
    """Record a call latency in milliseconds"""
    get_instrument(name).record(value_ms, attributes or {})
