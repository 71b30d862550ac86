"""
Tests for trace context injection and client metrics
"""
import json
import threading
import time

import pytest
from opentelemetry.sdk.trace import TracerProvider

from seam_jsonrpc.adapters.adapter_interface import TransportInterface
from seam_jsonrpc.rpc.client import Client
from seam_jsonrpc.rpc.errors import NonceMismatchError
from seam_jsonrpc.telemetry import metrics
from seam_jsonrpc.telemetry.tracer import create_span, inject_trace_context


class RecordingTransport(TransportInterface):
    """Replies with a fixed id so every other call is a nonce mismatch"""

    def send(self, endpoint, payload, auth_header=None):
        return json.dumps({"jsonrpc": "2.0", "id": 1, "result": True}).encode()

    def close(self):
        pass


def test_inject_without_span_is_empty():
    """Nothing is propagated outside a span"""
    assert inject_trace_context() == {}


def test_inject_inside_span():
    """The active span is propagated as a W3C traceparent header"""
    tracer = TracerProvider().get_tracer("test")
    with tracer.start_as_current_span("outer") as span:
        carrier = inject_trace_context({"Content-Type": "application/json"})

    trace_id = format(span.get_span_context().trace_id, "032x")
    assert carrier["Content-Type"] == "application/json"
    assert trace_id in carrier["traceparent"]


def test_create_span_is_context_manager():
    with create_span("jsonrpc.test", {"rpc.method": "m"}):
        pass


def test_client_counts_outcomes(monkeypatch):
    """Success and failure of execute are counted by kind"""
    recorded = []
    monkeypatch.setattr(
        "seam_jsonrpc.rpc.client.increment_counter",
        lambda name, amount=1, attributes=None: recorded.append((name, attributes)),
    )

    client = Client("http://localhost:8332", transport=RecordingTransport())
    client.execute(client.build_request("first"))
    with pytest.raises(NonceMismatchError):
        client.execute(client.build_request("second"))

    names = [name for name, _ in recorded]
    assert names == [
        "rpc.client.requests",
        "rpc.client.success",
        "rpc.client.requests",
        "rpc.client.errors",
    ]
    assert recorded[-1][1] == {"type": "nonce_mismatch", "method": "second"}


class RecordingMeter:
    """Meter that hands out plain objects and remembers what it was asked for"""

    def __init__(self):
        self.created = []

    def _create(self, kind, name, description, unit):
        time.sleep(0.01)
        self.created.append((kind, name, description, unit))
        return object()

    def create_counter(self, name, description="", unit=""):
        return self._create("counter", name, description, unit)

    def create_histogram(self, name, description="", unit=""):
        return self._create("histogram", name, description, unit)


@pytest.fixture
def meter(monkeypatch):
    recording = RecordingMeter()
    monkeypatch.setattr(metrics, "_instruments", {})
    monkeypatch.setattr(metrics.metrics, "get_meter", lambda name: recording)
    return recording


def test_instruments_use_declared_description_and_unit(meter):
    metrics.get_instrument("rpc.client.errors")
    metrics.get_instrument("rpc.client.latency")

    assert meter.created == [
        ("counter", "rpc.client.errors",
         metrics.CLIENT_INSTRUMENTS["rpc.client.errors"].description, "{call}"),
        ("histogram", "rpc.client.latency",
         metrics.CLIENT_INSTRUMENTS["rpc.client.latency"].description, "ms"),
    ]


def test_instrument_created_once_across_threads(meter):
    """Threads racing on first use share a single instrument"""
    seen = []
    start = threading.Barrier(8)

    def worker():
        start.wait()
        seen.append(metrics.get_instrument("rpc.client.requests"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert len(meter.created) == 1
    assert len(seen) == 8
    assert all(instrument is seen[0] for instrument in seen)


def test_unknown_instrument_rejected(meter):
    with pytest.raises(ValueError, match="Unknown client metric"):
        metrics.increment_counter("rpc.client.retries")
    assert meter.created == []


def test_client_metrics_record_without_provider():
    """Recording works before any meter provider is configured"""
    metrics.increment_counter("rpc.client.requests", 1, {"method": "m"})
    metrics.record_latency("rpc.client.latency", 1.5, {"method": "m"})
