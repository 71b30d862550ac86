"""
JSON-RPC 2.0 client

Builds nonce-identified requests, sends them through a transport adapter and
validates that each reply is a JSON-RPC 2.0 response to the request that was sent.
"""

import base64
import logging
import threading
import time
from typing import Any, List, Optional, Sequence, Type, TypeVar

from seam_jsonrpc.adapters.adapter_factory import TransportFactory
from seam_jsonrpc.adapters.adapter_interface import TransportInterface
from seam_jsonrpc.adapters.http.client import HttpTransport
from seam_jsonrpc.config import ClientConfig
from seam_jsonrpc.rpc.errors import (
    JsonRpcClientError,
    NonceMismatchError,
    VersionMismatchError,
)
from seam_jsonrpc.rpc.protocol import JSONRPC_VERSION, Request, Response, json_equal
from seam_jsonrpc.telemetry.metrics import increment_counter, record_latency, setup_metrics
from seam_jsonrpc.telemetry.tracer import create_span, setup_tracer

logger = logging.getLogger(__name__)

T = TypeVar("T")


def basic_auth_header(user: str, password: Optional[str]) -> str:
    """Build a basic-authentication header value; a missing password is sent empty"""
    token = f"{user}:{password or ''}".encode("utf-8")
    return "Basic " + base64.b64encode(token).decode("ascii")


class Client:
    """
    A handle to a remote JSON-RPC 2.0 server

    One client may be shared by several threads. The nonce counter is the only
    shared state; its lock covers the increment only, never the network call.
    """

    def __init__(self,
                 url: str,
                 user: Optional[str] = None,
                 password: Optional[str] = None,
                 transport: Optional[TransportInterface] = None):
        """Create a client

        Args:
            url: Endpoint address of the server
            user: Username for basic authentication
            password: Password for basic authentication, requires ``user``
            transport: Transport adapter; an HttpTransport is created if None

        Raises:
            ValueError: Password without username, endpoint unusable by the
                transport, or credentials the transport cannot carry
        """
        if password is not None and user is None:
            raise ValueError("A password was given without a username")

        self.transport = transport if transport is not None else HttpTransport()
        self.url = self.transport.validate_endpoint(url)

        if user is not None and not self.transport.supports_auth:
            raise ValueError(f"{type(self.transport).__name__} does not support authentication")

        self.user = user
        self.password = password
        self._auth_header = basic_auth_header(user, password) if user is not None else None

        self._nonce = 0
        self._nonce_lock = threading.Lock()

        logger.info(f"JSON-RPC client created for {self.url} using {type(self.transport).__name__}")

    @classmethod
    def from_config(cls, config: ClientConfig) -> "Client":
        """Create a client and its transport from configuration"""
        if config.enable_tracing:
            setup_tracer(config.service_name, config.otlp_endpoint)
            setup_metrics(config.service_name, config.otlp_endpoint)

        transport = TransportFactory.create_transport(config.transport, {
            "timeout_ms": config.timeout_ms,
            "http_method": config.http_method,
        })
        return cls(config.url, user=config.user, password=config.password, transport=transport)

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the transport"""
        self.transport.close()

    def build_request(self, method: str, params: Optional[Sequence[Any]] = None) -> Request:
        """Build a request identified by the next nonce

        Args:
            method: Remote procedure name
            params: Positional parameters, order preserved

        Returns:
            Request: New request whose id is unique for this client
        """
        with self._nonce_lock:
            self._nonce += 1
            nonce = self._nonce

        params_list: List[Any] = list(params) if params is not None else []
        return Request(method=str(method), params=params_list, id=nonce, jsonrpc=JSONRPC_VERSION)

    def last_nonce(self) -> int:
        """Accessor for the last-used nonce"""
        with self._nonce_lock:
            return self._nonce

    def execute(self, request: Request) -> Response:
        """Send a request and wait for its validated response

        Checks run in a fixed order, each stopping the call: transport failure,
        reply decoding, protocol version, identifier correlation. The HTTP status
        of the reply is not inspected.

        Args:
            request: Request to send

        Returns:
            Response: Reply whose id matches the request's

        Raises:
            DecodeError: The request could not be serialized or the reply not decoded
            TransportError: The transport failed to send or receive
            VersionMismatchError: The reply's jsonrpc field is present and not "2.0"
            NonceMismatchError: The reply's id differs from the request's
        """
        attributes = {"method": request.method}
        with create_span("jsonrpc.client.execute", {"rpc.system": "jsonrpc", "rpc.method": request.method}):
            try:
                response = self._round_trip(request, attributes)
            except JsonRpcClientError as e:
                increment_counter("rpc.client.errors", 1, {"type": e.kind.value, **attributes})
                raise

        increment_counter("rpc.client.success", 1, attributes)
        return response

    def _round_trip(self, request: Request, attributes) -> Response:
        body = request.to_bytes()

        increment_counter("rpc.client.requests", 1, attributes)
        start_time = time.time()
        reply = self.transport.send(self.url, body, auth_header=self._auth_header)
        latency_ms = (time.time() - start_time) * 1000
        record_latency("rpc.client.latency", latency_ms, attributes)
        logger.debug(f"Response to {request.method} (id {request.id!r}) received, latency: {latency_ms:.2f}ms")

        response = Response.from_bytes(reply)

        if response.jsonrpc is not None and response.jsonrpc != JSONRPC_VERSION:
            raise VersionMismatchError(response.jsonrpc)

        if not json_equal(response.id, request.id):
            raise NonceMismatchError(request.id, response.id)

        return response

    def call(self, method: str, params: Optional[Sequence[Any]] = None, into: Optional[Type[T]] = None) -> Any:
        """Build and execute a request, then extract its result

        Args:
            method: Remote procedure name
            params: Positional parameters
            into: Type to decode the result into; the raw JSON value is returned when None

        Returns:
            The call's result

        Raises:
            JsonRpcClientError: Any failure of the taxonomy, including RpcCallError
                for a server-reported error
        """
        return self.execute(self.build_request(method, params)).get_result(into)
