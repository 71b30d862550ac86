"""
ZeroMQ transport adapter

Sends JSON-RPC 2.0 request bodies over a ZeroMQ REQ socket, one socket per endpoint.
"""

import zmq
import logging
import threading
from typing import Dict, Optional

from seam_jsonrpc.adapters.adapter_interface import TransportInterface
from seam_jsonrpc.rpc.errors import TransportError

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("tcp", "ipc", "inproc")

class ZeroMQTransport(TransportInterface):
    """
    ZeroMQ transport adapter over REQ/REP

    A REQ socket must strictly alternate send and recv, so calls through the
    same transport are serialized, and a socket that timed out is discarded
    and reconnected on the next call.
    """

    def __init__(self, timeout_ms: int = 5000, context: Optional[zmq.Context] = None):
        """Initialize ZeroMQ transport

        Args:
            timeout_ms: Send/receive timeout in milliseconds
            context: ZeroMQ context; required to share inproc endpoints with a server
        """
        self.timeout_ms = timeout_ms
        self._owns_context = context is None
        self.context = context if context is not None else zmq.Context()
        self._sockets: Dict[str, zmq.Socket] = {}
        self._lock = threading.Lock()

    def validate_endpoint(self, endpoint: str) -> str:
        endpoint = super().validate_endpoint(endpoint)
        scheme, sep, address = endpoint.partition("://")
        if not sep or scheme not in SUPPORTED_SCHEMES or not address:
            raise ValueError(
                f"Invalid ZeroMQ endpoint {endpoint!r}: expected one of "
                f"{', '.join(s + '://' for s in SUPPORTED_SCHEMES)}"
            )
        return endpoint

    def _socket(self, endpoint: str) -> zmq.Socket:
        socket = self._sockets.get(endpoint)
        if socket is None:
            socket = self.context.socket(zmq.REQ)
            socket.setsockopt(zmq.RCVTIMEO, self.timeout_ms)
            socket.setsockopt(zmq.SNDTIMEO, self.timeout_ms)
            socket.setsockopt(zmq.LINGER, 0)
            socket.connect(endpoint)
            self._sockets[endpoint] = socket
            logger.info(f"ZeroMQ transport connected to {endpoint}")
        return socket

    def _discard(self, endpoint: str) -> None:
        socket = self._sockets.pop(endpoint, None)
        if socket is not None:
            socket.close()

    def send(self, endpoint: str, payload: bytes, auth_header: Optional[str] = None) -> bytes:
        if auth_header is not None:
            raise TransportError("ZeroMQ transport cannot carry an Authorization header")

        with self._lock:
            try:
                socket = self._socket(endpoint)
                logger.debug(f"Sending {len(payload)} bytes to {endpoint}")
                socket.send(payload)
                return socket.recv()
            except zmq.error.Again as e:
                self._discard(endpoint)
                raise TransportError(f"ZeroMQ request timed out ({self.timeout_ms}ms)", cause=e) from e
            except zmq.error.ZMQError as e:
                self._discard(endpoint)
                raise TransportError(f"ZeroMQ connection error: {e}", cause=e) from e
            except BaseException:
                # An interrupted REQ socket is stuck between send and recv
                self._discard(endpoint)
                raise

    def close(self) -> None:
        with self._lock:
            for endpoint in list(self._sockets):
                self._discard(endpoint)
        if self._owns_context:
            self.context.term()
