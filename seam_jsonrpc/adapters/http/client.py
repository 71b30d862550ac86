"""
HTTP transport adapter

Sends JSON-RPC 2.0 request bodies over HTTP with requests. The reply status
code is not inspected: all protocol information is expected in the body.
"""

import logging
from typing import Optional

import requests

from seam_jsonrpc.adapters.adapter_interface import TransportInterface
from seam_jsonrpc.rpc.errors import TransportError
from seam_jsonrpc.telemetry.tracer import inject_trace_context

logger = logging.getLogger(__name__)

class HttpTransport(TransportInterface):
    """
    HTTP transport adapter, one request/response pair per call
    """

    supports_auth = True

    def __init__(self,
                 timeout_ms: int = 5000,
                 method: str = "POST",
                 session: Optional[requests.Session] = None):
        """Initialize HTTP transport

        Args:
            timeout_ms: Request timeout in milliseconds
            method: HTTP method used for every call
            session: requests session to send with; a new one is created if None
        """
        self.timeout_ms = timeout_ms
        self.timeout_seconds = timeout_ms / 1000.0
        self.method = method.upper()
        self.session = session if session is not None else requests.Session()
        logger.info(f"HTTP transport created, method: {self.method}, timeout: {timeout_ms}ms")

    def validate_endpoint(self, endpoint: str) -> str:
        endpoint = super().validate_endpoint(endpoint)
        try:
            prepared = requests.Request(self.method, endpoint).prepare()
        except (requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as e:
            raise ValueError(f"Invalid HTTP endpoint {endpoint!r}: {e}") from e

        if not prepared.url.lower().startswith(("http://", "https://")):
            raise ValueError(f"Invalid HTTP endpoint {endpoint!r}: scheme must be http or https")
        return prepared.url

    def send(self, endpoint: str, payload: bytes, auth_header: Optional[str] = None) -> bytes:
        headers = {"Content-Type": "application/json"}
        if auth_header is not None:
            headers["Authorization"] = auth_header
        inject_trace_context(headers)

        try:
            logger.debug(f"Sending {len(payload)} bytes to {endpoint}")
            response = self.session.request(
                self.method,
                endpoint,
                data=payload,
                headers=headers,
                timeout=self.timeout_seconds,
            )
            # Reading content raises on a truncated or undecodable body
            body = response.content
        except requests.exceptions.Timeout as e:
            raise TransportError(f"HTTP request timed out ({self.timeout_ms}ms)", cause=e) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}", cause=e) from e

        logger.debug(f"Received {len(body)} bytes, HTTP status {response.status_code}")
        return body

    def close(self) -> None:
        self.session.close()
