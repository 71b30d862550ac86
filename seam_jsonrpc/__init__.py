"""
Seam JSON-RPC 2.0 Client

This package provides a client-side implementation of the JSON-RPC 2.0 protocol:

1. Message Format: JSON-RPC 2.0 request/response objects (Request, Response, RpcError)
2. Semantics: nonce-correlated request/reply with version and identifier validation
3. Transports:
   - HTTP (requests), the reference deployment
   - ZeroMQ REQ/REP (pyzmq)

Every failure surfaces as one of a closed set of exceptions deriving from
JsonRpcClientError. Calls are traced and counted through OpenTelemetry.
"""

from seam_jsonrpc.config import ClientConfig, TransportType
from seam_jsonrpc.rpc import (
    ABSENT,
    Client,
    DecodeError,
    ErrorKind,
    JsonRpcClientError,
    NoErrorOrResultError,
    NonceMismatchError,
    Request,
    Response,
    RpcCallError,
    RpcError,
    TransportError,
    VersionMismatchError,
)

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "Client",
    "ClientConfig",
    "DecodeError",
    "ErrorKind",
    "JsonRpcClientError",
    "NoErrorOrResultError",
    "NonceMismatchError",
    "Request",
    "Response",
    "RpcCallError",
    "RpcError",
    "TransportError",
    "TransportType",
    "VersionMismatchError",
]
