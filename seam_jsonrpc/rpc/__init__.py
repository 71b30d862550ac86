"""
JSON-RPC 2.0 Implementation Module

Provides the client-side implementation of the JSON-RPC 2.0 specification:
- errors: closed error taxonomy
- protocol: request/response/error objects
- client: RPC client

This module provides unified request-response semantics, independent of underlying transports.
"""

from seam_jsonrpc.rpc.errors import (
    DecodeError,
    ErrorKind,
    JsonRpcClientError,
    NoErrorOrResultError,
    NonceMismatchError,
    RpcCallError,
    TransportError,
    VersionMismatchError,
)
from seam_jsonrpc.rpc.protocol import ABSENT, JSONRPC_VERSION, Request, Response, RpcError, json_equal
from seam_jsonrpc.rpc.client import Client

__all__ = [
    "ABSENT",
    "JSONRPC_VERSION",
    "Client",
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
    "VersionMismatchError",
    "json_equal",
]
