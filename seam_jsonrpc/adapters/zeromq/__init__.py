"""
ZeroMQ Adapter Package

Implements the ZeroMQ REQ/REP transport for the JSON-RPC client.
"""

from seam_jsonrpc.adapters.zeromq.client import ZeroMQTransport

__all__ = ["ZeroMQTransport"]
