"""
HTTP Adapter Package

Implements the requests-based transport, the reference deployment of the JSON-RPC client.
"""

from seam_jsonrpc.adapters.http.client import HttpTransport

__all__ = ["HttpTransport"]
