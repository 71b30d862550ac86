"""
Transport Adapters Module

Adapter implementations providing a unified interface for different transports:
- http: requests-based HTTP transport
- zeromq: ZeroMQ REQ/REP transport

All adapters are opaque bytes-in/bytes-out request functions used by the JSON-RPC client.
"""

from .adapter_factory import TransportFactory
from .adapter_interface import TransportInterface
from .http import HttpTransport
from .zeromq import ZeroMQTransport

__all__ = [
    "TransportFactory",
    "TransportInterface",
    "HttpTransport",
    "ZeroMQTransport"
]
