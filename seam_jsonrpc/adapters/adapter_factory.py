"""
Transport factory

Creates transport adapter instances (HTTP, ZeroMQ) from a transport type and
a configuration dictionary.
"""

from typing import Dict, Any, Union

from seam_jsonrpc.adapters.adapter_interface import TransportInterface
from seam_jsonrpc.adapters.http.client import HttpTransport
from seam_jsonrpc.adapters.zeromq.client import ZeroMQTransport
from seam_jsonrpc.config import TransportType

class TransportFactory:
    """Transport factory, creates transport adapter instances"""

    @staticmethod
    def create_transport(transport_type: Union[TransportType, str],
                         config: Dict[str, Any] = None) -> TransportInterface:
        """Create transport adapter

        Args:
            transport_type: Transport type, TransportType or its value ("http", "zeromq")
            config: Transport configuration parameters

        Returns:
            TransportInterface: Transport adapter instance

        Raises:
            ValueError: Invalid transport type
        """
        if config is None:
            config = {}

        if isinstance(transport_type, str):
            try:
                transport_type = TransportType(transport_type.lower())
            except ValueError:
                raise ValueError(f"Invalid transport type: {transport_type}")

        if transport_type == TransportType.HTTP:
            return HttpTransport(
                timeout_ms=config.get("timeout_ms", 5000),
                method=config.get("http_method", "POST")
            )
        elif transport_type == TransportType.ZEROMQ:
            return ZeroMQTransport(
                timeout_ms=config.get("timeout_ms", 5000)
            )
        else:
            raise ValueError(f"Invalid transport type: {transport_type}")
