"""
Transport adapter interface

Defines the interface every transport adapter (HTTP, ZeroMQ) implements.
The client treats a transport as an opaque bytes-in/bytes-out request
function, so the protocol layer does not change when the transport does.
"""

import abc
from typing import Optional

class TransportInterface(abc.ABC):
    """Transport adapter interface, the methods every transport must implement"""

    # Whether send() can carry an Authorization header
    supports_auth = False

    def validate_endpoint(self, endpoint: str) -> str:
        """Check that an endpoint address is usable with this transport

        Args:
            endpoint: Endpoint address

        Returns:
            str: The endpoint, possibly normalized

        Raises:
            ValueError: The endpoint cannot be used by this transport
        """
        if not endpoint:
            raise ValueError("Endpoint address must not be empty")
        return endpoint

    @abc.abstractmethod
    def send(self, endpoint: str, payload: bytes, auth_header: Optional[str] = None) -> bytes:
        """Send one request body and block until the full reply body arrives

        Args:
            endpoint: Endpoint address
            payload: Serialized request
            auth_header: Value of the Authorization header, if credentials are set

        Returns:
            bytes: Reply body

        Raises:
            TransportError: The send or receive failed
        """
        pass

    @abc.abstractmethod
    def close(self) -> None:
        """Close connections and release resources"""
        pass
