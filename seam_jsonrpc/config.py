"""
Configuration settings for the JSON-RPC client
"""
import os
from typing import Dict, Any, Optional
from dataclasses import dataclass
from enum import Enum


class TransportType(Enum):
    """Supported transports"""
    HTTP = "http"
    ZEROMQ = "zeromq"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ClientConfig:
    """Configuration for a JSON-RPC client"""
    url: str
    user: Optional[str] = None
    password: Optional[str] = None
    transport: TransportType = TransportType.HTTP
    timeout_ms: int = 5000
    http_method: str = "POST"

    # Tracing configuration
    enable_tracing: bool = False
    service_name: str = "seam_jsonrpc.client"
    otlp_endpoint: str = "localhost:4317"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create config from environment variables"""
        transport_name = os.getenv("SEAM_JSONRPC_TRANSPORT", TransportType.HTTP.value)
        try:
            transport = TransportType(transport_name.lower())
        except ValueError:
            raise ValueError(f"Unsupported transport: {transport_name}")

        return cls(
            url=os.getenv("SEAM_JSONRPC_URL", "http://localhost:8080"),
            user=os.getenv("SEAM_JSONRPC_USER"),
            password=os.getenv("SEAM_JSONRPC_PASSWORD"),
            transport=transport,
            timeout_ms=int(os.getenv("SEAM_JSONRPC_TIMEOUT_MS", "5000")),
            http_method=os.getenv("SEAM_JSONRPC_HTTP_METHOD", "POST"),
            enable_tracing=_env_flag("SEAM_JSONRPC_ENABLE_TRACING"),
            otlp_endpoint=os.getenv("SEAM_JSONRPC_OTLP_ENDPOINT", "localhost:4317"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging; the password is redacted"""
        return {
            "url": self.url,
            "user": self.user,
            "password": "***" if self.password is not None else None,
            "transport": self.transport.value,
            "timeout_ms": self.timeout_ms,
            "http_method": self.http_method,
            "enable_tracing": self.enable_tracing,
            "service_name": self.service_name,
        }
