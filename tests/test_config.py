"""
Tests for client configuration
"""
import os
import pytest
from unittest.mock import patch

from seam_jsonrpc.config import ClientConfig, TransportType


class TestClientConfig:
    """Test client configuration"""

    def test_default_values(self):
        """Test default config values"""
        config = ClientConfig(url="http://localhost:8332")
        assert config.user is None
        assert config.password is None
        assert config.transport == TransportType.HTTP
        assert config.timeout_ms == 5000
        assert config.http_method == "POST"
        assert config.enable_tracing is False

    def test_from_env(self):
        """Test config creation from environment"""
        with patch.dict(os.environ, {
            "SEAM_JSONRPC_URL": "http://node:8332",
            "SEAM_JSONRPC_USER": "alice",
            "SEAM_JSONRPC_PASSWORD": "secret",
            "SEAM_JSONRPC_TRANSPORT": "zeromq",
            "SEAM_JSONRPC_TIMEOUT_MS": "750",
            "SEAM_JSONRPC_HTTP_METHOD": "GET",
            "SEAM_JSONRPC_ENABLE_TRACING": "true",
            "SEAM_JSONRPC_OTLP_ENDPOINT": "collector:4317",
        }, clear=True):
            config = ClientConfig.from_env()
            assert config.url == "http://node:8332"
            assert config.user == "alice"
            assert config.password == "secret"
            assert config.transport == TransportType.ZEROMQ
            assert config.timeout_ms == 750
            assert config.http_method == "GET"
            assert config.enable_tracing is True
            assert config.otlp_endpoint == "collector:4317"

    def test_from_env_defaults(self):
        """Test config defaults with an empty environment"""
        with patch.dict(os.environ, {}, clear=True):
            config = ClientConfig.from_env()
            assert config.url == "http://localhost:8080"
            assert config.user is None
            assert config.transport == TransportType.HTTP
            assert config.enable_tracing is False

    def test_unsupported_transport(self):
        """Test error on unsupported transport"""
        with patch.dict(os.environ, {"SEAM_JSONRPC_TRANSPORT": "nats"}, clear=True):
            with pytest.raises(ValueError, match="Unsupported transport"):
                ClientConfig.from_env()

    def test_config_to_dict_redacts_password(self):
        """Test config serialization to dictionary"""
        config = ClientConfig(url="http://node:8332", user="alice", password="secret")
        config_dict = config.to_dict()

        assert config_dict["url"] == "http://node:8332"
        assert config_dict["user"] == "alice"
        assert config_dict["password"] == "***"
        assert config_dict["transport"] == "http"
        assert "secret" not in str(config_dict)
