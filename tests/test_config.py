"""
Tests for network presets and client options.
"""
import pytest
from pydantic import ValidationError

from starknet_sdk.config import (
    DEFAULT_TIMEOUT,
    Network,
    NetworkConfig,
    ProviderOptions,
    validate_base_url,
)


class TestNetworkConfig:
    """Test NetworkConfig class."""

    def test_known_networks(self):
        assert NetworkConfig.get_base_url("alpha") == "https://alpha4.starknet.io"
        assert NetworkConfig.get_base_url(Network.DEVNET) == "http://localhost:5000"

    def test_unknown_network(self):
        with pytest.raises(ValueError) as exc_info:
            NetworkConfig.get_base_url("mainnet")

        # Error message lists the available networks
        assert "alpha" in str(exc_info.value)
        assert "devnet" in str(exc_info.value)

    def test_default_timeout(self, monkeypatch):
        monkeypatch.delenv("STARKNET_GATEWAY_TIMEOUT", raising=False)
        assert NetworkConfig.default_timeout() == DEFAULT_TIMEOUT

    def test_timeout_from_environment(self, monkeypatch):
        monkeypatch.setenv("STARKNET_GATEWAY_TIMEOUT", "12")
        assert NetworkConfig.default_timeout() == 12

    def test_unknown_network_error_is_not_chained(self):
        with pytest.raises(ValueError) as exc_info:
            NetworkConfig.get_base_url("mainnet")
        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__

    def test_fractional_timeout_from_environment(self, monkeypatch):
        monkeypatch.setenv("STARKNET_GATEWAY_TIMEOUT", "2.5")
        assert NetworkConfig.default_timeout() == 2.5


class TestValidateBaseUrl:
    """Test base URL validation."""

    @pytest.mark.parametrize("url", [
        "https://alpha4.starknet.io",
        "http://localhost:5000",
        "http://127.0.0.1:5050",
    ])
    def test_accepted(self, url):
        validate_base_url(url)

    def test_plain_http_rejected(self, monkeypatch):
        monkeypatch.delenv("STARKNET_INSECURE_GATEWAY", raising=False)
        with pytest.raises(ValueError, match="HTTPS"):
            validate_base_url("http://gateway.example.com")

    def test_plain_http_allowed_with_override(self, monkeypatch):
        monkeypatch.setenv("STARKNET_INSECURE_GATEWAY", "1")
        validate_base_url("http://gateway.example.com")

    @pytest.mark.parametrize("url", ["ftp://example.com", "not a url", "https://"])
    def test_malformed(self, url):
        with pytest.raises(ValueError):
            validate_base_url(url)


class TestProviderOptions:
    """Test ProviderOptions model."""

    def test_defaults_to_devnet(self):
        options = ProviderOptions()
        assert options.network is Network.DEVNET
        assert options.resolve_base_url() == "http://localhost:5000"

    def test_network_name_is_coerced(self):
        assert ProviderOptions(network="alpha").network is Network.ALPHA

    def test_unknown_network_rejected(self):
        with pytest.raises(ValidationError):
            ProviderOptions(network="mainnet")

    def test_base_url_overrides_network(self):
        options = ProviderOptions(network="alpha", base_url="http://localhost:5050/")
        assert options.resolve_base_url() == "http://localhost:5050"

    def test_fractional_timeout(self):
        assert ProviderOptions(timeout=2.5).timeout == 2.5
