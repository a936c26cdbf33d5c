"""
Network presets and client options.
"""
import os
import urllib.parse
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_TIMEOUT = 30


class Network(str, Enum):
    """Named StarkNet networks"""
    ALPHA = "alpha"
    DEVNET = "devnet"


class NetworkConfig:
    """Static base URLs for the named networks."""

    NETWORKS: Dict[Network, str] = {
        Network.ALPHA: "https://alpha4.starknet.io",
        Network.DEVNET: "http://localhost:5000",
    }

    @classmethod
    def get_base_url(cls, network: str) -> str:
        """
        Get the base URL for a network.

        Args:
            network: Network name or Network member

        Returns:
            Base URL without a trailing slash

        Raises:
            ValueError: If the network is unknown
        """
        try:
            return cls.NETWORKS[Network(network)]
        except ValueError:
            available = ", ".join(n.value for n in cls.NETWORKS)
            raise ValueError(f"Unknown network '{network}'. Available networks: {available}") from None

    @staticmethod
    def default_timeout() -> float:
        """Request timeout in seconds, from STARKNET_GATEWAY_TIMEOUT if set."""
        return float(os.environ.get("STARKNET_GATEWAY_TIMEOUT", str(DEFAULT_TIMEOUT)))


def validate_base_url(url: str) -> None:
    """
    Validate that a base URL is secure.

    Plain http is only accepted for local hosts, or anywhere when
    STARKNET_INSECURE_GATEWAY=1 is set.

    Raises:
        ValueError: If URL is invalid or uses insecure HTTP
    """
    parsed = urllib.parse.urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise ValueError(f"Invalid gateway base URL '{url}'")

    is_local = parsed.hostname in ("localhost", "127.0.0.1", "::1")
    if parsed.scheme != "https" and not is_local:
        if os.environ.get("STARKNET_INSECURE_GATEWAY") != "1":
            raise ValueError(
                f"Gateway base URL must use HTTPS for security (got: {parsed.scheme}://). "
                "Set STARKNET_INSECURE_GATEWAY=1 to allow HTTP for development."
            )


class ProviderOptions(BaseModel):
    """Options for constructing a StarknetClient"""
    network: Network = Network.DEVNET
    base_url: Optional[str] = None
    timeout: Optional[float] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: Optional[str]) -> Optional[str]:
        return value.rstrip("/") if value else value

    def resolve_base_url(self) -> str:
        base_url = self.base_url or NetworkConfig.get_base_url(self.network)
        validate_base_url(base_url)
        return base_url
