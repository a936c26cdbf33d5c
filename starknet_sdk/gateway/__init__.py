"""
Gateway module for the StarkNet SDK.

This module provides access to the StarkNet gateway (transaction submission)
and feeder gateway (read queries) over HTTP.
"""
from .client import GatewayClient
from .transport import GatewayTransport, HttpResponse, RequestsTransport

__all__ = ["GatewayClient", "GatewayTransport", "HttpResponse", "RequestsTransport"]
