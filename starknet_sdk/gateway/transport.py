"""
Transport layer for the gateway endpoints.

This module provides an abstraction over the HTTP exchange used to talk to
the StarkNet gateway and feeder gateway, plus the default implementation
backed by a ``requests`` session.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from ..exceptions import GatewayRequestError

logger = logging.getLogger(__name__)


@dataclass
class HttpResponse:
    """Raw response of a single request/response exchange."""
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class GatewayTransport(ABC):
    """
    Abstract base class for gateway transport implementations.

    A transport performs exactly one exchange per call. It must not retry,
    batch or cache.
    """

    @abstractmethod
    def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None
    ) -> HttpResponse:
        """
        Perform a single HTTP exchange.

        Args:
            method: HTTP method ("GET" or "POST")
            url: Full endpoint URL
            params: Query parameters
            data: Request body
            headers: Extra request headers
            timeout: Request timeout in seconds

        Returns:
            The raw response, whatever its status code

        Raises:
            GatewayRequestError: If the exchange fails at the transport level
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close any open connections or resources."""
        pass


class RequestsTransport(GatewayTransport):
    """Transport backed by a ``requests.Session``."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()

    def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None
    ) -> HttpResponse:
        logger.debug(f"{method} {url} params={params}")
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                data=data.encode("utf-8") if data is not None else None,
                headers=headers,
                timeout=timeout
            )
        except requests.RequestException as e:
            logger.error(f"Gateway request to {url} failed: {e}")
            raise GatewayRequestError(f"Request to {url} failed: {e}", endpoint=url) from e
        return HttpResponse(status_code=response.status_code, text=response.text)

    def close(self) -> None:
        self.session.close()
