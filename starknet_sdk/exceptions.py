"""
Exceptions for the StarkNet SDK.
"""
from typing import Optional


class StarknetError(Exception):
    """Base exception for all StarkNet SDK errors."""
    pass


class MalformedNumberError(StarknetError):
    """Raised when a value cannot be parsed as a decimal or hex number."""

    def __init__(self, value: object, reason: Optional[str] = None):
        self.value = value
        message = f"Malformed number: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidProgramFormatError(StarknetError):
    """Raised when a contract program document cannot be serialized."""
    pass


class GatewayError(StarknetError):
    """Base exception for gateway and feeder-gateway errors."""
    pass


class GatewayRequestError(GatewayError):
    """
    Raised when a gateway request fails at the transport level or returns
    a non-2xx response.

    Attributes:
        endpoint: URL of the endpoint that was called
        status_code: HTTP status code, or None for transport failures
        body: Raw response body, if any
    """

    def __init__(
        self,
        message: str,
        endpoint: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None
    ):
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class GatewayResponseError(GatewayError):
    """Raised when a successful gateway response cannot be decoded."""

    def __init__(self, message: str, endpoint: str):
        self.endpoint = endpoint
        super().__init__(message)


class TransactionError(StarknetError):
    """Base exception for terminal transaction failures."""

    def __init__(self, message: str, tx_hash: str, status: str):
        self.tx_hash = tx_hash
        self.status = status
        super().__init__(message)


class TransactionRejectedError(TransactionError):
    """Raised when the network explicitly rejects a transaction."""

    def __init__(self, tx_hash: str, status: str = "REJECTED", reason: Optional[str] = None):
        self.reason = reason
        message = status if not reason else f"{status}: {reason}"
        super().__init__(message, tx_hash, status)


class TransactionUnreachableError(TransactionError):
    """
    Raised when a transaction is still not received after the first poll,
    meaning it was most likely dropped. Check it manually before resubmitting.
    """

    def __init__(self, tx_hash: str, status: str = "NOT_RECEIVED"):
        super().__init__(status, tx_hash, status)
