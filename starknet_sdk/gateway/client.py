"""
Gateway client implementation for the StarkNet SDK.

This module provides typed access to the two StarkNet endpoints: the
feeder gateway (read-only queries) and the gateway (transaction submission).
Every operation is a single request/response exchange. Retrying is left to
the caller and to the confirmation poller.
"""
import logging
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..exceptions import GatewayRequestError, GatewayResponseError
from ..models import (
    AddTransactionResponse,
    CallContractResponse,
    GetBlockResponse,
    GetCodeResponse,
    GetContractAddressesResponse,
    GetTransactionResponse,
    GetTransactionStatusResponse,
)
from ..utils.json_bigint import parse, stringify
from ..utils.number import BigNumberish, to_hex
from .transport import GatewayTransport, RequestsTransport

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

BlockId = Optional[Union[int, str]]

# Keep error messages readable when the gateway returns a large HTML page
_MAX_BODY_IN_MESSAGE = 500


def _block_param(block_id: BlockId) -> str:
    return "null" if block_id is None else str(block_id)


class GatewayClient:
    """
    Client for the StarkNet gateway and feeder gateway.

    The client holds no state between calls apart from its configuration.
    """

    def __init__(
        self,
        feeder_gateway_url: str,
        gateway_url: str,
        transport: Optional[GatewayTransport] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize the gateway client.

        Args:
            feeder_gateway_url: Base URL of the read-only feeder gateway
            gateway_url: Base URL of the write gateway
            transport: HTTP transport (defaults to a requests session)
            timeout: Request timeout in seconds
        """
        self.feeder_gateway_url = feeder_gateway_url.rstrip("/")
        self.gateway_url = gateway_url.rstrip("/")
        self.transport = transport or RequestsTransport()
        self.timeout = timeout
        logger.debug(f"Initialized gateway client for {self.gateway_url}")

    def _fetch(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        response = self.transport.request(
            method, url, params=params, data=data, headers=headers, timeout=self.timeout
        )
        if not response.ok:
            body = response.text or ""
            logger.error(f"Gateway returned HTTP {response.status_code} for {url}")
            raise GatewayRequestError(
                f"HTTP {response.status_code} from {url}: {body[:_MAX_BODY_IN_MESSAGE]}",
                endpoint=url,
                status_code=response.status_code,
                body=body
            )
        try:
            return parse(response.text)
        except ValueError as e:
            raise GatewayResponseError(f"Invalid JSON response from {url}: {e}", endpoint=url) from e

    def _decode(self, model: Type[T], payload: Any, url: str) -> T:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise GatewayResponseError(
                f"Unexpected response shape from {url}: {e}", endpoint=url
            ) from e

    def _feeder_get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Tuple[str, Any]:
        url = f"{self.feeder_gateway_url}/{endpoint}"
        return url, self._fetch("GET", url, params=params)

    def get_contract_addresses(self) -> GetContractAddressesResponse:
        """
        Get the addresses of the StarkNet core contracts on L1.

        Returns:
            The core contract addresses
        """
        url, data = self._feeder_get("get_contract_addresses")
        return self._decode(GetContractAddressesResponse, data, url)

    def call_contract(self, payload: Dict[str, Any], block_id: BlockId = None) -> CallContractResponse:
        """
        Call a contract function without creating a transaction.

        Args:
            payload: Encoded call (see TransactionEncoder.encode_call)
            block_id: Block to run the call against (latest when None)

        Returns:
            The call result
        """
        url = f"{self.feeder_gateway_url}/call_contract"
        data = self._fetch(
            "POST",
            url,
            params={"blockId": _block_param(block_id)},
            data=stringify(payload),
            headers={"Content-Type": "application/json"}
        )
        return self._decode(CallContractResponse, data, url)

    def get_block(self, block_id: BlockId = None) -> GetBlockResponse:
        """
        Get a block by id.

        Args:
            block_id: Block id (latest when None)

        Returns:
            The block record
        """
        url, data = self._feeder_get("get_block", {"blockId": _block_param(block_id)})
        return self._decode(GetBlockResponse, data, url)

    def get_code(self, contract_address: str, block_id: BlockId = None) -> GetCodeResponse:
        """
        Get the bytecode and ABI of a deployed contract.

        Args:
            contract_address: Contract address, passed through as given
            block_id: Block id (latest when None)
        """
        url, data = self._feeder_get(
            "get_code",
            {"contractAddress": contract_address, "blockId": _block_param(block_id)}
        )
        return self._decode(GetCodeResponse, data, url)

    def get_storage_at(
        self,
        contract_address: str,
        key: BigNumberish,
        block_id: BlockId = None
    ) -> Any:
        """
        Get the value of a contract's storage slot.

        Args:
            contract_address: Contract address, passed through as given
            key: Storage key, e.g. from get_storage_var_address
            block_id: Block id (latest when None)

        Returns:
            The raw storage value as returned by the feeder gateway
        """
        _, data = self._feeder_get(
            "get_storage_at",
            {
                "contractAddress": contract_address,
                "key": str(key),
                "blockId": _block_param(block_id),
            }
        )
        return data

    def get_transaction_status(self, tx_hash: BigNumberish) -> GetTransactionStatusResponse:
        """
        Get the status of a transaction.

        Args:
            tx_hash: Transaction hash in any integer representation

        Returns:
            Status record with ``tx_status`` and, once known, ``block_id``
        """
        url, data = self._feeder_get(
            "get_transaction_status", {"transactionHash": to_hex(tx_hash)}
        )
        return self._decode(GetTransactionStatusResponse, data, url)

    def get_transaction(self, tx_hash: BigNumberish) -> GetTransactionResponse:
        """
        Get the details of a transaction.

        Args:
            tx_hash: Transaction hash in any integer representation
        """
        url, data = self._feeder_get("get_transaction", {"transactionHash": to_hex(tx_hash)})
        return self._decode(GetTransactionResponse, data, url)

    def add_transaction(self, body: str) -> AddTransactionResponse:
        """
        Submit a serialized transaction to the gateway.

        Args:
            body: JSON text produced by TransactionEncoder.serialize

        Returns:
            The transaction hash and preliminary status code
        """
        url = f"{self.gateway_url}/add_transaction"
        data = self._fetch(
            "POST", url, data=body, headers={"Content-Type": "application/json"}
        )
        return self._decode(AddTransactionResponse, data, url)

    def close(self) -> None:
        self.transport.close()
