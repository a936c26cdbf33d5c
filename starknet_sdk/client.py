"""
StarknetClient - Main client for the StarkNet gateway.
"""
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from .confirmation import ConfirmationPoller
from .config import NetworkConfig, ProviderOptions
from .encoder import TransactionEncoder
from .gateway.client import BlockId, GatewayClient
from .gateway.transport import GatewayTransport
from .models import (
    AddTransactionResponse,
    CallContractResponse,
    CallContractTransaction,
    CompiledContract,
    DeployTransaction,
    GetBlockResponse,
    GetCodeResponse,
    GetContractAddressesResponse,
    GetTransactionResponse,
    GetTransactionStatusResponse,
    InvokeFunctionTransaction,
)
from .signer import Signer
from .utils.json_bigint import parse
from .utils.number import BigNumberish


class StarknetClient:
    """
    Client for submitting transactions to StarkNet and tracking them.

    This client handles:
    1. Read queries against the feeder gateway
    2. Encoding and submitting deploy and invoke transactions
    3. Waiting for submitted transactions to be confirmed
    """

    def __init__(
        self,
        options: Optional[Union[ProviderOptions, "StarknetClient"]] = None,
        transport: Optional[GatewayTransport] = None,
        signer: Optional[Signer] = None,
        salt_generator: Optional[Callable[[], int]] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the StarknetClient

        Args:
            options: Network options, or another StarknetClient whose
                endpoint configuration is copied (defaults to devnet)
            transport: HTTP transport for gateway requests
            signer: Signer used for invocations without an explicit signature
            salt_generator: Source of deploy salts (defaults to random addresses)
            logger: Optional logger instance to use for debug/info logging

        Raises:
            ValueError: If the network is unknown or the base URL is insecure
        """
        if isinstance(options, StarknetClient):
            self.base_url = options.base_url
            self.feeder_gateway_url = options.feeder_gateway_url
            self.gateway_url = options.gateway_url
            self.timeout = options.timeout
        else:
            options = options or ProviderOptions()
            self.base_url = options.resolve_base_url()
            self.feeder_gateway_url = f"{self.base_url}/feeder_gateway"
            self.gateway_url = f"{self.base_url}/gateway"
            self.timeout = (
                options.timeout if options.timeout is not None else NetworkConfig.default_timeout()
            )

        self.logger = logger or logging.getLogger(__name__)
        self.gateway = GatewayClient(
            self.feeder_gateway_url,
            self.gateway_url,
            transport=transport,
            timeout=self.timeout
        )
        self.encoder = TransactionEncoder(signer=signer, salt_generator=salt_generator)

    def get_contract_addresses(self) -> GetContractAddressesResponse:
        """Get the StarkNet core contract addresses"""
        return self.gateway.get_contract_addresses()

    def call_contract(
        self,
        invoke_tx: Union[CallContractTransaction, Dict[str, Any]],
        block_id: BlockId = None
    ) -> CallContractResponse:
        """
        Call a function on a StarkNet contract without a transaction.

        Args:
            invoke_tx: The call; ``calldata`` and ``signature`` default to []
            block_id: Block to run the call against (latest when None)

        Returns:
            The result of the function
        """
        if not isinstance(invoke_tx, CallContractTransaction):
            invoke_tx = CallContractTransaction.model_validate(invoke_tx)
        return self.gateway.call_contract(TransactionEncoder.encode_call(invoke_tx), block_id)

    def get_block(self, block_id: BlockId = None) -> GetBlockResponse:
        return self.gateway.get_block(block_id)

    def get_code(self, contract_address: str, block_id: BlockId = None) -> GetCodeResponse:
        return self.gateway.get_code(contract_address, block_id)

    def get_storage_at(
        self,
        contract_address: str,
        key: BigNumberish,
        block_id: BlockId = None
    ) -> Any:
        return self.gateway.get_storage_at(contract_address, key, block_id)

    def get_transaction_status(self, tx_hash: BigNumberish) -> GetTransactionStatusResponse:
        return self.gateway.get_transaction_status(tx_hash)

    def get_transaction(self, tx_hash: BigNumberish) -> GetTransactionResponse:
        return self.gateway.get_transaction(tx_hash)

    def add_transaction(
        self,
        tx: Union[InvokeFunctionTransaction, DeployTransaction]
    ) -> AddTransactionResponse:
        """
        Encode a transaction and submit it to the gateway.

        Args:
            tx: The transaction to submit

        Returns:
            Gateway confirmation with the transaction hash

        Raises:
            InvalidProgramFormatError: If a deployed program cannot be serialized
            GatewayRequestError: If the submission fails
        """
        # Encoding errors surface here, before anything is sent
        body = self.encoder.serialize(tx)
        response = self.gateway.add_transaction(body)
        self.logger.info(f"Submitted {tx.type} transaction: {response.transaction_hash}")
        return response

    def deploy_contract(
        self,
        contract: Union[CompiledContract, Dict[str, Any], str],
        constructor_calldata: Optional[List[str]] = None,
        address_salt: Optional[BigNumberish] = None
    ) -> AddTransactionResponse:
        """
        Deploy a compiled contract.

        Args:
            contract: Compiled contract as JSON text, dict or CompiledContract
            constructor_calldata: Constructor arguments as decimal strings
            address_salt: Contract address salt (random when omitted)

        Returns:
            Gateway confirmation with the transaction hash and contract address
        """
        if isinstance(contract, str):
            contract = parse(contract)
        if not isinstance(contract, CompiledContract):
            contract = CompiledContract.model_validate(contract)

        return self.add_transaction(DeployTransaction(
            contract_definition=contract,
            constructor_calldata=constructor_calldata or [],
            contract_address_salt=address_salt
        ))

    def invoke_function(
        self,
        contract_address: BigNumberish,
        entry_point_selector: BigNumberish,
        calldata: Optional[Sequence[BigNumberish]] = None,
        signature: Optional[Sequence[BigNumberish]] = None
    ) -> AddTransactionResponse:
        """
        Invoke a function on a deployed contract.

        Args:
            contract_address: Target contract address
            entry_point_selector: Selector, e.g. from get_selector_from_name
            calldata: Function arguments (default [])
            signature: Optional ``(r, s)`` signature to send along

        Returns:
            Gateway confirmation with the transaction hash
        """
        return self.add_transaction(InvokeFunctionTransaction(
            contract_address=contract_address,
            entry_point_selector=entry_point_selector,
            calldata=list(calldata or []),
            signature=list(signature) if signature is not None else None
        ))

    def wait_for_tx(
        self,
        tx_hash: BigNumberish,
        retry_interval: float = ConfirmationPoller.DEFAULT_RETRY_INTERVAL
    ) -> GetTransactionStatusResponse:
        """
        Wait until a transaction is confirmed.

        Args:
            tx_hash: Transaction hash in any integer representation
            retry_interval: Seconds between status queries

        Returns:
            The confirming status response

        Raises:
            TransactionRejectedError: If the network rejected the transaction
            TransactionUnreachableError: If the network never received it
        """
        poller = ConfirmationPoller(
            self.gateway, tx_hash, retry_interval=retry_interval, logger_instance=self.logger
        )
        return poller.wait()

    def close(self) -> None:
        self.gateway.close()
