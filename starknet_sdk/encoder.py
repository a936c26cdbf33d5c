"""
Transaction encoder: turns transaction intents into gateway wire payloads.

Each transaction kind has its own field set. Fields that do not belong to the
active kind are left out entirely rather than sent as null or empty values.
"""
import logging
from typing import Any, Callable, Dict, Optional

from .models import (
    CallContractTransaction,
    CompiledContract,
    DeployTransaction,
    InvokeFunctionTransaction,
)
from .signer import Signer
from .utils.json_bigint import stringify
from .utils.number import to_felt, to_hex
from .utils.stark import compress_program, format_signature, random_address

logger = logging.getLogger(__name__)


class TransactionEncoder:
    """
    Builds the JSON payloads for ``add_transaction`` and ``call_contract``.

    The encoder has no side effects beyond building payloads; it never submits
    anything.
    """

    def __init__(
        self,
        signer: Optional[Signer] = None,
        salt_generator: Optional[Callable[[], int]] = None
    ):
        """
        Initialize the encoder.

        Args:
            signer: Used to sign invocations that carry no explicit signature
            salt_generator: Source of contract address salts for deployments
                without one (defaults to a random address)
        """
        self.signer = signer
        self.salt_generator = salt_generator or random_address

    def encode(self, transaction: Any) -> Dict[str, Any]:
        """
        Build the wire payload for a transaction.

        Args:
            transaction: An InvokeFunctionTransaction or DeployTransaction

        Returns:
            Payload dict ready for :func:`stringify`

        Raises:
            InvalidProgramFormatError: If a deployed program cannot be serialized
            TypeError: If the transaction kind is not supported
        """
        if isinstance(transaction, InvokeFunctionTransaction):
            return self._encode_invoke(transaction)
        elif isinstance(transaction, DeployTransaction):
            return self._encode_deploy(transaction)
        raise TypeError(f"Unsupported transaction type: {type(transaction).__name__}")

    def serialize(self, transaction: Any) -> str:
        """Encode a transaction and render it as JSON text."""
        body = stringify(self.encode(transaction))
        logger.debug(f"Serialized {transaction.type} transaction ({len(body)} bytes)")
        return body

    def _encode_invoke(self, tx: InvokeFunctionTransaction) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "type": tx.type,
            "contract_address": to_hex(tx.contract_address),
            "entry_point_selector": to_hex(tx.entry_point_selector),
            "calldata": [to_felt(v) for v in tx.calldata],
        }

        signature = tx.signature
        if signature is None and self.signer is not None:
            signature = self.signer.sign_transaction(tx)
        formatted = format_signature(signature)
        if formatted is not None:
            payload["signature"] = formatted
        return payload

    def _encode_deploy(self, tx: DeployTransaction) -> Dict[str, Any]:
        salt = tx.contract_address_salt
        if salt is None:
            salt = self.salt_generator()
        return {
            "type": tx.type,
            "contract_address_salt": to_hex(salt),
            "constructor_calldata": list(tx.constructor_calldata),
            "contract_definition": compress_contract(tx.contract_definition),
        }

    @staticmethod
    def encode_call(call: CallContractTransaction) -> Dict[str, Any]:
        """
        Build the payload for a read-only ``call_contract`` query.

        Unlike invocations, calls always carry ``calldata`` and ``signature``
        keys, even when they are empty.
        """
        return {
            "contract_address": to_hex(call.contract_address),
            "entry_point_selector": to_hex(call.entry_point_selector),
            "calldata": [to_felt(v) for v in call.calldata],
            "signature": list(call.signature),
        }


def compress_contract(contract: CompiledContract) -> Dict[str, Any]:
    """
    Return the contract definition with its program compressed.

    Extra fields on the compiled contract are kept as they are.
    """
    definition = contract.model_dump(mode="python")
    definition["program"] = compress_program(contract.program)
    return definition
