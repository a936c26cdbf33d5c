"""
Data models for the StarkNet SDK.
"""
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils.number import to_int


class TransactionType(str, Enum):
    """Transaction kinds accepted by the gateway"""
    DEPLOY = "DEPLOY"
    INVOKE_FUNCTION = "INVOKE_FUNCTION"


class TransactionStatus(str, Enum):
    """Transaction status as reported by the feeder gateway"""
    NOT_RECEIVED = "NOT_RECEIVED"
    RECEIVED = "RECEIVED"
    PENDING = "PENDING"
    REJECTED = "REJECTED"
    ACCEPTED_ONCHAIN = "ACCEPTED_ONCHAIN"


class CompiledContract(BaseModel):
    """Compiled Cairo contract as produced by the compiler"""
    program: Any
    abi: List[Dict[str, Any]] = Field(default_factory=list)
    entry_points_by_type: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow", frozen=True)


def _to_int_list(values: Any) -> Any:
    if isinstance(values, (list, tuple)):
        return [to_int(v) for v in values]
    return values


class InvokeFunctionTransaction(BaseModel):
    """Invocation of an entry point on a deployed contract"""
    type: Literal["INVOKE_FUNCTION"] = "INVOKE_FUNCTION"
    contract_address: int
    entry_point_selector: int
    calldata: List[int] = Field(default_factory=list)
    signature: Optional[Tuple[int, int]] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("contract_address", "entry_point_selector", mode="before")
    @classmethod
    def _normalize_number(cls, value: Any) -> Any:
        return to_int(value)

    @field_validator("calldata", mode="before")
    @classmethod
    def _normalize_numbers(cls, value: Any) -> Any:
        return _to_int_list(value)

    @field_validator("signature", mode="before")
    @classmethod
    def _normalize_signature(cls, value: Any) -> Any:
        # An empty signature means the invocation is unsigned
        if isinstance(value, (list, tuple)) and not value:
            return None
        return _to_int_list(value)


class DeployTransaction(BaseModel):
    """
    Deployment of a new contract instance.

    A missing ``contract_address_salt`` is filled in with a random value when
    the transaction is encoded.
    """
    type: Literal["DEPLOY"] = "DEPLOY"
    contract_definition: CompiledContract
    constructor_calldata: List[str] = Field(default_factory=list)
    contract_address_salt: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("contract_address_salt", mode="before")
    @classmethod
    def _normalize_salt(cls, value: Any) -> Any:
        return None if value is None else to_int(value)


Transaction = Annotated[
    Union[InvokeFunctionTransaction, DeployTransaction],
    Field(discriminator="type")
]


class CallContractTransaction(BaseModel):
    """Read-only call against a deployed contract"""
    contract_address: int
    entry_point_selector: int
    calldata: List[int] = Field(default_factory=list)
    signature: List[int] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator("contract_address", "entry_point_selector", mode="before")
    @classmethod
    def _normalize_number(cls, value: Any) -> Any:
        return to_int(value)

    @field_validator("calldata", "signature", mode="before")
    @classmethod
    def _normalize_numbers(cls, value: Any) -> Any:
        return _to_int_list(value)


class _GatewayResponse(BaseModel):
    model_config = ConfigDict(extra="allow")


class AddTransactionResponse(_GatewayResponse):
    """Response of the gateway's add_transaction endpoint"""
    code: str
    transaction_hash: str
    address: Optional[str] = None


class CallContractResponse(_GatewayResponse):
    result: List[str]


class GetContractAddressesResponse(_GatewayResponse):
    starknet: str = Field(..., alias="Starknet")
    gps_statement_verifier: str = Field(..., alias="GpsStatementVerifier")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class GetBlockResponse(_GatewayResponse):
    block_id: Optional[Union[int, str]] = None
    previous_block_id: Optional[Union[int, str]] = None
    state_root: Optional[str] = None
    status: Optional[str] = None
    timestamp: Optional[int] = None
    transaction_receipts: Any = None
    transactions: Any = None


class GetCodeResponse(_GatewayResponse):
    bytecode: List[str] = Field(default_factory=list)
    abi: List[Dict[str, Any]] = Field(default_factory=list)


class GetTransactionStatusResponse(_GatewayResponse):
    """
    Status record for a transaction.

    ``tx_status`` is kept as the raw string so statuses unknown to this SDK
    still pass through.
    """
    tx_status: str
    block_id: Optional[Union[int, str]] = None
    tx_failure_reason: Optional[Dict[str, Any]] = None

    @property
    def status(self) -> Optional[TransactionStatus]:
        try:
            return TransactionStatus(self.tx_status)
        except ValueError:
            return None


class GetTransactionResponse(_GatewayResponse):
    status: str
    transaction: Optional[Dict[str, Any]] = None
    transaction_id: Optional[int] = None
    transaction_hash: Optional[str] = None
    block_id: Optional[Union[int, str]] = None
    block_number: Optional[int] = None
    transaction_index: Optional[int] = None
    transaction_failure_reason: Optional[Dict[str, Any]] = None
