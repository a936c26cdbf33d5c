"""
StarkNet SDK - submit transactions to StarkNet and track their confirmation.
"""
from .client import StarknetClient
from .confirmation import ConfirmationPoller, PollerState, wait_for_tx
from .config import Network, NetworkConfig, ProviderOptions
from .encoder import TransactionEncoder
from .exceptions import (
    GatewayError,
    GatewayRequestError,
    GatewayResponseError,
    InvalidProgramFormatError,
    MalformedNumberError,
    StarknetError,
    TransactionError,
    TransactionRejectedError,
    TransactionUnreachableError,
)
from .gateway import GatewayClient
from .models import (
    CallContractTransaction,
    CompiledContract,
    DeployTransaction,
    InvokeFunctionTransaction,
    TransactionStatus,
    TransactionType,
)
from .signer import Signer
from .version import __version__

__all__ = [
    "StarknetClient",
    "ConfirmationPoller",
    "PollerState",
    "wait_for_tx",
    "Network",
    "NetworkConfig",
    "ProviderOptions",
    "TransactionEncoder",
    "GatewayClient",
    "Signer",
    "CallContractTransaction",
    "CompiledContract",
    "DeployTransaction",
    "InvokeFunctionTransaction",
    "TransactionStatus",
    "TransactionType",
    "StarknetError",
    "MalformedNumberError",
    "InvalidProgramFormatError",
    "GatewayError",
    "GatewayRequestError",
    "GatewayResponseError",
    "TransactionError",
    "TransactionRejectedError",
    "TransactionUnreachableError",
    "__version__",
]
