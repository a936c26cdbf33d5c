"""
Signer protocol for producing transaction signatures.

Key management and the signing primitives themselves live outside this SDK;
anything that satisfies :class:`Signer` can be handed to the encoder.
"""
from typing import Protocol, Sequence, runtime_checkable

from .models import InvokeFunctionTransaction
from .utils.number import BigNumberish


@runtime_checkable
class Signer(Protocol):
    """Protocol for custom signers"""

    def sign_transaction(self, transaction: InvokeFunctionTransaction) -> Sequence[BigNumberish]:
        """Sign an invocation and return its ``(r, s)`` pair"""
        ...
