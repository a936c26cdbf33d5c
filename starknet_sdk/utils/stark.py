"""
StarkNet-specific helpers: program compression, selectors, addresses and
signature formatting.
"""
import base64
import gzip
import json
import logging
import secrets
from typing import Any, Dict, List, Optional, Sequence

from web3 import Web3

from ..exceptions import InvalidProgramFormatError
from .number import BigNumberish, to_hex, to_int

logger = logging.getLogger(__name__)

MASK_250 = 2 ** 250 - 1
# Contract addresses live below 2**251 - 256
ADDRESS_BOUND = 2 ** 251 - 256


def add_hex_prefix(text: str) -> str:
    return text if text.startswith("0x") else f"0x{text}"


def remove_hex_prefix(text: str) -> str:
    return text[2:] if text.startswith(("0x", "0X")) else text


def make_address(text: str) -> str:
    """Return the prefixed, lowercase form of an address string."""
    return add_hex_prefix(text).lower()


def starknet_keccak(text: str) -> int:
    """
    Keccak-256 of the UTF-8 text, truncated to its low 250 bits.

    Args:
        text: Input text (usually a function or storage variable name)

    Returns:
        The masked hash as an integer
    """
    digest = Web3.keccak(text=text)
    return int.from_bytes(bytes(digest), "big") & MASK_250


def get_selector_from_name(func_name: str) -> str:
    """
    Compute the entry-point selector for a function name.

    Args:
        func_name: Cairo function name, e.g. ``"increase_balance"``

    Returns:
        Selector as canonical hex
    """
    return to_hex(starknet_keccak(func_name))


def get_storage_var_address(var_name: str) -> str:
    """Storage address of an argument-less storage variable."""
    return to_hex(starknet_keccak(var_name))


def random_address() -> int:
    """Generate a random value in the contract address space."""
    return secrets.randbelow(ADDRESS_BOUND)


def _serialize_program(program: Any) -> bytes:
    if not isinstance(program, dict):
        raise InvalidProgramFormatError(
            f"Program must be a JSON object, got {type(program).__name__}"
        )
    try:
        text = json.dumps(program, sort_keys=True, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise InvalidProgramFormatError(f"Program could not be serialized: {e}") from e
    return text.encode("utf-8")


def compress_program(program: Dict[str, Any]) -> str:
    """
    Compress a compiled program for a deploy transaction.

    The program is serialized with sorted keys, gzipped with a fixed header
    timestamp and base64-encoded, so equal programs always produce the same
    string.

    Args:
        program: The ``program`` section of a compiled contract

    Returns:
        Base64 text of the gzipped program

    Raises:
        InvalidProgramFormatError: If the program is not a serializable object
    """
    raw = _serialize_program(program)
    compressed = gzip.compress(raw, mtime=0)
    logger.debug(f"Compressed program from {len(raw)} to {len(compressed)} bytes")
    return base64.b64encode(compressed).decode("ascii")


def decompress_program(compressed: str) -> Dict[str, Any]:
    """Inverse of :func:`compress_program`."""
    try:
        raw = gzip.decompress(base64.b64decode(compressed, validate=True))
        return json.loads(raw.decode("utf-8"))
    except (ValueError, OSError) as e:
        raise InvalidProgramFormatError(f"Not a compressed program: {e}") from e


def format_signature(signature: Optional[Sequence[BigNumberish]]) -> Optional[List[int]]:
    """
    Format an ``(r, s)`` signature as a two-element list of integers.

    Args:
        signature: Signature pair, or None

    Returns:
        ``[r, s]`` as ints, or None when no signature was given (None or
        an empty sequence)

    Raises:
        ValueError: If the signature does not have exactly two components
    """
    if signature is None or len(signature) == 0:
        return None
    components = [to_int(c) for c in signature]
    if len(components) != 2:
        raise ValueError(f"Signature must have exactly 2 components, got {len(components)}")
    return components
