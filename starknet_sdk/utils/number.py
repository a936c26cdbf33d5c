"""
Conversions between integers, hex wire strings and decimal strings.

Every on-chain numeric field (addresses, salts, selectors, signature
components) is handled as a plain Python ``int`` internally, whatever form
the caller passed it in.
"""
import re
from typing import Iterable, List, Union

from ..exceptions import MalformedNumberError

BigNumberish = Union[str, int]

_DECIMAL_RE = re.compile(r"-?[0-9]+")
_HEX_RE = re.compile(r"-?0[xX][0-9a-fA-F]+")


def is_hex(text: str) -> bool:
    """
    Check whether a string is a ``0x``-prefixed hex number.

    Args:
        text: String to check

    Returns:
        True if the string is valid prefixed hex
    """
    return isinstance(text, str) and bool(_HEX_RE.fullmatch(text))


def to_int(value: BigNumberish) -> int:
    """
    Normalize a decimal string, hex string or integer to an ``int``.

    Args:
        value: Value to convert

    Returns:
        The integer value

    Raises:
        MalformedNumberError: If the value is not a valid decimal or hex number
    """
    # bool is an int subclass but never a meaningful felt
    if isinstance(value, bool):
        raise MalformedNumberError(value, "booleans are not numbers")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise MalformedNumberError(value, f"unsupported type {type(value).__name__}")

    if _HEX_RE.fullmatch(value):
        negative = value.startswith("-")
        digits = value[3:] if negative else value[2:]
        result = int(digits, 16)
        return -result if negative else result
    if _DECIMAL_RE.fullmatch(value):
        return int(value, 10)
    raise MalformedNumberError(value)


def to_hex(value: BigNumberish) -> str:
    """
    Encode a number as canonical hex: lowercase, ``0x``-prefixed and without
    leading zeros (zero is ``0x0``).

    Args:
        value: Number in any accepted representation

    Returns:
        Canonical hex string
    """
    return hex(to_int(value))


def hex_to_decimal_string(text: str) -> str:
    """Convert a hex string to its decimal string form."""
    if not is_hex(text):
        raise MalformedNumberError(text, "expected a 0x-prefixed hex string")
    return str(to_int(text))


def to_felt(value: BigNumberish) -> str:
    """Render a number as the decimal string used for felt calldata."""
    return str(to_int(value))


def big_numberish_list_to_decimal_strings(values: Iterable[BigNumberish]) -> List[str]:
    return [to_felt(v) for v in values]


def assert_in_range(
    value: BigNumberish,
    lower_bound: BigNumberish,
    upper_bound: BigNumberish,
    name: str = ""
) -> None:
    """
    Check that ``lower_bound <= value < upper_bound``.

    Raises:
        ValueError: If the value is out of range
    """
    number = to_int(value)
    low = to_int(lower_bound)
    high = to_int(upper_bound)
    if not low <= number < high:
        label = name or "Value"
        raise ValueError(
            f"{label} should be in the range [{to_hex(low)}, {to_hex(high)}), got {to_hex(number)}"
        )
