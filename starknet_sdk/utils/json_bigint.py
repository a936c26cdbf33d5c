"""
JSON helpers that keep arbitrary-precision integers exact.

Integers are always written as unquoted numeric literals with every digit
preserved, and parsed back into ``int`` rather than ``float``.
"""
import json
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel


def _default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="python", exclude_none=True)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Decimal):
        if obj == obj.to_integral_value():
            return int(obj)
        raise TypeError(f"Non-integral Decimal {obj} cannot be encoded without losing precision")
    if isinstance(obj, (set, frozenset)):
        raise TypeError("Sets have no stable order and cannot be encoded")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def stringify(payload: Any) -> str:
    """
    Serialize a payload to compact JSON text.

    Args:
        payload: Nested dicts/lists containing ints, strings, enums or
            pydantic models

    Returns:
        JSON text with integers emitted at full precision

    Raises:
        TypeError: If the payload contains values that cannot be encoded
    """
    return json.dumps(payload, default=_default, separators=(",", ":"))


def parse(text: str) -> Any:
    """
    Parse JSON text, keeping every integer literal as an exact ``int``.

    Args:
        text: JSON text

    Returns:
        The decoded payload
    """
    return json.loads(text, parse_int=int)
