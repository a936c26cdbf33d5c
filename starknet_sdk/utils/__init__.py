"""
Utility functions for the StarkNet SDK.
"""
from .number import (
    BigNumberish,
    assert_in_range,
    big_numberish_list_to_decimal_strings,
    hex_to_decimal_string,
    is_hex,
    to_felt,
    to_hex,
    to_int,
)
from .json_bigint import parse, stringify
from .stark import (
    compress_program,
    decompress_program,
    format_signature,
    get_selector_from_name,
    get_storage_var_address,
    make_address,
    random_address,
    starknet_keccak,
)

__all__ = [
    "BigNumberish",
    "assert_in_range",
    "big_numberish_list_to_decimal_strings",
    "hex_to_decimal_string",
    "is_hex",
    "to_felt",
    "to_hex",
    "to_int",
    "parse",
    "stringify",
    "compress_program",
    "decompress_program",
    "format_signature",
    "get_selector_from_name",
    "get_storage_var_address",
    "make_address",
    "random_address",
    "starknet_keccak",
]
