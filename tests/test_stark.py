"""
Tests for the StarkNet helpers: program compression, selectors, signatures.
"""
import base64
import gzip
import json

import pytest

from starknet_sdk.exceptions import InvalidProgramFormatError
from starknet_sdk.utils.stark import (
    ADDRESS_BOUND,
    MASK_250,
    add_hex_prefix,
    compress_program,
    decompress_program,
    format_signature,
    get_selector_from_name,
    get_storage_var_address,
    make_address,
    random_address,
    remove_hex_prefix,
    starknet_keccak,
)


def test_compress_program_is_deterministic(sample_program):
    first = compress_program(sample_program)
    second = compress_program(json.loads(json.dumps(sample_program)))
    assert first == second


def test_compress_program_ignores_key_order(sample_program):
    reordered = dict(reversed(list(sample_program.items())))
    assert compress_program(reordered) == compress_program(sample_program)


def test_compress_program_output_is_gzipped_base64(sample_program):
    compressed = compress_program(sample_program)
    assert isinstance(compressed, str)
    raw = gzip.decompress(base64.b64decode(compressed))
    assert json.loads(raw) == sample_program


def test_decompress_program_round_trip(sample_program):
    assert decompress_program(compress_program(sample_program)) == sample_program


def test_decompress_program_rejects_garbage():
    with pytest.raises(InvalidProgramFormatError):
        decompress_program("definitely not base64 gzip!")


@pytest.mark.parametrize("program", [
    "a string",
    ["a", "list"],
    None,
    {"data": {1, 2}},
    {"value": float("nan")},
    {"obj": object()},
])
def test_compress_program_rejects_malformed_programs(program):
    with pytest.raises(InvalidProgramFormatError):
        compress_program(program)


def test_selector_from_name_known_values():
    assert get_selector_from_name("transfer") == (
        "0x83afd3f4caedc6eebf44246fe54e38c95e3179a5ec9ea81740eca5b482d12e"
    )
    assert get_selector_from_name("__execute__") == (
        "0x15d40a3d6ca2ac30f4031e42be28da9b056fef9bb7357ac5e85627ee876e5ad"
    )


def test_starknet_keccak_fits_in_250_bits():
    for name in ["balance", "increase_balance", "x" * 100]:
        value = starknet_keccak(name)
        assert 0 <= value <= MASK_250


def test_storage_var_address_matches_keccak():
    assert get_storage_var_address("balance") == hex(starknet_keccak("balance"))


def test_random_address_in_range():
    for _ in range(20):
        assert 0 <= random_address() < ADDRESS_BOUND


def test_hex_prefix_helpers():
    assert add_hex_prefix("abc") == "0xabc"
    assert add_hex_prefix("0xabc") == "0xabc"
    assert remove_hex_prefix("0xabc") == "abc"
    assert remove_hex_prefix("abc") == "abc"
    assert make_address("0xABCdef") == "0xabcdef"
    assert make_address("ABC") == "0xabc"


def test_format_signature():
    assert format_signature(None) is None
    assert format_signature(["0x1", "2"]) == [1, 2]
    assert format_signature((3, 4)) == [3, 4]
    assert format_signature([]) is None
    assert format_signature(()) is None
    with pytest.raises(ValueError):
        format_signature([1])
    with pytest.raises(ValueError):
        format_signature([1, 2, 3])
