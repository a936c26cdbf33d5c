"""
Pytest fixtures for the StarkNet SDK tests.
"""
import time
import urllib.parse
from typing import Any, Dict, List, Union

import pytest

from starknet_sdk.client import StarknetClient
from starknet_sdk.config import ProviderOptions
from starknet_sdk.gateway._rate_limited_log import reset_rate_limits
from starknet_sdk.models import GetTransactionStatusResponse


# Make time.sleep instantaneous so polling doesn't slow the suite down
@pytest.fixture(autouse=True)
def _fast_sleep(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda *_a, **_kw: None)


@pytest.fixture(autouse=True)
def _reset_rate_limited_log():
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture
def sample_program() -> Dict[str, Any]:
    """A trimmed-down compiled Cairo program"""
    return {
        "prime": "0x800000000000011000000000000000000000000000000000000000000000001",
        "builtins": ["pedersen", "range_check"],
        "data": ["0x40780017fff7fff", "0x1", "0x208b7fff7fff7ffe"],
        "hints": {},
        "identifiers": {
            "__main__.increase_balance": {"decorators": ["external"], "pc": 0, "type": "function"}
        },
        "main_scope": "__main__",
        "reference_manager": {"references": []},
    }


@pytest.fixture
def sample_contract(sample_program) -> Dict[str, Any]:
    """A compiled contract document as produced by the compiler"""
    return {
        "abi": [
            {
                "inputs": [{"name": "amount", "type": "felt"}],
                "name": "increase_balance",
                "outputs": [],
                "type": "function",
            }
        ],
        "entry_points_by_type": {
            "CONSTRUCTOR": [],
            "EXTERNAL": [
                {
                    "offset": "0x0",
                    "selector": "0x362398bec32bc0ebb411203221a35a0301193a96f317ebe5e40be9f60d15320",
                }
            ],
            "L1_HANDLER": [],
        },
        "program": sample_program,
    }


@pytest.fixture
def client() -> StarknetClient:
    """Devnet client with a fixed deploy salt"""
    return StarknetClient(ProviderOptions(network="devnet", timeout=5), salt_generator=lambda: 0x1234)


class ScriptedGateway:
    """
    Stand-in for GatewayClient that replays a fixed sequence of statuses.
    """

    def __init__(self, statuses: List[Union[str, Dict[str, Any]]]):
        self.statuses = list(statuses)
        self.queries: List[str] = []

    def get_transaction_status(self, tx_hash: str) -> GetTransactionStatusResponse:
        self.queries.append(tx_hash)
        if not self.statuses:
            raise AssertionError("Poller queried more statuses than scripted")
        status = self.statuses.pop(0)
        if isinstance(status, dict):
            return GetTransactionStatusResponse.model_validate(status)
        return GetTransactionStatusResponse(tx_status=status)


@pytest.fixture
def scripted_gateway():
    """Factory for ScriptedGateway instances"""
    return ScriptedGateway


def query_params(request) -> Dict[str, str]:
    """Case-preserving query parameters of a recorded requests_mock request"""
    parsed = urllib.parse.urlparse(request.url)
    return {k: v[0] for k, v in urllib.parse.parse_qs(parsed.query, keep_blank_values=True).items()}


@pytest.fixture
def get_query():
    return query_params
