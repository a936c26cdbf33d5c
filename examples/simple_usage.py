#!/usr/bin/env python3
"""
Simple example of using the StarkNet SDK.
"""
import json
import os
import sys

from starknet_sdk import ProviderOptions, StarknetClient, StarknetError
from starknet_sdk.utils import get_selector_from_name


def main():
    """
    Demonstrate basic usage of the StarknetClient.

    This example shows how to:
    1. Initialize the client
    2. Deploy a compiled contract
    3. Invoke a function on it and wait for confirmation
    """
    # Read configuration from environment
    NETWORK = os.environ.get("STARKNET_NETWORK", "devnet")
    CONTRACT_PATH = os.environ.get("CONTRACT_PATH")

    if not CONTRACT_PATH:
        print("ERROR: CONTRACT_PATH environment variable is required")
        return

    client = StarknetClient(ProviderOptions(network=NETWORK))

    with open(CONTRACT_PATH) as f:
        compiled = f.read()

    try:
        deployed = client.deploy_contract(compiled)
        print(f"Deploy submitted: {deployed.transaction_hash}")
        print(f"Contract address: {deployed.address}")
        client.wait_for_tx(deployed.transaction_hash)

        invoked = client.invoke_function(
            deployed.address,
            get_selector_from_name("increase_balance"),
            calldata=["42"]
        )
        status = client.wait_for_tx(invoked.transaction_hash)
        print(f"Invoke confirmed: {invoked.transaction_hash} ({status.tx_status})")

        result = client.call_contract({
            "contract_address": deployed.address,
            "entry_point_selector": get_selector_from_name("get_balance"),
        })
        print(f"Balance: {json.dumps(result.result)}")

    except StarknetError as e:
        print(f"Error: {str(e)}")
        sys.exit(1)
    finally:
        client.close()


if __name__ == "__main__":
    main()
