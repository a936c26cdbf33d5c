#!/usr/bin/env python3
"""
Example querying the feeder gateway of a named network.
"""
import logging
import os

from starknet_sdk import ProviderOptions, StarknetClient

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    network = os.environ.get("STARKNET_NETWORK", "alpha")
    client = StarknetClient(ProviderOptions(network=network))

    print(f"\n=== StarkNet {network} ===\n")
    addresses = client.get_contract_addresses()
    print(f"Core contract: {addresses.starknet}")
    print(f"GPS verifier: {addresses.gps_statement_verifier}")

    block = client.get_block()
    print(f"Latest block: {block.block_id} ({block.status})")

    tx_hash = os.environ.get("TX_HASH")
    if tx_hash:
        status = client.get_transaction_status(tx_hash)
        print(f"Transaction {tx_hash}: {status.tx_status}")

    client.close()


if __name__ == "__main__":
    main()
