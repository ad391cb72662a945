#!/usr/bin/env python3
"""
Transaction Submission Demo

Sends a transfer through the full pipeline against the in-memory node,
then triggers a few rejections to show the error messages.

Run with: python examples/send_transaction.py
"""

import asyncio

from txsubmit import OPTIMISM, TransactionError, WalletClient, configure_logging, parse_ether, parse_gwei

# Test addresses
SENDER = "0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266"
RECIPIENT = "0x70997970c51812dc3a010c7d01b50e0d17dc79c8"


async def main() -> None:
    configure_logging("INFO")

    print("=" * 60)
    print("txsubmit - Transaction Submission Demo")
    print("=" * 60)
    print()

    client = await WalletClient.create(mode="mock")
    node = client.provider
    node.set_balance(SENDER, parse_ether(10_000))
    node.set_next_block_base_fee_per_gas(parse_gwei(10))
    await node.mine()

    # Step 1: a plain transfer with every fee field left to the resolver
    print("Step 1: Sending 1 ETH...")
    tx_hash = await client.send_transaction(from_=SENDER, to=RECIPIENT, value=parse_ether(1))
    await node.mine()
    receipt = node.get_receipt(tx_hash)
    print(f"  Hash:      {tx_hash}")
    print(f"  Gas price: {receipt.effective_gas_price} wei")
    print(f"  Recipient: {await client.get_balance(RECIPIENT)} wei")
    print()

    # Step 2: rejections
    print("Step 2: Rejections")
    failing = [
        {"from": SENDER, "to": RECIPIENT, "value": parse_ether(1), "gas": 100},
        {"from": SENDER, "to": RECIPIENT, "value": parse_ether(1), "maxFeePerGas": 1},
        {"from": SENDER, "to": RECIPIENT, "value": parse_ether(1), "chain": OPTIMISM},
    ]
    for params in failing:
        try:
            await client.send_transaction(params)
        except TransactionError as e:
            print()
            print(f"[{e.kind.value}]")
            print(e)

    await client.close()


if __name__ == "__main__":
    asyncio.run(main())
