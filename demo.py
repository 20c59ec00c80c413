#!/usr/bin/env python3
"""
groupvault Demo - list vaults and deposit into one on Katana Testnet
"""
import asyncio
import os
import sys

from groupvault import AsyncGroupVault, format_amount
from groupvault.core import AmountError
from groupvault.utils import format_address, format_date_time

RPC_URL = os.environ.get("GROUPVAULT_RPC_URL", "https://rpc.tatara.katanarpc.com")


async def main():
    private_key = os.environ.get("GROUPVAULT_PRIVATE_KEY")
    if not private_key:
        print("Set GROUPVAULT_PRIVATE_KEY (and GROUPVAULT_FACTORY_ADDRESS) to run the demo")
        sys.exit(1)

    print("=" * 60)
    print("groupvault Demo - Katana Testnet")
    print("=" * 60)

    # 1. Connect to network
    print("\n[1/3] Connecting to Katana testnet...")
    client = await AsyncGroupVault.create(rpc_url=RPC_URL, chain="katana-testnet", private_key=private_key)
    print(f"  ✓ Connected as {format_address(client.account)}")
    print(f"  ✓ Chain: {client.chain.name} (ID: {client.chain.id})")

    # 2. List vaults
    print("\n[2/3] Fetching vaults...")
    vaults = await client.factory.all_vaults()
    print(f"  ✓ Found {len(vaults)} vaults")
    for address in vaults:
        vault = await client.vault(address)
        summary = await vault.summary()
        print(f"    - {summary.name} ({summary.short_address})")
        print(f"      Total assets: {summary.total_assets}  Donated: {summary.yield_donated}")
        print(f"      Members: {summary.member_count}")

    if not vaults:
        return

    # 3. Deposit into the first vault
    print("\n[3/3] Depositing into the first vault...")
    vault = await client.vault(vaults[0])
    amount = os.environ.get("GROUPVAULT_DEPOSIT", "1")
    try:
        if await vault.needs_approval(amount):
            tx_hash = await vault.approve(amount)
            print(f"  ✓ Approval sent: {tx_hash}")
            await client.web3.eth.wait_for_transaction_receipt(tx_hash)
        tx_hash = await vault.deposit(amount)
    except AmountError as e:
        print(f"  ⚠ Invalid amount {amount!r}: {e.message}")
        return
    print(f"  ✓ Deposit sent: {tx_hash}")
    await client.web3.eth.wait_for_transaction_receipt(tx_hash)

    member = await vault.member_info()
    print(f"  ✓ Shares: {format_amount(member.shares, vault.decimals, 6)}")
    print(f"  ✓ Joined: {format_date_time(member.joined_at)}")


if __name__ == "__main__":
    asyncio.run(main())
