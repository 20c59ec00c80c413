from __future__ import annotations

from typing import Optional

from eth_account import Account
from eth_utils import to_checksum_address
from web3 import AsyncWeb3, Web3

from groupvault.contracts import ERC20_ABI, YEARN_VAULT_ABI
from groupvault.core.amounts import AmountLike, as_base_units, as_positive_base_units

# AUSD and its yVault share token both use 6 decimals.
YEARN_DECIMALS = 6


def _apy_from_price_per_share(price_per_share: int) -> float:
    return (price_per_share / 10**YEARN_DECIMALS - 1) * 100


class SyncYearnVaultService:
    def __init__(
        self,
        web3: Web3,
        vault_address: str,
        token_address: str,
        account_address: str,
        private_key: Optional[str] = None,
    ) -> None:
        self._web3 = web3
        self._vault_address = to_checksum_address(vault_address)
        self._account = account_address
        self._private_key = private_key
        self._vault = web3.eth.contract(address=self._vault_address, abi=YEARN_VAULT_ABI)
        self._token = web3.eth.contract(address=to_checksum_address(token_address), abi=ERC20_ABI)

    def _send(self, fn, operation: str) -> str:
        if not self._private_key:
            raise ValueError(f"private_key required for {operation}")
        txn = fn.build_transaction(
            {
                "from": self._account,
                "nonce": self._web3.eth.get_transaction_count(self._account),
            }
        )
        signed = self._web3.eth.account.sign_transaction(txn, private_key=self._private_key)
        tx_hash = self._web3.eth.send_raw_transaction(signed.raw_transaction)
        return Web3.to_hex(tx_hash)

    def balance(self) -> int:
        return int(self._token.functions.balanceOf(self._account).call())

    def vault_balance(self) -> int:
        return int(self._vault.functions.balanceOf(self._account).call())

    def allowance(self) -> int:
        return int(self._token.functions.allowance(self._account, self._vault_address).call())

    def price_per_share(self) -> int:
        return int(self._vault.functions.pricePerShare().call())

    def apy_estimate(self) -> float:
        return _apy_from_price_per_share(self.price_per_share())

    def needs_approval(self, amount: AmountLike) -> bool:
        return as_base_units(amount, YEARN_DECIMALS) > self.allowance()

    def approve(self, amount: AmountLike) -> str:
        value = as_positive_base_units(amount, YEARN_DECIMALS, "approve")
        return self._send(self._token.functions.approve(self._vault_address, value), "approve")

    def deposit(self, amount: AmountLike, receiver: Optional[str] = None) -> str:
        value = as_positive_base_units(amount, YEARN_DECIMALS, "deposit")
        return self._send(self._vault.functions.deposit(value, receiver or self._account), "deposit")


class AsyncYearnVaultService:
    def __init__(
        self,
        web3: AsyncWeb3,
        vault_address: str,
        token_address: str,
        account_address: str,
        private_key: Optional[str] = None,
    ) -> None:
        self._web3 = web3
        self._vault_address = to_checksum_address(vault_address)
        self._account = account_address
        self._private_key = private_key
        self._vault = web3.eth.contract(address=self._vault_address, abi=YEARN_VAULT_ABI)
        self._token = web3.eth.contract(address=to_checksum_address(token_address), abi=ERC20_ABI)

    async def _send(self, fn, operation: str) -> str:
        if not self._private_key:
            raise ValueError(f"private_key required for {operation}")
        txn = await fn.build_transaction(
            {
                "from": self._account,
                "nonce": await self._web3.eth.get_transaction_count(self._account),
            }
        )
        signed = Account.sign_transaction(txn, private_key=self._private_key)
        tx_hash = await self._web3.eth.send_raw_transaction(signed.raw_transaction)
        return Web3.to_hex(tx_hash)

    async def balance(self) -> int:
        return int(await self._token.functions.balanceOf(self._account).call())

    async def vault_balance(self) -> int:
        return int(await self._vault.functions.balanceOf(self._account).call())

    async def allowance(self) -> int:
        return int(await self._token.functions.allowance(self._account, self._vault_address).call())

    async def price_per_share(self) -> int:
        return int(await self._vault.functions.pricePerShare().call())

    async def apy_estimate(self) -> float:
        return _apy_from_price_per_share(await self.price_per_share())

    async def needs_approval(self, amount: AmountLike) -> bool:
        value = as_base_units(amount, YEARN_DECIMALS)
        return value > await self.allowance()

    async def approve(self, amount: AmountLike) -> str:
        value = as_positive_base_units(amount, YEARN_DECIMALS, "approve")
        return await self._send(self._token.functions.approve(self._vault_address, value), "approve")

    async def deposit(self, amount: AmountLike, receiver: Optional[str] = None) -> str:
        value = as_positive_base_units(amount, YEARN_DECIMALS, "deposit")
        return await self._send(self._vault.functions.deposit(value, receiver or self._account), "deposit")
