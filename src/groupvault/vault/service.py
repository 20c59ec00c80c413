from __future__ import annotations

from typing import List, Optional

from eth_account import Account
from eth_utils import to_checksum_address
from web3 import AsyncWeb3, Web3

from groupvault.contracts import ERC20_ABI, VAULT_ABI
from groupvault.core.amounts import (
    DEFAULT_DECIMALS,
    AmountLike,
    as_base_units,
    as_positive_base_units,
    format_amount,
)
from groupvault.utils.format import format_address
from .types import MemberInfo, PerformanceReport, VaultConfig, VaultSummary


class SyncVaultService:
    def __init__(
        self,
        web3: Web3,
        vault_address: str,
        account_address: str,
        private_key: Optional[str] = None,
        decimals: int = DEFAULT_DECIMALS,
    ) -> None:
        self._web3 = web3
        self._address = to_checksum_address(vault_address)
        self._account = account_address
        self._private_key = private_key
        self._decimals = decimals
        self._vault = web3.eth.contract(address=self._address, abi=VAULT_ABI)
        self._asset = None

    @property
    def address(self) -> str:
        return self._address

    @property
    def decimals(self) -> int:
        return self._decimals

    def _asset_token(self):
        if self._asset is None:
            info = self.vault_info()
            self._asset = self._web3.eth.contract(address=info.asset, abi=ERC20_ABI)
        return self._asset

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

    def vault_info(self) -> VaultConfig:
        return VaultConfig.from_tuple(self._vault.functions.getVaultInfo().call())

    def member_info(self, member: Optional[str] = None) -> MemberInfo:
        return MemberInfo.from_tuple(self._vault.functions.getMemberInfo(member or self._account).call())

    def performance(self) -> PerformanceReport:
        return PerformanceReport.from_tuple(self._vault.functions.getPerformance().call())

    def total_assets(self) -> int:
        return int(self._vault.functions.totalAssets().call())

    def members(self) -> List[str]:
        return list(self._vault.functions.getMembers().call())

    def shares_of(self, account: Optional[str] = None) -> int:
        return int(self._vault.functions.sharesOf(account or self._account).call())

    def convert_to_shares(self, assets: AmountLike) -> int:
        return int(self._vault.functions.convertToShares(as_base_units(assets, self._decimals)).call())

    def convert_to_assets(self, shares: AmountLike) -> int:
        return int(self._vault.functions.convertToAssets(as_base_units(shares, self._decimals)).call())

    def asset_balance(self, account: Optional[str] = None) -> int:
        return int(self._asset_token().functions.balanceOf(account or self._account).call())

    def allowance(self, owner: Optional[str] = None) -> int:
        return int(self._asset_token().functions.allowance(owner or self._account, self._address).call())

    def needs_approval(self, amount: AmountLike) -> bool:
        return as_base_units(amount, self._decimals) > self.allowance()

    def approve(self, amount: AmountLike) -> str:
        value = as_positive_base_units(amount, self._decimals, "approve")
        return self._send(self._asset_token().functions.approve(self._address, value), "approve")

    def deposit(self, amount: AmountLike, receiver: Optional[str] = None) -> str:
        value = as_positive_base_units(amount, self._decimals, "deposit")
        return self._send(self._vault.functions.deposit(value, receiver or self._account), "deposit")

    def withdraw(self, shares: AmountLike, receiver: Optional[str] = None, owner: Optional[str] = None) -> str:
        value = as_positive_base_units(shares, self._decimals, "withdraw")
        fn = self._vault.functions.withdraw(value, receiver or self._account, owner or self._account)
        return self._send(fn, "withdraw")

    def harvest(self) -> str:
        return self._send(self._vault.functions.harvest(), "harvest")

    def summary(self, display_decimals: int = 2) -> VaultSummary:
        info = self.vault_info()
        perf = self.performance()
        return VaultSummary(
            address=self._address,
            short_address=format_address(self._address),
            name=info.name,
            total_assets=format_amount(perf.total_assets, self._decimals, display_decimals),
            yield_donated=format_amount(perf.yield_donated, self._decimals, display_decimals),
            member_count=len(self.members()),
            is_paused=info.is_paused,
        )


class AsyncVaultService:
    def __init__(
        self,
        web3: AsyncWeb3,
        vault_address: str,
        account_address: str,
        private_key: Optional[str] = None,
        decimals: int = DEFAULT_DECIMALS,
    ) -> None:
        self._web3 = web3
        self._address = to_checksum_address(vault_address)
        self._account = account_address
        self._private_key = private_key
        self._decimals = decimals
        self._vault = web3.eth.contract(address=self._address, abi=VAULT_ABI)
        self._asset = None

    @property
    def address(self) -> str:
        return self._address

    @property
    def decimals(self) -> int:
        return self._decimals

    async def _asset_token(self):
        if self._asset is None:
            info = await self.vault_info()
            self._asset = self._web3.eth.contract(address=info.asset, abi=ERC20_ABI)
        return self._asset

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

    async def vault_info(self) -> VaultConfig:
        return VaultConfig.from_tuple(await self._vault.functions.getVaultInfo().call())

    async def member_info(self, member: Optional[str] = None) -> MemberInfo:
        return MemberInfo.from_tuple(await self._vault.functions.getMemberInfo(member or self._account).call())

    async def performance(self) -> PerformanceReport:
        return PerformanceReport.from_tuple(await self._vault.functions.getPerformance().call())

    async def total_assets(self) -> int:
        return int(await self._vault.functions.totalAssets().call())

    async def members(self) -> List[str]:
        return list(await self._vault.functions.getMembers().call())

    async def shares_of(self, account: Optional[str] = None) -> int:
        return int(await self._vault.functions.sharesOf(account or self._account).call())

    async def convert_to_shares(self, assets: AmountLike) -> int:
        value = as_base_units(assets, self._decimals)
        return int(await self._vault.functions.convertToShares(value).call())

    async def convert_to_assets(self, shares: AmountLike) -> int:
        value = as_base_units(shares, self._decimals)
        return int(await self._vault.functions.convertToAssets(value).call())

    async def asset_balance(self, account: Optional[str] = None) -> int:
        token = await self._asset_token()
        return int(await token.functions.balanceOf(account or self._account).call())

    async def allowance(self, owner: Optional[str] = None) -> int:
        token = await self._asset_token()
        return int(await token.functions.allowance(owner or self._account, self._address).call())

    async def needs_approval(self, amount: AmountLike) -> bool:
        value = as_base_units(amount, self._decimals)
        return value > await self.allowance()

    async def approve(self, amount: AmountLike) -> str:
        value = as_positive_base_units(amount, self._decimals, "approve")
        token = await self._asset_token()
        return await self._send(token.functions.approve(self._address, value), "approve")

    async def deposit(self, amount: AmountLike, receiver: Optional[str] = None) -> str:
        value = as_positive_base_units(amount, self._decimals, "deposit")
        return await self._send(self._vault.functions.deposit(value, receiver or self._account), "deposit")

    async def withdraw(self, shares: AmountLike, receiver: Optional[str] = None, owner: Optional[str] = None) -> str:
        value = as_positive_base_units(shares, self._decimals, "withdraw")
        fn = self._vault.functions.withdraw(value, receiver or self._account, owner or self._account)
        return await self._send(fn, "withdraw")

    async def harvest(self) -> str:
        return await self._send(self._vault.functions.harvest(), "harvest")

    async def summary(self, display_decimals: int = 2) -> VaultSummary:
        info = await self.vault_info()
        perf = await self.performance()
        members = await self.members()
        return VaultSummary(
            address=self._address,
            short_address=format_address(self._address),
            name=info.name,
            total_assets=format_amount(perf.total_assets, self._decimals, display_decimals),
            yield_donated=format_amount(perf.yield_donated, self._decimals, display_decimals),
            member_count=len(members),
            is_paused=info.is_paused,
        )
