from __future__ import annotations

from typing import List, Optional, Tuple

from eth_account import Account
from eth_utils import to_checksum_address
from web3 import AsyncWeb3, Web3

from groupvault.contracts import FACTORY_ABI
from groupvault.core.amounts import AmountLike, as_base_units
from groupvault.core.chains import Chain, get_asset
from groupvault.utils.format import is_valid_address


def _create_vault_args(
    chain: Chain,
    name: str,
    asset: str,
    donation_recipient: str,
    min_deposit: AmountLike,
    deposit_cap: Optional[AmountLike],
) -> Tuple:
    if not name or not name.strip():
        raise ValueError("vault name is required")
    if not is_valid_address(donation_recipient):
        raise ValueError(f"Invalid donation recipient address: {donation_recipient}")
    info = get_asset(chain, asset)
    minimum = as_base_units(min_deposit, info.decimals)
    # An empty cap field means the vault is uncapped.
    cap = 0 if deposit_cap is None or deposit_cap == "" else as_base_units(deposit_cap, info.decimals)
    return (name.strip(), info.vault, info.vault, to_checksum_address(donation_recipient), minimum, cap)


def _factory_address(chain: Chain) -> str:
    if not chain.factory:
        raise ValueError(f"No vault factory configured for {chain.name}")
    return to_checksum_address(chain.factory)


class SyncVaultFactoryService:
    def __init__(self, web3: Web3, chain: Chain, account_address: str, private_key: Optional[str] = None) -> None:
        self._web3 = web3
        self._chain = chain
        self._account = account_address
        self._private_key = private_key
        self._factory = None

    def _contract(self):
        if self._factory is None:
            self._factory = self._web3.eth.contract(address=_factory_address(self._chain), abi=FACTORY_ABI)
        return self._factory

    def all_vaults(self) -> List[str]:
        return list(self._contract().functions.getAllVaults().call())

    def vaults_by_creator(self, creator: Optional[str] = None) -> List[str]:
        return list(self._contract().functions.getVaultsByCreator(creator or self._account).call())

    def create_vault(
        self,
        name: str,
        asset: str,
        donation_recipient: str,
        min_deposit: AmountLike,
        deposit_cap: Optional[AmountLike] = None,
    ) -> str:
        """
        Deploy a new group vault through the factory.

        Args:
            name: Display name of the vault
            asset: Asset symbol from the chain's asset table (e.g. "USDC")
            donation_recipient: Address that receives all donated yield
            min_deposit: Minimum deposit, in the asset's human units
            deposit_cap: Optional deposit cap; omitted or empty means uncapped

        Returns:
            Transaction hash
        """
        args = _create_vault_args(self._chain, name, asset, donation_recipient, min_deposit, deposit_cap)
        if not self._private_key:
            raise ValueError("private_key required for create_vault")
        txn = self._contract().functions.createVault(*args).build_transaction(
            {
                "from": self._account,
                "nonce": self._web3.eth.get_transaction_count(self._account),
            }
        )
        signed = self._web3.eth.account.sign_transaction(txn, private_key=self._private_key)
        tx_hash = self._web3.eth.send_raw_transaction(signed.raw_transaction)
        return Web3.to_hex(tx_hash)


class AsyncVaultFactoryService:
    def __init__(self, web3: AsyncWeb3, chain: Chain, account_address: str, private_key: Optional[str] = None) -> None:
        self._web3 = web3
        self._chain = chain
        self._account = account_address
        self._private_key = private_key
        self._factory = None

    def _contract(self):
        if self._factory is None:
            self._factory = self._web3.eth.contract(address=_factory_address(self._chain), abi=FACTORY_ABI)
        return self._factory

    async def all_vaults(self) -> List[str]:
        return list(await self._contract().functions.getAllVaults().call())

    async def vaults_by_creator(self, creator: Optional[str] = None) -> List[str]:
        return list(await self._contract().functions.getVaultsByCreator(creator or self._account).call())

    async def create_vault(
        self,
        name: str,
        asset: str,
        donation_recipient: str,
        min_deposit: AmountLike,
        deposit_cap: Optional[AmountLike] = None,
    ) -> str:
        args = _create_vault_args(self._chain, name, asset, donation_recipient, min_deposit, deposit_cap)
        if not self._private_key:
            raise ValueError("private_key required for create_vault")
        txn = await self._contract().functions.createVault(*args).build_transaction(
            {
                "from": self._account,
                "nonce": await self._web3.eth.get_transaction_count(self._account),
            }
        )
        signed = Account.sign_transaction(txn, private_key=self._private_key)
        tx_hash = await self._web3.eth.send_raw_transaction(signed.raw_transaction)
        return Web3.to_hex(tx_hash)
