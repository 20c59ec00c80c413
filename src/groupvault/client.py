from __future__ import annotations

from typing import Optional

from eth_account import Account
from web3 import AsyncHTTPProvider, AsyncWeb3, HTTPProvider, Web3

from groupvault.contracts import ERC20_ABI
from groupvault.core.chains import KATANA_TESTNET, Chain, as_chain, asset_for_vault
from groupvault.factory import AsyncVaultFactoryService, SyncVaultFactoryService
from groupvault.vault import AsyncVaultService, SyncVaultService
from groupvault.yearn import AsyncYearnVaultService, SyncYearnVaultService


def _yearn_addresses(chain: Chain, vault_address: Optional[str], token_address: Optional[str]) -> tuple[str, str]:
    vault_address = vault_address or chain.yearn_vault
    token_address = token_address or chain.ausd_token
    if not vault_address or not token_address:
        raise ValueError(f"Yearn vault and AUSD token addresses are not configured for {chain.name}")
    return vault_address, token_address


class GroupVault:
    def __init__(self, web3: Web3, chain: Chain, account_address: str, private_key: Optional[str] = None) -> None:
        self._web3 = web3
        self._chain = chain
        self._account = account_address
        self._private_key = private_key
        self._factory = SyncVaultFactoryService(web3, chain, account_address, private_key)

    @classmethod
    def create(
        cls, rpc_url: str, chain: Chain | str | int = KATANA_TESTNET, private_key: Optional[str] = None
    ) -> "GroupVault":
        chain_obj = as_chain(chain)
        if private_key is None:
            raise ValueError("private_key required to create GroupVault")
        account = Account.from_key(private_key)
        return cls(Web3(HTTPProvider(rpc_url)), chain_obj, account.address, private_key)

    @property
    def web3(self) -> Web3:
        return self._web3

    @property
    def chain(self) -> Chain:
        return self._chain

    @property
    def account(self) -> str:
        return self._account

    @property
    def factory(self) -> SyncVaultFactoryService:
        return self._factory

    def vault(self, address: str, decimals: Optional[int] = None) -> SyncVaultService:
        """Open a vault service, resolving the asset's decimals when not given."""
        if decimals is None:
            probe = SyncVaultService(self._web3, address, self._account)
            info = probe.vault_info()
            asset = asset_for_vault(self._chain, info.strategy)
            if asset is not None:
                decimals = asset.decimals
            else:
                token = self._web3.eth.contract(address=info.asset, abi=ERC20_ABI)
                decimals = int(token.functions.decimals().call())
        return SyncVaultService(self._web3, address, self._account, self._private_key, decimals)

    def yearn(self, vault_address: Optional[str] = None, token_address: Optional[str] = None) -> SyncYearnVaultService:
        vault_address, token_address = _yearn_addresses(self._chain, vault_address, token_address)
        return SyncYearnVaultService(self._web3, vault_address, token_address, self._account, self._private_key)


class AsyncGroupVault:
    """
    Async client for Group Vault contracts.

    Example:
        client = await AsyncGroupVault.create(rpc_url, "katana-testnet", private_key)
        vault = await client.vault(address)
        tx_hash = await vault.deposit("12.5")
    """

    def __init__(self, web3: AsyncWeb3, chain: Chain, account_address: str, private_key: Optional[str] = None) -> None:
        self._web3 = web3
        self._chain = chain
        self._account = account_address
        self._private_key = private_key
        self._factory = AsyncVaultFactoryService(web3, chain, account_address, private_key)

    @classmethod
    async def create(
        cls, rpc_url: str, chain: Chain | str | int = KATANA_TESTNET, private_key: Optional[str] = None
    ) -> "AsyncGroupVault":
        chain_obj = as_chain(chain)
        if private_key is None:
            raise ValueError("private_key required to create AsyncGroupVault")
        account = Account.from_key(private_key)
        return cls(AsyncWeb3(AsyncHTTPProvider(rpc_url)), chain_obj, account.address, private_key)

    @property
    def web3(self) -> AsyncWeb3:
        return self._web3

    @property
    def chain(self) -> Chain:
        return self._chain

    @property
    def account(self) -> str:
        return self._account

    @property
    def factory(self) -> AsyncVaultFactoryService:
        return self._factory

    async def vault(self, address: str, decimals: Optional[int] = None) -> AsyncVaultService:
        if decimals is None:
            probe = AsyncVaultService(self._web3, address, self._account)
            info = await probe.vault_info()
            asset = asset_for_vault(self._chain, info.strategy)
            if asset is not None:
                decimals = asset.decimals
            else:
                token = self._web3.eth.contract(address=info.asset, abi=ERC20_ABI)
                decimals = int(await token.functions.decimals().call())
        return AsyncVaultService(self._web3, address, self._account, self._private_key, decimals)

    def yearn(self, vault_address: Optional[str] = None, token_address: Optional[str] = None) -> AsyncYearnVaultService:
        vault_address, token_address = _yearn_addresses(self._chain, vault_address, token_address)
        return AsyncYearnVaultService(self._web3, vault_address, token_address, self._account, self._private_key)
