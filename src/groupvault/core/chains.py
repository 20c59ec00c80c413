from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class Asset:
    symbol: str
    decimals: int
    vault: str


@dataclass(frozen=True)
class Chain:
    id: int
    name: str
    rpc_url: str
    explorer_url: str
    # Excluded from the hash: mapping proxies are unhashable.
    assets: Mapping[str, Asset] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    factory: Optional[str] = None
    yearn_vault: Optional[str] = None
    ausd_token: Optional[str] = None

    def with_factory(self, address: str) -> "Chain":
        return replace(self, factory=address)


NETWORK_KATANA = "katana"
NETWORK_KATANA_TESTNET = "katana-testnet"

CHAIN_ID_KATANA = 747474
CHAIN_ID_KATANA_TESTNET = 129399

FACTORY_ADDRESS_ENV = "GROUPVAULT_FACTORY_ADDRESS"

KATANA_VAULTS: Mapping[str, str] = MappingProxyType(
    {
        "USDC": "0x203A662b0BD271A6ed5a60EdFbd04bFce608FD36",
        "USDT": "0x2DCa96907fde857dd3D816880A0df407eeB2D2F2",
        "ETH": "0xEE7D8BCFb72bC1880D0Cf19822eB0A2e6577aB62",
        "WBTC": "0x0913DA6Da4b42f538B445599b46Bb4622342Cf52",
        "USDS": "0x62D6A123E8D19d06d68cf0d2294F9A3A0362c6b3",
    }
)

ASSETS: Mapping[str, Asset] = MappingProxyType(
    {
        "USDC": Asset(symbol="USDC", decimals=6, vault=KATANA_VAULTS["USDC"]),
        "USDT": Asset(symbol="USDT", decimals=6, vault=KATANA_VAULTS["USDT"]),
        "ETH": Asset(symbol="ETH", decimals=18, vault=KATANA_VAULTS["ETH"]),
        "WBTC": Asset(symbol="WBTC", decimals=8, vault=KATANA_VAULTS["WBTC"]),
        "USDS": Asset(symbol="USDS", decimals=18, vault=KATANA_VAULTS["USDS"]),
    }
)

KATANA = Chain(
    id=CHAIN_ID_KATANA,
    name="Katana",
    rpc_url="https://rpc.katana.network",
    explorer_url="https://explorer.katana.network",
    assets=ASSETS,
)

KATANA_TESTNET = Chain(
    id=CHAIN_ID_KATANA_TESTNET,
    name="Katana Testnet",
    rpc_url="https://rpc.tatara.katanarpc.com",
    explorer_url="https://explorer.tatara.katana.network",
    assets=ASSETS,
)


def as_chain(chain: Chain | str | int) -> Chain:
    if isinstance(chain, Chain):
        resolved = chain
    elif chain in (NETWORK_KATANA, CHAIN_ID_KATANA):
        resolved = KATANA
    elif chain in (NETWORK_KATANA_TESTNET, CHAIN_ID_KATANA_TESTNET):
        resolved = KATANA_TESTNET
    else:
        raise ValueError(f"Unsupported chain: {chain}")
    if resolved.factory is None and os.environ.get(FACTORY_ADDRESS_ENV):
        return resolved.with_factory(os.environ[FACTORY_ADDRESS_ENV])
    return resolved


def get_asset(chain: Chain, symbol: str) -> Asset:
    try:
        return chain.assets[symbol.upper()]
    except KeyError:
        raise ValueError(f"Unsupported asset {symbol} on {chain.name}") from None


def asset_for_vault(chain: Chain, vault_address: str) -> Optional[Asset]:
    target = vault_address.lower()
    for asset in chain.assets.values():
        if asset.vault.lower() == target:
            return asset
    return None
