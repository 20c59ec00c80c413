import pytest

from groupvault.core import ASSETS, KATANA, KATANA_TESTNET, KATANA_VAULTS, as_chain, asset_for_vault, get_asset
from groupvault.core.chains import FACTORY_ADDRESS_ENV

FACTORY = "0x0000000000000000000000000000000000000005"


def test_as_chain_by_id(monkeypatch):
    monkeypatch.delenv(FACTORY_ADDRESS_ENV, raising=False)
    assert as_chain(747474).id == KATANA.id
    assert as_chain(129399).id == KATANA_TESTNET.id


def test_as_chain_by_name(monkeypatch):
    monkeypatch.delenv(FACTORY_ADDRESS_ENV, raising=False)
    assert as_chain("katana") is KATANA
    assert as_chain("katana-testnet") is KATANA_TESTNET


def test_as_chain_unknown():
    with pytest.raises(ValueError, match="Unsupported chain"):
        as_chain(1)


def test_as_chain_reads_factory_from_env(monkeypatch):
    monkeypatch.setenv(FACTORY_ADDRESS_ENV, FACTORY)
    chain = as_chain("katana-testnet")
    assert chain.factory == FACTORY
    assert KATANA_TESTNET.factory is None


def test_with_factory_keeps_original():
    chain = KATANA.with_factory(FACTORY)
    assert chain.factory == FACTORY
    assert chain.assets is KATANA.assets
    assert KATANA.factory is None


def test_asset_table():
    assert {symbol: asset.decimals for symbol, asset in ASSETS.items()} == {
        "USDC": 6,
        "USDT": 6,
        "ETH": 18,
        "WBTC": 8,
        "USDS": 18,
    }
    with pytest.raises(TypeError):
        ASSETS["DAI"] = ASSETS["USDC"]


def test_get_asset():
    assert get_asset(KATANA, "usdc").decimals == 6
    with pytest.raises(ValueError, match="Unsupported asset"):
        get_asset(KATANA, "DAI")


def test_asset_for_vault():
    assert asset_for_vault(KATANA, KATANA_VAULTS["WBTC"].lower()).symbol == "WBTC"
    assert asset_for_vault(KATANA, "0x" + "0" * 40) is None


def test_chains_are_hashable(monkeypatch):
    monkeypatch.delenv(FACTORY_ADDRESS_ENV, raising=False)
    by_chain = {KATANA: "mainnet", KATANA_TESTNET: "testnet"}
    assert by_chain[as_chain("katana-testnet")] == "testnet"
    assert hash(KATANA_TESTNET.with_factory(FACTORY)) == hash(KATANA_TESTNET.with_factory(FACTORY))
    assert KATANA_TESTNET.with_factory(FACTORY) != KATANA_TESTNET
