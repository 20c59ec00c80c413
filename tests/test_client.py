import pytest
from unittest.mock import MagicMock

from groupvault import GroupVault
from groupvault.core import KATANA, KATANA_VAULTS

VAULT = "0x0000000000000000000000000000000000000001"
TOKEN = "0x0000000000000000000000000000000000000002"
ACCOUNT = "0x0000000000000000000000000000000000000003"
KEY = "0x" + "44" * 32


def _client(strategy):
    web3 = MagicMock()
    vault = MagicMock()
    token = MagicMock()
    web3.eth.contract.side_effect = lambda address, abi: vault if address == VAULT else token
    vault.functions.getVaultInfo.return_value.call.return_value = (
        "Vault", TOKEN, strategy, ACCOUNT, ACCOUNT, 0, 0, False
    )
    return GroupVault(web3, KATANA, ACCOUNT, KEY), token


def test_vault_decimals_from_asset_table():
    client, token = _client(KATANA_VAULTS["WBTC"].lower())
    assert client.vault(VAULT).decimals == 8
    token.functions.decimals.assert_not_called()


def test_vault_decimals_from_token():
    client, token = _client("0x" + "9" * 40)
    token.functions.decimals.return_value.call.return_value = 9
    assert client.vault(VAULT).decimals == 9


def test_vault_explicit_decimals():
    client, _ = _client(KATANA_VAULTS["USDC"])
    assert client.vault(VAULT, decimals=6).decimals == 6


def test_yearn_requires_configuration():
    client, _ = _client(KATANA_VAULTS["USDC"])
    with pytest.raises(ValueError, match="not configured"):
        client.yearn()
    assert client.yearn(VAULT, TOKEN) is not None


def test_create_requires_private_key():
    with pytest.raises(ValueError, match="private_key required"):
        GroupVault.create("http://localhost:8545", "katana")
