"""Tests for the vault factory services."""
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from groupvault.contracts import FACTORY_ABI
from groupvault.core import KATANA_TESTNET, KATANA_VAULTS, PrecisionOverflow
from groupvault.factory import AsyncVaultFactoryService, SyncVaultFactoryService

FACTORY = "0x0000000000000000000000000000000000000005"
ACCOUNT = "0x0000000000000000000000000000000000000003"
RECIPIENT = "0x0000000000000000000000000000000000000004"
KEY = "0x" + "22" * 32


def _make_sync(chain=None, private_key=KEY):
    web3 = MagicMock()
    factory = MagicMock()
    web3.eth.contract.return_value = factory
    web3.eth.get_transaction_count.return_value = 1
    web3.eth.account.sign_transaction.return_value = MagicMock(raw_transaction=b"signed")
    web3.eth.send_raw_transaction.return_value = bytes.fromhex("cafe")
    chain = chain or KATANA_TESTNET.with_factory(FACTORY)
    return SyncVaultFactoryService(web3, chain, ACCOUNT, private_key), web3, factory


class TestSyncVaultFactoryService:
    def test_create_vault_uses_asset_decimals(self):
        service, web3, factory = _make_sync()
        assert service.create_vault("Friends", "USDC", RECIPIENT, "10", "1,000") == "0xcafe"
        usdc = KATANA_VAULTS["USDC"]
        factory.functions.createVault.assert_called_once_with(
            "Friends", usdc, usdc, RECIPIENT, 10_000_000, 1_000_000_000
        )
        web3.eth.contract.assert_called_once_with(address=FACTORY, abi=FACTORY_ABI)

    def test_create_vault_wbtc(self):
        service, _, factory = _make_sync()
        service.create_vault("Sats", "WBTC", RECIPIENT, "0.0001")
        args = factory.functions.createVault.call_args.args
        assert args[4] == 10_000
        assert args[5] == 0

    def test_empty_deposit_cap_means_uncapped(self):
        service, _, factory = _make_sync()
        service.create_vault("Open", "ETH", RECIPIENT, "0.01", "")
        assert factory.functions.createVault.call_args.args[5] == 0

    def test_too_precise_min_deposit_rejected(self):
        service, web3, factory = _make_sync()
        with pytest.raises(PrecisionOverflow):
            service.create_vault("Friends", "USDT", RECIPIENT, "0.0000001")
        factory.functions.createVault.assert_not_called()
        web3.eth.send_raw_transaction.assert_not_called()

    def test_invalid_inputs(self):
        service, _, _ = _make_sync()
        with pytest.raises(ValueError, match="name"):
            service.create_vault("  ", "USDC", RECIPIENT, "1")
        with pytest.raises(ValueError, match="recipient"):
            service.create_vault("Friends", "USDC", "0x123", "1")
        with pytest.raises(ValueError, match="Unsupported asset"):
            service.create_vault("Friends", "DAI", RECIPIENT, "1")

    def test_requires_private_key(self):
        service, _, _ = _make_sync(private_key=None)
        with pytest.raises(ValueError, match="private_key required for create_vault"):
            service.create_vault("Friends", "USDC", RECIPIENT, "1")

    def test_requires_factory_address(self):
        service, _, _ = _make_sync(chain=KATANA_TESTNET)
        with pytest.raises(ValueError, match="No vault factory"):
            service.all_vaults()

    def test_vault_listings(self):
        service, _, factory = _make_sync()
        factory.functions.getAllVaults.return_value.call.return_value = ("0xa", "0xb")
        factory.functions.getVaultsByCreator.return_value.call.return_value = ["0xa"]
        assert service.all_vaults() == ["0xa", "0xb"]
        assert service.vaults_by_creator() == ["0xa"]
        factory.functions.getVaultsByCreator.assert_called_once_with(ACCOUNT)


class TestAsyncVaultFactoryService:
    @pytest.mark.asyncio
    async def test_create_vault(self):
        web3 = MagicMock()
        factory = MagicMock()
        web3.eth.contract.return_value = factory
        web3.eth.get_transaction_count = AsyncMock(return_value=4)
        web3.eth.send_raw_transaction = AsyncMock(return_value=bytes.fromhex("cafe"))
        factory.functions.createVault.return_value.build_transaction = AsyncMock(return_value={"nonce": 4})
        service = AsyncVaultFactoryService(web3, KATANA_TESTNET.with_factory(FACTORY), ACCOUNT, KEY)

        with patch("groupvault.factory.service.Account") as account:
            account.sign_transaction.return_value = MagicMock(raw_transaction=b"signed")
            assert await service.create_vault("Friends", "USDS", RECIPIENT, "1.5", "100") == "0xcafe"

        usds = KATANA_VAULTS["USDS"]
        factory.functions.createVault.assert_called_once_with(
            "Friends", usds, usds, RECIPIENT, 15 * 10**17, 100 * 10**18
        )

    @pytest.mark.asyncio
    async def test_all_vaults(self):
        web3 = MagicMock()
        factory = MagicMock()
        web3.eth.contract.return_value = factory
        factory.functions.getAllVaults.return_value.call = AsyncMock(return_value=["0xa"])
        service = AsyncVaultFactoryService(web3, KATANA_TESTNET.with_factory(FACTORY), ACCOUNT)
        assert await service.all_vaults() == ["0xa"]
