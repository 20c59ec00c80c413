"""Core primitives: amount conversion, chain configuration and errors."""

from .amounts import (
    DEFAULT_DECIMALS,
    DEFAULT_DISPLAY_DECIMALS,
    AmountLike,
    BaseUnitAmount,
    as_base_units,
    as_positive_base_units,
    format_amount,
    format_plain_number,
    parse_amount,
    split_decimal,
)
from .chains import (
    ASSETS,
    KATANA,
    KATANA_TESTNET,
    KATANA_VAULTS,
    Asset,
    Chain,
    as_chain,
    asset_for_vault,
    get_asset,
)
from .errors import (
    AmountError,
    EmptyInput,
    GroupVaultError,
    InvalidFormat,
    PrecisionOverflow,
)

__all__ = [
    "DEFAULT_DECIMALS",
    "DEFAULT_DISPLAY_DECIMALS",
    "AmountLike",
    "BaseUnitAmount",
    "as_base_units",
    "as_positive_base_units",
    "format_amount",
    "format_plain_number",
    "parse_amount",
    "split_decimal",
    "Asset",
    "Chain",
    "ASSETS",
    "KATANA",
    "KATANA_TESTNET",
    "KATANA_VAULTS",
    "as_chain",
    "asset_for_vault",
    "get_asset",
    "GroupVaultError",
    "AmountError",
    "EmptyInput",
    "InvalidFormat",
    "PrecisionOverflow",
]
