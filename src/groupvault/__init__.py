"""groupvault - Python SDK for Group Vault contracts on Katana."""

from ._version import __version__
from .client import AsyncGroupVault, GroupVault
from .core import BaseUnitAmount, format_amount, format_plain_number, parse_amount

__all__ = [
    "__version__",
    "GroupVault",
    "AsyncGroupVault",
    "BaseUnitAmount",
    "format_amount",
    "format_plain_number",
    "parse_amount",
]
