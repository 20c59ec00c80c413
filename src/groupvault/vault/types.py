from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass
class VaultConfig:
    name: str
    asset: str
    strategy: str
    donation_recipient: str
    admin: str
    min_deposit: int
    deposit_cap: int
    is_paused: bool

    @classmethod
    def from_tuple(cls, raw: Sequence) -> "VaultConfig":
        name, asset, strategy, recipient, admin, min_deposit, deposit_cap, is_paused = raw
        return cls(
            name=str(name),
            asset=asset,
            strategy=strategy,
            donation_recipient=recipient,
            admin=admin,
            min_deposit=int(min_deposit),
            deposit_cap=int(deposit_cap),
            is_paused=bool(is_paused),
        )


@dataclass
class MemberInfo:
    total_deposited: int
    shares: int
    joined_at: int
    is_active: bool

    @property
    def is_member(self) -> bool:
        return self.shares > 0

    @classmethod
    def from_tuple(cls, raw: Sequence) -> "MemberInfo":
        total_deposited, shares, joined_at, is_active = raw
        return cls(
            total_deposited=int(total_deposited),
            shares=int(shares),
            joined_at=int(joined_at),
            is_active=bool(is_active),
        )


@dataclass
class PerformanceReport:
    timestamp: int
    total_assets: int
    total_shares: int
    price_per_share: int
    yield_generated: int
    yield_donated: int

    @classmethod
    def from_tuple(cls, raw: Sequence) -> "PerformanceReport":
        return cls(*(int(value) for value in raw))


@dataclass
class VaultSummary:
    """Display-ready snapshot of a vault, amounts already formatted."""

    address: str
    short_address: str
    name: str
    total_assets: str
    yield_donated: str
    member_count: int
    is_paused: bool
