from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from eth_utils import is_hex_address

from groupvault.core.chains import KATANA, Chain


def format_address(address: Optional[str], chars: int = 4) -> str:
    if not address:
        return ""
    return f"{address[: chars + 2]}...{address[-chars:]}"


def format_tx_hash(tx_hash: str) -> str:
    return format_address(tx_hash, 6)


def format_date_time(timestamp: int) -> str:
    """Render a unix timestamp (seconds) as e.g. ``Jan 5, 2024, 03:07 PM`` in UTC."""
    ts = int(timestamp)
    if ts == 0:
        return "N/A"
    try:
        moment = datetime.fromtimestamp(ts, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return "Invalid Date"
    return f"{moment:%b} {moment.day}, {moment.year}, {moment:%I:%M %p}"


def format_percentage(value: float, decimals: int = 2) -> str:
    return f"{value:.{decimals}f}%"


def calculate_percentage_change(old_value: int, new_value: int) -> float:
    if old_value == 0:
        return 0.0
    return (new_value - old_value) / old_value * 100


def format_compact_number(value: float) -> str:
    if value >= 1_000_000_000:
        return f"{value / 1_000_000_000:.2f}B"
    if value >= 1_000_000:
        return f"{value / 1_000_000:.2f}M"
    if value >= 1_000:
        return f"{value / 1_000:.2f}K"
    return f"{value:.2f}"


def format_apy(apy: float) -> str:
    if apy == 0:
        return "0.00%"
    if apy < 0.01:
        return "<0.01%"
    if apy > 10_000:
        return ">10,000%"
    return f"{apy:.2f}%"


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}..."


def is_valid_address(address: str) -> bool:
    return isinstance(address, str) and is_hex_address(address)


def get_explorer_url(value: str, kind: str = "address", chain: Chain = KATANA) -> str:
    if kind not in ("address", "tx"):
        raise ValueError(f"Unsupported explorer link type {kind}")
    return f"{chain.explorer_url.rstrip('/')}/{kind}/{value}"
