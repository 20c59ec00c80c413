import pytest

from groupvault.core import KATANA_TESTNET
from groupvault.utils import (
    calculate_percentage_change,
    format_address,
    format_apy,
    format_compact_number,
    format_date_time,
    format_percentage,
    format_tx_hash,
    get_explorer_url,
    is_valid_address,
    truncate_text,
)

ADDRESS = "0x1234567890abcdef1234567890abcdef12345678"


def test_format_address():
    assert format_address(ADDRESS) == "0x1234...5678"
    assert format_address(ADDRESS, 6) == "0x123456...345678"
    assert format_address("") == ""
    assert format_address(None) == ""


def test_format_tx_hash():
    tx_hash = "0x" + "ab" * 32
    assert format_tx_hash(tx_hash) == "0xababab...ababab"


def test_format_date_time():
    assert format_date_time(0) == "N/A"
    assert format_date_time(1704467220) == "Jan 5, 2024, 03:07 PM"


def test_percentages():
    assert format_percentage(12.5) == "12.50%"
    assert format_percentage(3, 0) == "3%"
    assert calculate_percentage_change(100, 150) == 50.0
    assert calculate_percentage_change(200, 100) == -50.0
    assert calculate_percentage_change(0, 5) == 0.0


def test_format_compact_number():
    assert format_compact_number(2_000_000_000) == "2.00B"
    assert format_compact_number(1_500_000) == "1.50M"
    assert format_compact_number(1_500) == "1.50K"
    assert format_compact_number(12.3456) == "12.35"


def test_format_apy():
    assert format_apy(0) == "0.00%"
    assert format_apy(0.005) == "<0.01%"
    assert format_apy(20_000) == ">10,000%"
    assert format_apy(8.5) == "8.50%"


def test_truncate_text():
    assert truncate_text("hello world", 5) == "hello..."
    assert truncate_text("hi", 5) == "hi"


def test_is_valid_address():
    assert is_valid_address(ADDRESS) is True
    assert is_valid_address(ADDRESS.upper().replace("0X", "0x")) is True
    assert is_valid_address("0x123") is False
    assert is_valid_address("") is False
    assert is_valid_address(ADDRESS[2:] + "zz") is False


def test_get_explorer_url():
    assert get_explorer_url("0xabc") == "https://explorer.katana.network/address/0xabc"
    assert get_explorer_url("0xdef", "tx") == "https://explorer.katana.network/tx/0xdef"
    assert get_explorer_url("0xabc", chain=KATANA_TESTNET).startswith("https://explorer.tatara.katana.network/")
    with pytest.raises(ValueError):
        get_explorer_url("0xabc", "block")
