from .format import (
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

__all__ = [
    "calculate_percentage_change",
    "format_address",
    "format_apy",
    "format_compact_number",
    "format_date_time",
    "format_percentage",
    "format_tx_hash",
    "get_explorer_url",
    "is_valid_address",
    "truncate_text",
]
