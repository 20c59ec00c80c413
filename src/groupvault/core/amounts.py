"""Fixed-point conversion between decimal strings and integer base units.

Amounts that reach a contract call are always Python ``int`` values in the
token's smallest unit. Parsing is strict: anything that cannot be represented
exactly at the token's precision is rejected instead of being rounded.
Formatting truncates toward zero, so a displayed amount never exceeds the
amount actually held.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import ROUND_DOWN, ROUND_HALF_UP, Context, Decimal
from typing import Tuple, Union

from .errors import EmptyInput, InvalidFormat, PrecisionOverflow

DEFAULT_DECIMALS = 18
DEFAULT_DISPLAY_DECIMALS = 4

_DECIMAL_RE = re.compile(r"(\d*)(?:\.(\d*))?", re.ASCII)

# int <-> str conversion is capped at sys.get_int_max_str_digits() (4300 by
# default), so long digit runs are converted in chunks below that cap.
_CHUNK_DIGITS = 1000
_CHUNK_BASE = 10**_CHUNK_DIGITS


def _check_decimals(decimals: int, name: str = "decimals") -> None:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise TypeError(f"{name} must be an int")
    if decimals < 0:
        raise ValueError(f"{name} must be >= 0")


def _check_str(value: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"amount must be a str, got {type(value).__name__}")


def _digits_to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _int_to_digits(value: int) -> str:
    chunks = []
    while value >= _CHUNK_BASE:
        value, low = divmod(value, _CHUNK_BASE)
        chunks.append(str(low).zfill(_CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def _group_thousands(digits: str) -> str:
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i : i + 3] for i in range(head, len(digits), 3)]
    return ",".join(groups)


def split_decimal(value: str) -> Tuple[str, str]:
    """Return the integer and fractional digit runs of ``value``.

    Thousands separators and surrounding whitespace are removed first. Either
    run may be empty, but not both.
    """
    _check_str(value)
    cleaned = value.replace(",", "").strip()
    match = _DECIMAL_RE.fullmatch(cleaned)
    if match is None:
        raise InvalidFormat(value)
    integer, fraction = match.group(1), match.group(2) or ""
    if not integer and not fraction:
        raise InvalidFormat(value)
    return integer, fraction


def parse_amount(value: str, decimals: int = DEFAULT_DECIMALS) -> int:
    """Parse a user-entered decimal string into base units.

    >>> parse_amount("1,234.5", 2)
    123450

    Raises ``EmptyInput`` for blank input, ``InvalidFormat`` for anything that
    is not an unsigned decimal, and ``PrecisionOverflow`` when ``value`` has
    more fractional digits than ``decimals``.
    """
    _check_decimals(decimals)
    _check_str(value)
    if not value.strip():
        raise EmptyInput()

    integer, fraction = split_decimal(value)
    if len(fraction) > decimals:
        raise PrecisionOverflow(len(fraction), decimals)
    return _digits_to_int((integer or "0") + fraction.ljust(decimals, "0"))


def format_amount(
    amount: int,
    decimals: int = DEFAULT_DECIMALS,
    display_decimals: int = DEFAULT_DISPLAY_DECIMALS,
) -> str:
    """Render base units as a grouped decimal string.

    The fractional part is truncated to ``display_decimals`` digits and
    trailing zeros are dropped; zero always renders as ``"0"``.
    """
    _check_decimals(decimals)
    _check_decimals(display_decimals, "display_decimals")
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"amount must be an int, got {type(amount).__name__}")
    if amount < 0:
        raise ValueError("amount must be >= 0")
    if amount == 0:
        return "0"

    integer, fraction = divmod(amount, 10**decimals)
    integer_str = _group_thousands(_int_to_digits(integer))
    if display_decimals == 0 or decimals == 0:
        return integer_str

    if display_decimals < decimals:
        fraction //= 10 ** (decimals - display_decimals)
        width = display_decimals
    else:
        width = decimals
    fraction_str = _int_to_digits(fraction).zfill(width).rstrip("0")
    if not fraction_str:
        return integer_str
    return f"{integer_str}.{fraction_str}"


def format_plain_number(value: float, min_digits: int = 0, max_digits: int = 2) -> str:
    """Format a number that is already in human units, en-US style.

    Rounds half away from zero at ``max_digits`` and keeps at least
    ``min_digits`` fractional digits. Not for transaction arguments.
    """
    _check_decimals(min_digits, "min_digits")
    _check_decimals(max_digits, "max_digits")
    if min_digits > max_digits:
        raise ValueError("min_digits must be <= max_digits")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"cannot format non-finite value {value!r}")

    dec = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    ctx = Context(prec=max(28, dec.adjusted() + max_digits + 2))
    rounded = dec.quantize(Decimal(1).scaleb(-max_digits), rounding=ROUND_HALF_UP, context=ctx)
    text = f"{rounded:,f}"
    if "." not in text:
        return text
    head, tail = text.split(".")
    tail = tail.rstrip("0").ljust(min_digits, "0")
    return f"{head}.{tail}" if tail else head


@dataclass(frozen=True)
class BaseUnitAmount:
    """A non-negative token quantity in base units, tagged with its precision."""

    value: int
    decimals: int = DEFAULT_DECIMALS

    def __post_init__(self) -> None:
        _check_decimals(self.decimals)
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("value must be an int")
        if self.value < 0:
            raise ValueError("value must be >= 0")

    @classmethod
    def from_decimal_string(cls, value: str, decimals: int = DEFAULT_DECIMALS) -> "BaseUnitAmount":
        return cls(parse_amount(value, decimals), decimals)

    @classmethod
    def from_float(cls, value: float, decimals: int = DEFAULT_DECIMALS) -> "BaseUnitAmount":
        """Lossy conversion for display-side arithmetic only.

        Digits beyond ``decimals`` are dropped. Never feed the result into a
        transaction; use ``from_decimal_string`` on the user's input instead.
        """
        _check_decimals(decimals)
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"cannot convert {value!r} to a base-unit amount")
        dec = Decimal(repr(float(value)))
        ctx = Context(prec=max(28, dec.adjusted() + decimals + 2))
        scaled = dec.scaleb(decimals, context=ctx).quantize(Decimal(1), rounding=ROUND_DOWN, context=ctx)
        return cls(int(scaled), decimals)

    def to_decimal(self) -> Decimal:
        return Decimal(format_amount(self.value, self.decimals, self.decimals).replace(",", ""))

    def format(self, display_decimals: int = DEFAULT_DISPLAY_DECIMALS) -> str:
        return format_amount(self.value, self.decimals, display_decimals)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.format(self.decimals)


AmountLike = Union[str, int, BaseUnitAmount]


def as_base_units(amount: AmountLike, decimals: int) -> int:
    """Resolve a call-site amount into base units at ``decimals``.

    Strings are parsed strictly, ``BaseUnitAmount`` must carry the same
    precision, and plain ints are taken as base units already.
    """
    if isinstance(amount, BaseUnitAmount):
        if amount.decimals != decimals:
            raise ValueError(f"amount has {amount.decimals} decimals, expected {decimals}")
        return amount.value
    if isinstance(amount, str):
        return parse_amount(amount, decimals)
    if isinstance(amount, int) and not isinstance(amount, bool):
        if amount < 0:
            raise ValueError("amount must be >= 0")
        return amount
    raise TypeError(f"unsupported amount type {type(amount).__name__}")


def as_positive_base_units(amount: AmountLike, decimals: int, operation: str) -> int:
    """Like ``as_base_units`` but rejects zero, for amounts sent in a transaction."""
    value = as_base_units(amount, decimals)
    if value == 0:
        raise ValueError(f"amount must be greater than zero for {operation}")
    return value
