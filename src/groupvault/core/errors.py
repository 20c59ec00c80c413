from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class GroupVaultError(Exception):
    component: str
    operation: str
    message: str
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        base = f"{self.component}.{self.operation}: {self.message}"
        if self.cause is not None:
            return f"{base} (cause: {self.cause})"
        return base


class AmountError(GroupVaultError, ValueError):
    """Base class for amount conversion failures.

    Also a ``ValueError`` so form handlers can treat it like any other bad input.
    """

    def __init__(self, message: str, operation: str = "parse_amount") -> None:
        super().__init__(component="amounts", operation=operation, message=message)


class EmptyInput(AmountError):
    def __init__(self) -> None:
        super().__init__("Empty input")


class InvalidFormat(AmountError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid number format: {value!r}")
        self.value = value


class PrecisionOverflow(AmountError):
    def __init__(self, fraction_digits: int, decimals: int) -> None:
        super().__init__(f"Too many decimal places. Max: {decimals}")
        self.fraction_digits = fraction_digits
        self.decimals = decimals
