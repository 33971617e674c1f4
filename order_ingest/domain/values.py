"""Refined domain values.

Each value re-checks its invariant on construction, so any live instance is
valid. Use the factories in ``order_ingest.domain.validators`` to obtain one
from raw input without raising.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

EMPTY_VALUE = "{field} cannot be empty"
NEGATIVE_QUANTITY = "Quantity has to be positive: found {value}"
NON_POSITIVE_PRICE = "Unit Price has to be positive: found {value}"
UNKNOWN_SIDE = "Buy/Sell has to be one of {choices}: found {value!r}"


def order_no_problem(raw: str) -> str | None:
    if not isinstance(raw, str) or not raw.strip():
        return EMPTY_VALUE.format(field="Order No")
    return None


def quantity_problem(raw: Decimal) -> str | None:
    if not isinstance(raw, Decimal) or not raw.is_finite() or raw < 0:
        return NEGATIVE_QUANTITY.format(value=raw)
    return None


def unit_price_problem(raw: Decimal) -> str | None:
    if not isinstance(raw, Decimal) or not raw.is_finite() or raw <= 0:
        return NON_POSITIVE_PRICE.format(value=raw)
    return None


@dataclass(frozen=True)
class OrderNo:
    value: str

    def __post_init__(self) -> None:
        problem = order_no_problem(self.value)
        if problem:
            raise ValueError(problem)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Quantity:
    value: Decimal

    def __post_init__(self) -> None:
        problem = quantity_problem(self.value)
        if problem:
            raise ValueError(problem)

    def __str__(self) -> str:
        return format(self.value, "f")


@dataclass(frozen=True)
class UnitPrice:
    value: Decimal

    def __post_init__(self) -> None:
        problem = unit_price_problem(self.value)
        if problem:
            raise ValueError(problem)

    def __str__(self) -> str:
        return format(self.value, "f")


class BuySell(str, Enum):
    """Trade side."""

    BUY = "buy"
    SELL = "sell"

    @property
    def code(self) -> str:
        return _CODES_BY_SIDE[self]

    @classmethod
    def from_code(cls, code: str) -> "BuySell | None":
        """Case-sensitive lookup in the codec table; ``None`` when unknown."""
        return _SIDES_BY_CODE.get(code)


_SIDES_BY_CODE: dict[str, BuySell] = {"buy": BuySell.BUY, "sell": BuySell.SELL}
_CODES_BY_SIDE: dict[BuySell, str] = {side: code for code, side in _SIDES_BY_CODE.items()}
