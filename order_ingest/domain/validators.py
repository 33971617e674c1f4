"""Smart constructors turning raw input into refined values.

None of these raise for bad input: failures come back as ``Validation``
errors so callers can merge them.
"""
from __future__ import annotations

from decimal import Decimal

from .account import validate_account_no
from .instrument import validate_isin_code
from .results import Validation
from .values import (
    UNKNOWN_SIDE,
    BuySell,
    OrderNo,
    Quantity,
    UnitPrice,
    order_no_problem,
    quantity_problem,
    unit_price_problem,
)

__all__ = [
    "validate_order_no",
    "validate_quantity",
    "validate_unit_price",
    "validate_buy_sell",
    "validate_isin_code",
    "validate_account_no",
]


def validate_order_no(raw: str) -> Validation[OrderNo]:
    problem = order_no_problem(raw)
    if problem:
        return Validation.invalid(problem)
    return Validation.valid(OrderNo(raw))


def validate_quantity(raw: Decimal) -> Validation[Quantity]:
    problem = quantity_problem(raw)
    if problem:
        return Validation.invalid(problem)
    return Validation.valid(Quantity(raw))


def validate_unit_price(raw: Decimal) -> Validation[UnitPrice]:
    problem = unit_price_problem(raw)
    if problem:
        return Validation.invalid(problem)
    return Validation.valid(UnitPrice(raw))


def validate_buy_sell(raw: str) -> Validation[BuySell]:
    side = BuySell.from_code(raw) if isinstance(raw, str) else None
    if side is None:
        choices = ", ".join(member.code for member in BuySell)
        return Validation.invalid(UNKNOWN_SIDE.format(choices=choices, value=raw))
    return Validation.valid(side)
