"""Domain models for the order ingestion pipeline.

``FrontOfficeOrder`` mirrors one raw CSV row. ``LineItem`` and ``Order`` only
ever hold refined values, which the constructors check.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from .account import AccountNo
from .instrument import ISINCode
from .values import BuySell, OrderNo, Quantity, UnitPrice


def _require_type(name: str, value: object, expected: type) -> None:
    if not isinstance(value, expected):
        raise TypeError(f"{name} must be {expected.__name__}, got {type(value).__name__}")


@dataclass(frozen=True)
class FrontOfficeOrder:
    """Unvalidated trade instruction as received from the broker feed."""

    account_no: str
    date: datetime
    isin: str
    qty: Decimal
    unit_price: Decimal
    buy_sell: str


@dataclass(frozen=True)
class LineItem:
    instrument: ISINCode
    quantity: Quantity
    unit_price: UnitPrice
    buy_sell: BuySell

    def __post_init__(self) -> None:
        _require_type("instrument", self.instrument, ISINCode)
        _require_type("quantity", self.quantity, Quantity)
        _require_type("unit_price", self.unit_price, UnitPrice)
        _require_type("buy_sell", self.buy_sell, BuySell)

    def amount(self) -> Decimal:
        return self.quantity.value * self.unit_price.value


@dataclass(frozen=True)
class Order:
    """One or more line items sharing an account, order number and date."""

    no: OrderNo
    date: datetime
    account_no: AccountNo
    items: tuple[LineItem, ...]

    def __post_init__(self) -> None:
        _require_type("no", self.no, OrderNo)
        _require_type("date", self.date, datetime)
        _require_type("account_no", self.account_no, AccountNo)
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))
        if not self.items:
            raise ValueError(f"Order {self.no} must have at least one line item")
        for item in self.items:
            _require_type("items", item, LineItem)

    def total_amount(self) -> Decimal:
        return sum((item.amount() for item in self.items), Decimal("0"))
