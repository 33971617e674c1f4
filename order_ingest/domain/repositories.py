"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Protocol, Sequence

from .models import Order


class OrderRepository(Protocol):
    """Persists validated orders.

    ``store`` raises ``OrderConflictError`` when ``upsert`` is false and an
    order with the same number is already present.
    """

    def store(self, order: Order, upsert: bool = True) -> None:
        ...

    def all(self) -> Sequence[Order]:
        ...
