"""Exception hierarchy for order ingestion.

Invalid input is reported through ``Validation`` values, not exceptions.
These types cover the failures that end a call.
"""
from __future__ import annotations

from typing import Sequence


class OrderIngestError(Exception):
    """Base exception for all order ingestion failures."""


class ConfigError(OrderIngestError):
    """Raised for invalid runtime configuration."""


class InputReadError(OrderIngestError):
    """Raised when the input stream cannot be read or decoded."""


class OrderConflictError(OrderIngestError):
    """Raised when an order number is already stored and upsert is off."""

    def __init__(self, order_no: str) -> None:
        super().__init__(f"Order {order_no} already exists")
        self.order_no = order_no


class OrderValidationError(OrderIngestError):
    """Raised when the value of a failed validation is requested."""

    def __init__(self, errors: Sequence[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = tuple(errors)
