"""In-memory order repository."""
from __future__ import annotations

import logging
from typing import Sequence

from order_ingest.domain.models import Order
from order_ingest.domain.repositories import OrderRepository
from order_ingest.errors import OrderConflictError

logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}

    def store(self, order: Order, upsert: bool = True) -> None:
        key = str(order.no)
        if key in self._orders and not upsert:
            raise OrderConflictError(key)
        self._orders[key] = order
        logger.debug("Stored order %s (upsert=%s)", key, upsert)

    def all(self) -> Sequence[Order]:
        return list(self._orders.values())
