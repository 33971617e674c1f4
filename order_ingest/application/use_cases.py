"""Application services orchestrating the order ingestion workflow."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Callable

from order_ingest.domain.models import FrontOfficeOrder, Order
from order_ingest.domain.repositories import OrderRepository
from order_ingest.domain.results import Validation
from order_ingest.domain.services import OrderBuilder
from order_ingest.infrastructure.parsing import front_office_csv
from order_ingest.infrastructure.parsing.utils import open_source, read_text

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class OrderIngestionContext:
    builder: OrderBuilder = field(default_factory=OrderBuilder)
    decoder: Callable[[str], Validation[list[FrontOfficeOrder]]] = front_office_csv.decode
    encoding: str | None = None


class CreateOrdersUseCase:
    """Decode front-office CSV and build validated orders from it."""

    def __init__(self, context: OrderIngestionContext | None = None) -> None:
        self._context = context or OrderIngestionContext()

    def execute(self, front_office_csv_text: str) -> Validation[list[Order]]:
        decoded = self._context.decoder(front_office_csv_text)
        if not decoded.is_valid:
            return Validation(errors=decoded.errors)
        records = decoded.value or []
        if not records:
            logger.info("Front-office input has no rows; nothing to build")
            return Validation.valid([])
        return self._context.builder.build(records)

    def execute_stream(self, stream: IO[bytes] | IO[str]) -> Validation[list[Order]]:
        """Read ``stream`` to the end, close it, then ingest its contents.

        Raises:
            InputReadError: If the stream cannot be read or decoded.
        """
        return self.execute(read_text(stream, self._context.encoding))

    def execute_path(self, path: Path | str) -> Validation[list[Order]]:
        logger.info("Ingesting front-office file %s", path)
        return self.execute_stream(open_source(path))


@dataclass(slots=True)
class StoreOrdersUseCase:
    """Ingest a batch and hand every order to the repository.

    Nothing is stored unless the whole batch is valid.
    """

    repository: OrderRepository
    create_orders: CreateOrdersUseCase = field(default_factory=CreateOrdersUseCase)

    def execute(self, front_office_csv_text: str, upsert: bool = True) -> Validation[list[Order]]:
        result = self.create_orders.execute(front_office_csv_text)
        if result.is_valid:
            for order in result.value or []:
                self.repository.store(order, upsert=upsert)
        return result


def create_orders(front_office_csv_text: str) -> Validation[list[Order]]:
    return CreateOrdersUseCase().execute(front_office_csv_text)


def create_orders_from_stream(stream: IO[bytes] | IO[str]) -> Validation[list[Order]]:
    return CreateOrdersUseCase().execute_stream(stream)
