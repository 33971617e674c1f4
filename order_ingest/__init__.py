"""Front-office order ingestion and validation toolkit."""
from order_ingest.application.use_cases import (
    CreateOrdersUseCase,
    OrderIngestionContext,
    StoreOrdersUseCase,
    create_orders,
    create_orders_from_stream,
)
from order_ingest.domain.models import FrontOfficeOrder, LineItem, Order
from order_ingest.domain.results import Validation
from order_ingest.domain.services import OrderBuilder
from order_ingest.infrastructure.repositories.memory_repository import InMemoryOrderRepository

__all__ = [
    "CreateOrdersUseCase",
    "OrderIngestionContext",
    "StoreOrdersUseCase",
    "create_orders",
    "create_orders_from_stream",
    "FrontOfficeOrder",
    "LineItem",
    "Order",
    "Validation",
    "OrderBuilder",
    "InMemoryOrderRepository",
]
