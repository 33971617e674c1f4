"""Domain services assembling validated orders from front-office records."""
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, Sequence

from .account import AccountNo, validate_account_no
from .instrument import ISINCode, validate_isin_code
from .models import FrontOfficeOrder, LineItem, Order
from .results import Validation, collect
from .validators import (
    validate_buy_sell,
    validate_order_no,
    validate_quantity,
    validate_unit_price,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def random_order_no() -> str:
    return str(uuid.uuid4())


def make_line_item(
    record: FrontOfficeOrder,
    isin_validator: Callable[[str], Validation[ISINCode]] = validate_isin_code,
) -> Validation[LineItem]:
    """Validate the four line fields of a record, reporting every failure."""
    instrument = isin_validator(record.isin)
    quantity = validate_quantity(record.qty)
    unit_price = validate_unit_price(record.unit_price)
    buy_sell = validate_buy_sell(record.buy_sell)
    fields = collect([instrument, quantity, unit_price, buy_sell])
    if not fields.is_valid:
        return Validation(errors=fields.errors)
    return Validation.valid(
        LineItem(
            instrument=instrument.value,
            quantity=quantity.value,
            unit_price=unit_price.value,
            buy_sell=buy_sell.value,
        )
    )


class OrderBuilder:
    """Groups front-office records per account and builds one order per group.

    The batch is all-or-nothing: a single invalid record in any group fails the
    whole call, and the failure carries the errors of every group.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        id_factory: IdFactory | None = None,
        isin_validator: Callable[[str], Validation[ISINCode]] = validate_isin_code,
        account_validator: Callable[[str], Validation[AccountNo]] = validate_account_no,
    ) -> None:
        self._clock = clock or utc_now
        self._id_factory = id_factory or random_order_no
        self._isin_validator = isin_validator
        self._account_validator = account_validator

    def build(self, records: Sequence[FrontOfficeOrder]) -> Validation[list[Order]]:
        if not records:
            raise ValueError("OrderBuilder.build needs at least one front-office record")

        groups = self.group_by_account(records)
        results = [self._make_order(account_no, group) for account_no, group in groups.items()]
        orders = collect(results)
        if orders.is_valid:
            logger.info("Built %d orders from %d records", len(groups), len(records))
        else:
            logger.warning(
                "Rejected batch of %d records across %d accounts: %d errors",
                len(records),
                len(groups),
                len(orders.errors),
            )
        return orders

    @staticmethod
    def group_by_account(records: Sequence[FrontOfficeOrder]) -> dict[str, list[FrontOfficeOrder]]:
        """Partition records by account, keeping first-seen account and row order."""
        groups: dict[str, list[FrontOfficeOrder]] = {}
        for record in records:
            groups.setdefault(record.account_no, []).append(record)
        return groups

    def _make_order(self, account_no: str, records: list[FrontOfficeOrder]) -> Validation[Order]:
        account = self._account_validator(account_no).map_errors(
            lambda message: f"account {account_no}: {message}"
        )
        items = collect(
            make_line_item(record, self._isin_validator).map_errors(
                lambda message, line=line: f"account {account_no}, line {line}: {message}"
            )
            for line, record in enumerate(records, start=1)
        )
        order_no = validate_order_no(self._id_factory())

        checked = collect([account, items, order_no])
        if not checked.is_valid:
            logger.debug("Account %s failed with %d errors", account_no, len(checked.errors))
            return Validation(errors=checked.errors)

        order = Order(
            no=order_no.value,
            date=self._clock(),
            account_no=account.value,
            items=tuple(items.value),
        )
        logger.debug("Built order %s for account %s with %d lines", order.no, account_no, len(order.items))
        return Validation.valid(order)
