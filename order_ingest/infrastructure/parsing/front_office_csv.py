"""Front-office CSV codec producing unvalidated ``FrontOfficeOrder`` records.

Format::

    accountNo,date,isin,qty,unitPrice,buySell
    a-1,2020-07-02T05:05:13.619Z,US0378331005,100,150.00,buy

Only the shape of each row is checked here. Domain rules are applied later by
``OrderBuilder``.
"""
from __future__ import annotations

import csv
import io
import logging
from typing import Iterable, Sequence

from order_ingest.domain.models import FrontOfficeOrder
from order_ingest.domain.results import Validation
from order_ingest.infrastructure.parsing.utils import format_instant, parse_decimal, parse_instant

logger = logging.getLogger(__name__)

HEADER = ("accountNo", "date", "isin", "qty", "unitPrice", "buySell")


def decode(text: str) -> Validation[list[FrontOfficeOrder]]:
    """Parse CSV text into records, reporting one error per malformed row."""
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff")))
    rows = [(number, row) for number, row in enumerate(reader, start=1) if _has_content(row)]
    if not rows:
        return Validation.valid([])

    header_number, header = rows[0]
    if tuple(field.strip() for field in header) != HEADER:
        return Validation.invalid(
            f"row {header_number}: expected header {','.join(HEADER)}, found {','.join(header)}"
        )

    records: list[FrontOfficeOrder] = []
    errors: list[str] = []
    for number, row in rows[1:]:
        problems = _row_problems(row)
        if problems:
            errors.append(f"row {number}: {'; '.join(problems)}")
            continue
        records.append(_to_record(row))

    if errors:
        logger.warning("Front-office CSV has %d malformed rows", len(errors))
        return Validation.invalid(*errors)
    logger.debug("Decoded %d front-office rows", len(records))
    return Validation.valid(records)


def encode(records: Iterable[FrontOfficeOrder]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(HEADER)
    for record in records:
        writer.writerow(
            [
                record.account_no,
                format_instant(record.date),
                record.isin,
                format(record.qty, "f"),
                format(record.unit_price, "f"),
                record.buy_sell,
            ]
        )
    return buffer.getvalue()


def _has_content(row: Sequence[str]) -> bool:
    return any(field.strip() for field in row)


def _row_problems(row: Sequence[str]) -> list[str]:
    if len(row) != len(HEADER):
        return [f"expected {len(HEADER)} fields, found {len(row)}"]
    problems: list[str] = []
    _, date, _, qty, unit_price, _ = row
    for name, raw, parser in (
        ("date", date, parse_instant),
        ("qty", qty, parse_decimal),
        ("unitPrice", unit_price, parse_decimal),
    ):
        try:
            parser(raw)
        except ValueError as exc:
            problems.append(f"{name}: {exc}")
    return problems


def _to_record(row: Sequence[str]) -> FrontOfficeOrder:
    account_no, date, isin, qty, unit_price, buy_sell = row
    return FrontOfficeOrder(
        account_no=account_no,
        date=parse_instant(date),
        isin=isin,
        qty=parse_decimal(qty),
        unit_price=parse_decimal(unit_price),
        buy_sell=buy_sell,
    )
