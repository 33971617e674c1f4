"""Tabular reports for ingested orders."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pandas as pd

from order_ingest.domain.models import Order
from order_ingest.infrastructure.parsing.utils import format_instant

COLUMNS = [
    "order_no",
    "date",
    "account_no",
    "line",
    "isin",
    "buy_sell",
    "quantity",
    "unit_price",
    "amount",
]


def orders_to_rows(orders: Sequence[Order]) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for order in orders:
        for line, item in enumerate(order.items, start=1):
            rows.append(
                {
                    "order_no": str(order.no),
                    "date": format_instant(order.date),
                    "account_no": str(order.account_no),
                    "line": str(line),
                    "isin": str(item.instrument),
                    "buy_sell": item.buy_sell.code,
                    "quantity": str(item.quantity),
                    "unit_price": str(item.unit_price),
                    "amount": format(item.amount(), "f"),
                }
            )
    return rows


def orders_to_dataframe(orders: Sequence[Order]) -> pd.DataFrame:
    return pd.DataFrame(orders_to_rows(orders), columns=COLUMNS)


def render_errors(errors: Sequence[str]) -> str:
    return "\n".join(f"- {error}" for error in errors)


def export_orders(orders: Sequence[Order], path: Path) -> Path:
    """Write one row per order line to ``.csv`` or ``.xlsx``."""
    frame = orders_to_dataframe(orders)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        frame.to_csv(path, index=False)
    elif suffix == ".xlsx":
        frame.to_excel(path, index=False, sheet_name="Orders", engine="openpyxl")
    else:
        raise ValueError(f"Unsupported export format {path.suffix!r}; use .csv or .xlsx")
    return path
