from pathlib import Path

import pytest

from order_ingest.application.use_cases import create_orders
from order_ingest.presentation.order_report import (
    COLUMNS,
    export_orders,
    orders_to_dataframe,
    orders_to_rows,
    render_errors,
)

CSV = """accountNo,date,isin,qty,unitPrice,buySell
a-1,2020-07-02T05:05:13.619Z,US0378331005,10,2.50,buy
a-1,2020-07-02T05:05:13.619Z,US0378331006,4,1.25,sell
"""


def test_rows_flatten_order_lines():
    orders = create_orders(CSV).unwrap()

    rows = orders_to_rows(orders)

    assert [row["line"] for row in rows] == ["1", "2"]
    assert rows[0]["amount"] == "25.00"
    assert rows[1]["buy_sell"] == "sell"
    assert rows[0]["order_no"] == rows[1]["order_no"]


def test_empty_dataframe_keeps_columns():
    assert list(orders_to_dataframe([]).columns) == COLUMNS


def test_render_errors():
    assert render_errors(["a", "b"]) == "- a\n- b"


def test_export_rejects_unknown_format(tmp_path: Path):
    with pytest.raises(ValueError):
        export_orders([], tmp_path / "orders.json")


def test_small_prices_render_without_exponent():
    text = "accountNo,date,isin,qty,unitPrice,buySell\na-1,2020-07-02T05:05:13Z,US0378331005,1,0.0000001,buy\n"

    row = orders_to_rows(create_orders(text).unwrap())[0]

    assert row["unit_price"] == "0.0000001"
    assert row["amount"] == "0.0000001"
