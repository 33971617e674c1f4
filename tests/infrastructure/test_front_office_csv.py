from datetime import datetime, timezone
from decimal import Decimal

from order_ingest.domain.models import FrontOfficeOrder
from order_ingest.infrastructure.parsing.front_office_csv import HEADER, decode, encode

HEADER_LINE = ",".join(HEADER)


def test_decodes_rows_into_raw_records():
    text = (
        f"{HEADER_LINE}\n"
        "a-1,2020-07-02T05:05:13.619Z,US0378331005,100,150.00,buy\n"
        "a-2,2020-07-02T07:05:13+02:00,not-an-isin,-3,0,HOLD\n"
    )

    result = decode(text)

    assert result.is_valid
    first, second = result.value
    assert first == FrontOfficeOrder(
        account_no="a-1",
        date=datetime(2020, 7, 2, 5, 5, 13, 619000, tzinfo=timezone.utc),
        isin="US0378331005",
        qty=Decimal("100"),
        unit_price=Decimal("150.00"),
        buy_sell="buy",
    )
    assert second.date == datetime(2020, 7, 2, 5, 5, 13, tzinfo=timezone.utc)
    assert second.isin == "not-an-isin"
    assert second.qty == Decimal("-3")
    assert second.buy_sell == "HOLD"


def test_empty_and_header_only_input_yield_no_records():
    assert decode("").value == []
    assert decode("\n\n").value == []
    assert decode(f"{HEADER_LINE}\n").value == []


def test_blank_lines_are_skipped():
    text = f"{HEADER_LINE}\n\na-1,2020-07-02T05:05:13Z,US0378331005,1,1,buy\n\n"

    assert len(decode(text).value) == 1


def test_wrong_header_is_rejected():
    result = decode("account,date,isin,qty,buySell\na-1,2020-07-02T05:05:13Z,US0378331005,1,buy\n")

    assert not result.is_valid
    assert len(result.errors) == 1
    assert result.errors[0].startswith("row 1: expected header")


def test_parse_errors_accumulate_one_per_row():
    text = (
        f"{HEADER_LINE}\n"
        "a-1,2020-07-02T05:05:13Z,US0378331005,1,1,buy\n"
        "a-1,yesterday,US0378331005,ten,1,buy\n"
        "a-1,2020-07-02T05:05:13Z,US0378331005,1\n"
        "a-2,2020-07-02T05:05:13,US0378331005,1,1e3,sell\n"
    )

    result = decode(text)

    assert not result.is_valid
    assert len(result.errors) == 3
    assert result.errors[0].startswith("row 3: date:")
    assert "qty:" in result.errors[0]
    assert result.errors[1] == "row 4: expected 6 fields, found 4"
    assert "no UTC offset" in result.errors[2]
    assert "unitPrice:" in result.errors[2]


def test_rejects_thousands_separators_and_nan():
    text = (
        f"{HEADER_LINE}\n"
        'a-1,2020-07-02T05:05:13Z,US0378331005,"1,000",1,buy\n'
        "a-1,2020-07-02T05:05:13Z,US0378331005,NaN,1,buy\n"
    )

    assert len(decode(text).errors) == 2


def test_encode_writes_decodable_csv():
    record = FrontOfficeOrder(
        account_no="a-1",
        date=datetime(2020, 7, 2, 5, 5, 13, 619000, tzinfo=timezone.utc),
        isin="US0378331005",
        qty=Decimal("100"),
        unit_price=Decimal("150.00"),
        buy_sell="buy",
    )

    text = encode([record])

    assert text.splitlines() == [
        HEADER_LINE,
        "a-1,2020-07-02T05:05:13.619Z,US0378331005,100,150.00,buy",
    ]
    assert decode(text).value == [record]


def test_out_of_range_instant_is_a_row_error():
    text = (
        f"{HEADER_LINE}\n"
        "a-1,0001-01-01T00:00:00+01:00,US0378331005,1,1,buy\n"
        "a-1,2020-07-02T05:05:13Z,US0378331005,x,1,buy\n"
    )

    result = decode(text)

    assert len(result.errors) == 2
    assert result.errors[0].startswith("row 2: date: instant out of range")
    assert result.errors[1].startswith("row 3: qty:")


def test_small_decimals_are_encoded_without_exponent():
    text = f"{HEADER_LINE}\na-1,2020-07-02T05:05:13.000Z,US0378331005,0.00000010,0.0000001,buy\n"
    records = decode(text).value

    encoded = encode(records)

    assert encoded.splitlines()[1] == "a-1,2020-07-02T05:05:13.000Z,US0378331005,0.00000010,0.0000001,buy"
    assert decode(encoded).value == records
