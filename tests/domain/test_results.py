import pytest

from order_ingest.domain.results import Validation, collect
from order_ingest.errors import OrderValidationError


def test_collect_keeps_every_error():
    result = collect([Validation.valid(1), Validation.invalid("a", "b"), Validation.invalid("c")])

    assert not result.is_valid
    assert result.errors == ("a", "b", "c")


def test_collect_values_in_order():
    assert collect([Validation.valid(1), Validation.valid(2)]).value == [1, 2]
    assert collect([]).value == []


def test_unwrap_raises_on_failure():
    with pytest.raises(OrderValidationError) as excinfo:
        Validation.invalid("bad").unwrap()
    assert excinfo.value.errors == ("bad",)
    assert Validation.valid(3).unwrap() == 3


def test_invalid_needs_a_message():
    with pytest.raises(ValueError):
        Validation.invalid()


def test_map_errors():
    assert Validation.valid(2).map_errors(lambda e: f"row 1: {e}").value == 2
    assert Validation.invalid("x").map_errors(lambda e: f"row 1: {e}").errors == ("row 1: x",)
