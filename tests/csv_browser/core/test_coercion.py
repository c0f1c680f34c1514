from __future__ import annotations

from csv_browser.core.coercion import (
    coerce_value,
    format_value,
    is_number,
    to_number,
)


def test_coerce_value_types_numbers_booleans_and_empty():
    assert coerce_value("42") == 42
    assert isinstance(coerce_value("42"), int)
    assert coerce_value("-3") == -3
    assert coerce_value("2.5") == 2.5
    assert coerce_value(".5") == 0.5
    assert coerce_value("1e3") == 1000.0
    assert isinstance(coerce_value("1e3"), float)

    assert coerce_value("true") is True
    assert coerce_value("TRUE") is True
    assert coerce_value("false") is False
    assert coerce_value("FALSE") is False

    assert coerce_value("") is None
    assert coerce_value(None) is None


def test_coerce_value_leaves_other_strings_alone():
    assert coerce_value("abc") == "abc"
    assert coerce_value("True") == "True"
    assert coerce_value("12abc") == "12abc"
    assert coerce_value("1,000") == "1,000"
    # beyond the safe integer range: precision would be lost
    assert coerce_value("9007199254740993") == "9007199254740993"


def test_is_number_excludes_booleans_and_strings():
    assert is_number(1)
    assert is_number(2.5)
    assert not is_number(True)
    assert not is_number("1")
    assert not is_number(None)


def test_to_number_policy():
    assert to_number(3) == 3.0
    assert to_number(True) == 1.0
    assert to_number(" 4.5 ") == 4.5
    assert to_number("abc") is None
    assert to_number("") is None
    assert to_number("   ") is None
    assert to_number(None) is None
    assert to_number(float("nan")) is None
    assert to_number("inf") is None


def test_to_number_uses_the_cell_literal_grammar():
    assert to_number("1_000") is None
    assert to_number("nan") is None
    assert to_number("0x10") is None
    assert to_number("1e3") == 1000.0
    assert to_number("-.5") == -0.5


def test_format_value_renders_cells():
    assert format_value(None) == ""
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(3.0) == "3"
    assert format_value(2.5) == "2.5"
    assert format_value(7) == "7"
    assert format_value("x") == "x"

