from __future__ import annotations

import base64

import pytest

from csv_browser.core.csv_loader import (
    decode_upload,
    load_csv_bytes,
    load_csv_upload,
    parse_csv_text,
)
from csv_browser.core.exceptions import CsvParseError


def _data_url(text: str, mime: str = "text/csv") -> str:
    payload = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return f"data:{mime};base64,{payload}"


def test_parse_types_cells_and_keeps_header_order():
    ds = parse_csv_text("name,age,active\nAnn,31,true\nBob,,FALSE\n", name="people.csv")

    assert ds.columns == ["name", "age", "active"]
    assert ds.rows == [
        {"name": "Ann", "age": 31, "active": True},
        {"name": "Bob", "age": None, "active": False},
    ]
    assert ds.name == "people.csv"


def test_blank_and_all_empty_rows_are_skipped():
    ds = parse_csv_text("a,b\n1,2\n\n,\n3,4\n")
    assert ds.rows == [{"a": 1, "b": 2}, {"a": 3, "b": 4}]


def test_rows_with_too_many_fields_are_skipped():
    ds = parse_csv_text("a,b\n1,2\n3,4,5\n6,7\n")
    assert ds.rows == [{"a": 1, "b": 2}, {"a": 6, "b": 7}]


def test_short_rows_are_padded_with_none():
    ds = parse_csv_text("a,b,c\n1,2\n")
    assert ds.rows == [{"a": 1, "b": 2, "c": None}]


def test_header_only_file_yields_empty_dataset():
    ds = parse_csv_text("a,b\n")
    assert ds.is_empty
    assert ds.columns == []


def test_empty_file_yields_empty_dataset():
    ds = parse_csv_text("")
    assert ds.is_empty
    assert ds.columns == []


def test_load_csv_upload_decodes_data_url():
    ds = load_csv_upload(_data_url("cat,v\na,1\nb,2\n"), "sample.csv")
    assert ds.columns == ["cat", "v"]
    assert [r["v"] for r in ds.rows] == [1, 2]
    assert ds.name == "sample.csv"


def test_utf8_bom_is_stripped():
    ds = load_csv_bytes(b"\xef\xbb\xbfa,b\n1,2\n")
    assert ds.columns == ["a", "b"]


def test_latin1_fallback():
    ds = load_csv_bytes(b"name,v\ncaf\xe9,1\n")
    assert ds.rows[0]["name"] == "café"


def test_corrupted_upload_raises_parse_error():
    with pytest.raises(CsvParseError):
        decode_upload("no-comma-here")

    with pytest.raises(CsvParseError):
        decode_upload("data:text/csv;base64,@@not-base64@@")


def test_upload_over_size_limit_raises_parse_error():
    with pytest.raises(CsvParseError):
        load_csv_bytes(b"a,b\n1,2\n", max_bytes=4)


def test_over_long_first_data_row_is_skipped_not_shifted():
    ds = parse_csv_text("a,b\n1,2,3\n4,5\n")
    assert ds.columns == ["a", "b"]
    assert ds.rows == [{"a": 4, "b": 5}]


def test_every_row_over_long_yields_empty_dataset():
    ds = parse_csv_text("cat,v\nx,1,extra\ny,2,extra\n")
    assert ds.is_empty
    assert ds.columns == []


def test_repeated_header_names_are_suffixed():
    ds = parse_csv_text("a,a,b\n1,2,3\n")
    assert ds.columns == ["a", "a.1", "b"]
    assert ds.rows == [{"a": 1, "a.1": 2, "b": 3}]
