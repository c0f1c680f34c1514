from __future__ import annotations

from csv_browser.core.dataset import Dataset


def _make_dataset() -> Dataset:
    return Dataset(
        rows=[
            {"city": "Oslo", "temp": 4},
            {"city": "Rome", "temp": 18, "note": "sunny"},
        ],
        name="cities.csv",
    )


def test_columns_are_first_seen_order():
    ds = _make_dataset()
    assert ds.columns == ["city", "temp", "note"]
    assert len(ds) == 2
    assert not ds.is_empty


def test_explicit_columns_win():
    ds = Dataset(rows=[{"b": 1, "a": 2}], columns=["a", "b"])
    assert ds.columns == ["a", "b"]


def test_to_dict_from_dict_roundtrip():
    ds = _make_dataset()
    rebuilt = Dataset.from_dict(ds.to_dict())

    assert rebuilt.rows == ds.rows
    assert rebuilt.columns == ds.columns
    assert rebuilt.name == "cities.csv"


def test_from_dict_handles_missing_payload():
    ds = Dataset.from_dict(None)
    assert ds.is_empty
    assert ds.columns == []


def test_head():
    rows = [{"i": i} for i in range(15)]
    ds = Dataset(rows=rows)

    assert len(ds.head(10)) == 10
    assert len(ds.head(100)) == 15
    assert ds.head(-1) == []


def test_summary():
    assert _make_dataset().summary() == "2 rows · 3 columns"
