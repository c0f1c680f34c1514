from __future__ import annotations

import pytest

from csv_browser.core.chart_state import ChartState
from csv_browser.core.dataset import Dataset
from csv_browser.validation import ValidationError, chart_issues, validate_chart_state


def _make_dataset() -> Dataset:
    return Dataset(rows=[{"a": "x", "b": 1}])


def _codes(state, ds):
    return [i.code for i in chart_issues(state, ds)]


def test_complete_selection_is_valid():
    validate_chart_state(ChartState("bar", "a", "b"), _make_dataset())


def test_missing_fields_are_reported():
    assert _codes(ChartState("bar", "", ""), _make_dataset()) == ["CHART_X_FIELD", "CHART_Y_FIELD"]


def test_unknown_columns_and_type_are_reported():
    codes = _codes(ChartState("scatter", "nope", "b"), _make_dataset())
    assert codes == ["CHART_TYPE", "CHART_X_FIELD"]


def test_empty_dataset_is_reported():
    codes = _codes(ChartState("line", "a", "b"), Dataset.empty())
    assert "CHART_EMPTY_DATASET" in codes


def test_validate_raises_with_all_issues():
    with pytest.raises(ValidationError) as exc:
        validate_chart_state(ChartState("line", "", ""), Dataset.empty())

    assert len(exc.value.issues) == 3
    assert "CHART_Y_FIELD" in str(exc.value)
