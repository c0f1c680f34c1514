from __future__ import annotations

from csv_browser.core.chart_state import CHART_TYPES, ChartState
from csv_browser.core.dataset import Dataset
from csv_browser.validation.errors import ValidationError, ValidationIssue


def chart_issues(state: ChartState, ds: Dataset) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    if ds.is_empty:
        issues.append(ValidationIssue("CHART_EMPTY_DATASET", "No data loaded. Upload a CSV file."))

    if state.chart_type not in CHART_TYPES:
        issues.append(ValidationIssue("CHART_TYPE", f"Unknown chart type '{state.chart_type}'."))

    if not state.x_field:
        issues.append(ValidationIssue("CHART_X_FIELD", "Select an X-axis / category column."))
    elif state.x_field not in ds.columns:
        issues.append(ValidationIssue("CHART_X_FIELD", f"Column '{state.x_field}' is not in the dataset."))

    if not state.y_field:
        issues.append(ValidationIssue("CHART_Y_FIELD", "Select a Y-axis / value column."))
    elif state.y_field not in ds.columns:
        issues.append(ValidationIssue("CHART_Y_FIELD", f"Column '{state.y_field}' is not in the dataset."))

    return issues


def validate_chart_state(state: ChartState, ds: Dataset) -> None:
    issues = chart_issues(state, ds)
    if issues:
        raise ValidationError(issues)
