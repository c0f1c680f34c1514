"""
Filtering and typing of the (x, y) series a chart is drawn from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Sequence, Tuple

from csv_browser.core.coercion import CellValue, is_number, to_number


@dataclass(frozen=True)
class SeriesPoint:
    """One valid row: raw x value, coerced numeric y, and the source row index."""
    x: CellValue
    y: float
    row_index: int


def filter_series(
    rows: Sequence[Mapping[str, CellValue]],
    x_field: str,
    y_field: str,
) -> List[SeriesPoint]:
    """
    Keep rows where x and y are both present and y is numeric-coercible.
    Row order is preserved.
    """
    points: List[SeriesPoint] = []
    for idx, row in enumerate(rows):
        x = row.get(x_field)
        if x is None:
            continue
        y = to_number(row.get(y_field))
        if y is None:
            continue
        points.append(SeriesPoint(x=x, y=y, row_index=idx))
    return points


def is_numeric_axis(points: Iterable[SeriesPoint]) -> bool:
    """True when every x value is a real number, so a continuous scale applies."""
    return all(is_number(p.x) for p in points)


def category_key(value: Any) -> Hashable:
    """
    Hashable identity for a category value.

    Python treats True == 1 == 1.0 as the same dict key; a boolean category must
    stay distinct from the number 1, so the type family is part of the key.
    """
    return (isinstance(value, bool), value)


def unique_values(values: Iterable[Any]) -> List[Any]:
    """Distinct values in first-seen order."""
    seen: Dict[Hashable, Any] = {}
    for value in values:
        seen.setdefault(category_key(value), value)
    return list(seen.values())


def aggregate_by_category(points: Iterable[SeriesPoint]) -> List[Tuple[CellValue, float]]:
    """
    Group by x and sum y. Groups appear once each, in order of first appearance.
    """
    labels: Dict[Hashable, CellValue] = {}
    totals: Dict[Hashable, float] = {}
    for p in points:
        key = category_key(p.x)
        if key not in totals:
            labels[key] = p.x
            totals[key] = 0.0
        totals[key] += p.y
    return [(labels[k], totals[k]) for k in totals]
