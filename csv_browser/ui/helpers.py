from __future__ import annotations

from typing import Dict, List, Optional

from dash import dash_table

from csv_browser.core.coercion import format_value
from csv_browser.core.dataset import Dataset, Row

_FONT_FAMILY = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


def column_options(ds: Dataset) -> List[dict]:
    return [{"label": c, "value": c} for c in ds.columns]


def table_records(ds: Dataset, rows: List[Row]) -> List[Dict[str, str]]:
    """One record per row, one cell per column in source order; missing cells are ''."""
    return [{col: format_value(row.get(col)) for col in ds.columns} for row in rows]


def data_table(
    ds: Dataset,
    table_id: str,
    max_rows: Optional[int] = None,
) -> dash_table.DataTable:
    """
    Build a styled Dash DataTable of the dataset (all rows, or the first `max_rows`).
    """
    rows = ds.rows if max_rows is None else ds.head(max_rows)

    return dash_table.DataTable(
        id=table_id,
        data=table_records(ds, rows),
        columns=[{"name": c, "id": c} for c in ds.columns],

        # ---- FONT + LOOK & FEEL ----
        style_table={
            "overflowX": "auto",
        },
        style_cell={
            "fontFamily": _FONT_FAMILY,
            "fontSize": "12px",
            "padding": "5px 8px",
            "border": "1px solid #d1d5db",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "260px",
            "whiteSpace": "nowrap",
            "textOverflow": "ellipsis",
        },
        style_header={
            "fontFamily": _FONT_FAMILY,
            "fontSize": "12px",
            "fontWeight": "600",
            "backgroundColor": "#eeeeee",
        },

        # every row is rendered; no paging
        page_action="none",
        sort_action="none",
        filter_action="none",
    )


def preview_table(ds: Dataset, max_rows: int = 10) -> dash_table.DataTable:
    return data_table(ds, table_id="preview-data-table", max_rows=max_rows)


def full_table(ds: Dataset) -> dash_table.DataTable:
    return data_table(ds, table_id="full-data-table-inner")


def upload_status(ds: Dataset) -> str:
    if ds.is_empty:
        source = f"'{ds.name}'" if ds.name else "The file"
        return f"{source} contains no data rows."
    prefix = f"{ds.name}: " if ds.name else ""
    return f"{prefix}{ds.summary()}"
