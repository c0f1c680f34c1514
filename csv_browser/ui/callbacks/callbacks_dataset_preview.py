from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
from dash import Input, Output, State, ctx as callback_ctx

from csv_browser.ui.callbacks.callbacks_utils import dataset_from_store
from csv_browser.ui.helpers import full_table, preview_table
from csv_browser.ui.ids import IDs

if TYPE_CHECKING:
    from csv_browser.ui.config import AppConfig


def preview_children(store_data: Optional[dict[str, Any]], preview_rows: int) -> Tuple[Any, Any]:
    """(preview table, full table) for the dataset store contents."""
    ds = dataset_from_store(store_data)
    if not ds.columns:
        return None, None
    return preview_table(ds, max_rows=preview_rows), full_table(ds)


def next_modal_state(triggered_id: Optional[str], is_open: bool) -> bool:
    if triggered_id == IDs.Control.VIEW_ALL_BTN:
        return True
    if triggered_id == IDs.Control.FULL_DATA_CLOSE_BTN:
        return False
    return bool(is_open)


def register_dataset_preview_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.PREVIEW_TABLE, "children"),
        Output(IDs.Control.FULL_DATA_TABLE, "children"),
        Input(IDs.Store.DATASET, "data"),
    )
    def update_dataset_preview(store_data: dict | None):
        return preview_children(store_data, ctx.global_config.preview_rows)

    # Backdrop clicks close the modal on the client; only the buttons come through here
    @app.callback(
        Output(IDs.Control.FULL_DATA_MODAL, "is_open"),
        Input(IDs.Control.VIEW_ALL_BTN, "n_clicks"),
        Input(IDs.Control.FULL_DATA_CLOSE_BTN, "n_clicks"),
        State(IDs.Control.FULL_DATA_MODAL, "is_open"),
        prevent_initial_call=True,
    )
    def toggle_full_data_modal(_open_clicks: int, _close_clicks: int, is_open: bool):
        return next_modal_state(callback_ctx.triggered_id, is_open)
