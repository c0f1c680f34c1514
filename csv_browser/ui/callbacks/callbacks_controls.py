from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

import dash
from dash import Input, Output

from csv_browser.ui.callbacks.callbacks_utils import dataset_from_store
from csv_browser.ui.helpers import column_options
from csv_browser.ui.ids import IDs

if TYPE_CHECKING:
    from csv_browser.ui.config import AppConfig

_HIDDEN = {"display": "none"}
_SHOWN: Dict[str, str] = {}


def controls_for_dataset(
    store_data: Optional[Dict[str, Any]],
) -> Tuple[List[dict], List[dict], Dict[str, str], Dict[str, str]]:
    """Field options plus visibility of the controls and data sections."""
    ds = dataset_from_store(store_data)
    if not ds.columns:
        return [], [], _HIDDEN, _HIDDEN
    options = column_options(ds)
    return options, options, _SHOWN, _SHOWN


def register_controls_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Dataset -> column options for both field dropdowns
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.X_FIELD_SELECT, "options"),
        Output(IDs.Control.Y_FIELD_SELECT, "options"),
        Output(IDs.Control.CONTROLS_CONTAINER, "style"),
        Output(IDs.Control.DATA_SECTION, "style"),
        Input(IDs.Store.DATASET, "data"),
    )
    def update_field_options(store_data: dict | None):
        return controls_for_dataset(store_data)
