from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

import dash
from dash import Input, Output, State

from csv_browser.core.csv_loader import load_csv_upload
from csv_browser.core.exceptions import CsvParseError
from csv_browser.ui.helpers import upload_status
from csv_browser.ui.ids import IDs

if TYPE_CHECKING:
    from csv_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def handle_upload(
    contents: Optional[str],
    filename: Optional[str],
    max_bytes: int,
) -> Optional[Tuple[Dict[str, Any], None, None, str]]:
    """
    Upload payload -> (dataset store data, x field, y field, status text).

    A successful load always clears both field selections, so the previous
    chart is discarded together with the previous dataset. Returns None when
    the upload cannot be parsed; the error is logged and current state stays.
    """
    if not contents:
        return None
    try:
        ds = load_csv_upload(contents, filename, max_bytes=max_bytes)
    except CsvParseError as e:
        logger.error("Error parsing CSV", extra={"upload_name": filename, "error": str(e)})
        return None

    return ds.to_dict(), None, None, upload_status(ds)


def register_upload_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # File selected -> new dataset, selection reset
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.DATASET, "data"),
        Output(IDs.Control.X_FIELD_SELECT, "value"),
        Output(IDs.Control.Y_FIELD_SELECT, "value"),
        Output(IDs.Control.UPLOAD_STATUS, "children"),
        Input(IDs.Control.UPLOAD, "contents"),
        State(IDs.Control.UPLOAD, "filename"),
        prevent_initial_call=True,
    )
    def load_uploaded_csv(contents: str | None, filename: str | None):
        result = handle_upload(contents, filename, ctx.global_config.max_upload_bytes)
        if result is None:
            raise dash.exceptions.PreventUpdate
        return result
