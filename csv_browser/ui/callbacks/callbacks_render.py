from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output

from csv_browser.core.base_view import BaseView
from csv_browser.core.chart_state import ChartState
from csv_browser.ui.callbacks.callbacks_utils import dataset_from_store
from csv_browser.ui.ids import IDs
from csv_browser.validation.chart_validation import chart_issues

if TYPE_CHECKING:
    from csv_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def render_chart(
    ctx: AppConfig,
    store_data: Optional[dict[str, Any]],
    chart_type: Optional[str],
    x_field: Optional[str],
    y_field: Optional[str],
) -> go.Figure:
    """
    {dataset, chart type, x field, y field} -> a brand new figure.

    Nothing is drawn until a non-empty dataset and both fields are selected.
    """
    canvas = ctx.canvas
    ds = dataset_from_store(store_data)
    state = ChartState.from_controls(chart_type, x_field, y_field)

    issues = chart_issues(state, ds)
    if issues:
        logger.debug(
            "render_skipped",
            extra={"issues": [i.code for i in issues], "chart_type": state.chart_type},
        )
        return BaseView.empty_figure(canvas, issues[0].message)

    try:
        view = ctx.registry.create(state.chart_type, ds, canvas)

        logger.info(
            "render_start",
            extra={
                "chart_type": state.chart_type,
                "x_field": state.x_field,
                "y_field": state.y_field,
                "rows": len(ds),
            },
        )

        data = view.timed_compute(state)
        return view.render_figure(data, state)

    except Exception:
        logger.exception(
            "Error in render_chart",
            extra={"chart_state": state.to_dict()},
        )
        return BaseView.empty_figure(
            canvas,
            "Something went wrong while drawing this chart.",
        )


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Main figure: {dataset, chart type, x, y} -> figure
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAIN_GRAPH, "figure"),
        Input(IDs.Store.DATASET, "data"),
        Input(IDs.Control.CHART_TYPE_SELECT, "value"),
        Input(IDs.Control.X_FIELD_SELECT, "value"),
        Input(IDs.Control.Y_FIELD_SELECT, "value"),
    )
    def update_main_graph(
        store_data: dict[str, Any] | None,
        chart_type: str | None,
        x_field: str | None,
        y_field: str | None,
    ):
        return render_chart(ctx, store_data, chart_type, x_field, y_field)
