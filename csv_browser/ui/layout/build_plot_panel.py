from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from csv_browser.config.model import CanvasConfig
from csv_browser.core.base_view import BaseView
from csv_browser.ui.ids import IDs


def build_plot_panel(canvas: CanvasConfig) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Plot"),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                dcc.Graph(
                    id=IDs.Control.MAIN_GRAPH,
                    figure=BaseView.empty_figure(canvas),
                    style={"width": f"{canvas.width}px", "height": f"{canvas.height}px"},
                    config={
                        "responsive": False,
                        "displaylogo": False,
                        "toImageButtonOptions": {
                            "format": "svg",
                            "filename": "chart",
                            "width": canvas.width,
                            "height": canvas.height,
                        },
                    },
                ),
                className="ccb-main-body",
            ),
        ],
        className="mt-3 ccb-maincard",
    )
