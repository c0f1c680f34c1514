from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from csv_browser.ui.ids import IDs

CSV_ACCEPT = ".csv,text/csv"


def build_upload_panel() -> dbc.Card:
    """
    File picker restricted to CSV files, plus a one-line load summary.
    """
    return dbc.Card(
        [
            dbc.CardHeader("Data file"),
            dbc.CardBody(
                [
                    dcc.Upload(
                        id=IDs.Control.UPLOAD,
                        children=html.Div(
                            ["Drag and drop or ", html.A("select a .csv file")]
                        ),
                        accept=CSV_ACCEPT,
                        multiple=False,
                        className="ccb-upload border rounded p-2 text-center",
                    ),
                    html.Div(id=IDs.Control.UPLOAD_STATUS, className="small text-muted mt-2"),
                ]
            ),
        ],
        className="mt-3",
    )
