from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from csv_browser.ui.ids import IDs


def build_dataset_preview_panel(preview_rows: int) -> html.Div:
    """
    Dataset preview:

    - first `preview_rows` rows inline
    - "View All Data" opens a modal with every row; clicking the backdrop or
      Close dismisses it
    """
    preview_card = dbc.Card(
        [
            dbc.CardHeader(
                html.Span(f"Data Preview (Top {preview_rows} rows)", id=IDs.Control.PREVIEW_TITLE)
            ),
            dbc.CardBody(
                [
                    html.Div(id=IDs.Control.PREVIEW_TABLE),
                    dbc.Button(
                        "View All Data",
                        id=IDs.Control.VIEW_ALL_BTN,
                        n_clicks=0,
                        color="secondary",
                        size="sm",
                        className="mt-2",
                    ),
                ],
                className="p-2",
            ),
        ],
        className="mt-3",
    )

    full_data_modal = dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle("Full Dataset"), close_button=False),
            dbc.ModalBody(html.Div(id=IDs.Control.FULL_DATA_TABLE)),
            dbc.ModalFooter(
                dbc.Button(
                    "Close",
                    id=IDs.Control.FULL_DATA_CLOSE_BTN,
                    n_clicks=0,
                    color="secondary",
                    size="sm",
                )
            ),
        ],
        id=IDs.Control.FULL_DATA_MODAL,
        is_open=False,
        backdrop=True,
        scrollable=True,
        size="xl",
    )

    return html.Div(
        [preview_card, full_data_modal],
        id=IDs.Control.DATA_SECTION,
        style={"display": "none"},
    )
