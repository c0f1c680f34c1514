from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from csv_browser.core.chart_state import DEFAULT_CHART_TYPE
from csv_browser.core.view_registry import ViewRegistry
from csv_browser.ui.ids import IDs


def build_chart_controls_panel(registry: ViewRegistry) -> dbc.Card:
    view_classes = registry.all_classes()
    chart_options = [{"label": cls.label, "value": cls.id} for cls in view_classes]
    default_chart = DEFAULT_CHART_TYPE if DEFAULT_CHART_TYPE in registry else (
        view_classes[0].id if view_classes else None
    )

    return dbc.Card(
        [
            dbc.CardHeader("Chart", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div(
                        [
                            html.Label("Chart Type", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.CHART_TYPE_SELECT,
                                options=chart_options,
                                value=default_chart,
                                clearable=False,
                                className="mb-1",
                            ),
                        ],
                        className="mb-3",
                    ),
                    html.Div(
                        [
                            html.Label("X-axis / Category", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.X_FIELD_SELECT,
                                options=[],
                                value=None,
                                placeholder="-- Select --",
                                className="mb-1",
                            ),
                        ],
                        className="mb-3",
                    ),
                    html.Div(
                        [
                            html.Label("Y-axis / Value", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.Y_FIELD_SELECT,
                                options=[],
                                value=None,
                                placeholder="-- Select --",
                                className="mb-1",
                            ),
                            html.Small(
                                "Rows with a missing X or a non-numeric Y are left out of the chart.",
                                className="text-muted",
                            ),
                        ],
                        className="mb-2",
                    ),
                ]
            ),
        ],
        id=IDs.Control.CONTROLS_CONTAINER,
        className="mt-3 ccb-controls-card",
        style={"display": "none"},
    )
