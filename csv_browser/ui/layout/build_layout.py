from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from csv_browser.ui.ids import IDs
from csv_browser.ui.layout.build_chart_controls_panel import build_chart_controls_panel
from csv_browser.ui.layout.build_dataset_preview_panel import build_dataset_preview_panel
from csv_browser.ui.layout.build_navbar import build_navbar
from csv_browser.ui.layout.build_plot_panel import build_plot_panel
from csv_browser.ui.layout.build_upload_panel import build_upload_panel

if TYPE_CHECKING:
    from csv_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    cfg = ctx.global_config

    return dbc.Container(
        fluid=True,
        className="ccb-root",
        children=[
            build_navbar(cfg),

            # Current dataset lives in the browser; memory storage so a reload starts clean
            dcc.Store(id=IDs.Store.DATASET, storage_type="memory"),

            dbc.Row(
                [
                    dbc.Col(
                        [
                            build_upload_panel(),
                            build_chart_controls_panel(ctx.registry),
                        ],
                        md=3,
                    ),
                    dbc.Col(
                        [
                            build_plot_panel(cfg.canvas),
                            build_dataset_preview_panel(cfg.preview_rows),
                        ],
                        md=9,
                    ),
                ],
                className="gx-3",
            ),
        ],
    )
