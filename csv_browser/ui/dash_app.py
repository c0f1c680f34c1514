from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from csv_browser.config.loader import load_global_config
from csv_browser.core.view_registry import ViewRegistry
from csv_browser.ui.config import AppConfig
from csv_browser.ui.layout.build_layout import build_layout
from csv_browser.ui.callbacks.callbacks_upload import register_upload_callbacks
from csv_browser.ui.callbacks.callbacks_controls import register_controls_callbacks
from csv_browser.ui.callbacks.callbacks_render import register_render_callbacks
from csv_browser.ui.callbacks.callbacks_dataset_preview import register_dataset_preview_callbacks

logger = logging.getLogger(__name__)


def build_view_registry() -> ViewRegistry:
    from csv_browser.views import (
        LineChartView,
        BarChartView,
        PieChartView,
    )

    registry = ViewRegistry()
    registry.register(LineChartView)
    registry.register(BarChartView)
    registry.register(PieChartView)
    return registry


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        registry=build_view_registry(),
    )
    ctx.validate()

    # Resolve the assets folder relative to the package so styles.css is found
    # regardless of the working directory.
    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_upload_callbacks(app, ctx)
    register_controls_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_dataset_preview_callbacks(app, ctx)

    logger.info(
        "App created",
        extra={"config_root": str(config_root), "views": [c.id for c in ctx.registry.all_classes()]},
    )
    return app
