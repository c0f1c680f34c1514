from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import List, Optional

import plotly.graph_objs as go

from csv_browser.config.model import CanvasConfig
from csv_browser.core.chart_state import ChartState
from csv_browser.core.dataset import Dataset
from csv_browser.core.series import SeriesPoint, filter_series
from csv_browser.geometry.marks import ChartGeometry

logger = logging.getLogger(__name__)


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - the chart type it draws, used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - derive the chart geometry for the current ChartState
    - implement 'render_figure' - paint that geometry into a new Plotly figure
    """

    id: str = None
    label: str = None

    def __init__(self, dataset: Dataset, canvas: Optional[CanvasConfig] = None):
        self.dataset = dataset
        self.canvas = canvas or CanvasConfig()

    @abstractmethod
    def compute_data(self, state: ChartState) -> ChartGeometry:
        """
        Compute the chart geometry given the current ChartState
        :param state: the current selection (chart type, x field, y field)
        :return: a ChartGeometry in canvas pixel coordinates; empty when no row survives filtering
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: ChartGeometry, state: ChartState) -> go.Figure:
        """
        Render the figure given the computed geometry
        :param data: the geometry provided by {@link compute_data()}
        :param state: the current selection
        :return: a new Plotly figure holding only this chart's marks
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def filtered_series(self, state: ChartState) -> List[SeriesPoint]:
        """
        Rows usable for this chart: x present, y numeric.

        All views should call this instead of filtering rows themselves,
        so the filtering policy lives in one place.
        """
        return filter_series(self.dataset.rows, state.x_field, state.y_field)

    def empty_geometry(self) -> ChartGeometry:
        return ChartGeometry(chart_type=self.id, canvas=self.canvas)

    def timed_compute(self, state: ChartState) -> ChartGeometry:
        start = time.perf_counter()
        data = self.compute_data(state)
        logger.info(
            "compute_done",
            extra={
                "view_id": self.id,
                "x_field": state.x_field,
                "y_field": state.y_field,
                "marks": data.mark_count,
                "duration_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return data

    @staticmethod
    def empty_figure(canvas: Optional[CanvasConfig] = None, message: str = "") -> go.Figure:
        """
        Standardised blank canvas used by all views when nothing can be drawn.
        """
        canvas = canvas or CanvasConfig()
        fig = go.Figure()
        fig.update_layout(
            width=canvas.width,
            height=canvas.height,
            autosize=False,
            margin=dict(l=0, r=0, t=0, b=0),
            plot_bgcolor="white",
            paper_bgcolor="white",
            xaxis={"visible": False, "range": [0, canvas.width], "fixedrange": True},
            yaxis={"visible": False, "range": [canvas.height, 0], "fixedrange": True},
            showlegend=False,
        )
        if message:
            fig.add_annotation(
                text=message,
                showarrow=False,
                x=canvas.width / 2,
                y=canvas.height / 2,
                font={"color": "#6b7280", "size": 13},
            )
        return fig
