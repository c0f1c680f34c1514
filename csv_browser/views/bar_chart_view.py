from __future__ import annotations

import plotly.graph_objs as go

from csv_browser.core.base_view import BaseView
from csv_browser.core.chart_state import CHART_BAR, ChartState
from csv_browser.core.coercion import format_value
from csv_browser.geometry.marks import ChartGeometry, RectMark, Tick
from csv_browser.geometry.scales import BandScale
from csv_browser.views.figure_helpers import (
    bottom_axis,
    cartesian_figure,
    hover_text,
    left_axis,
    value_scale,
)


class BarChartView(BaseView):
    """
    Bar chart: one rectangle per row, anchored at zero.

    The x axis is always banded, even when the x values are numbers.
    """

    id = CHART_BAR
    label = "Bar Chart"

    BAND_PADDING = 0.2

    def compute_data(self, state: ChartState) -> ChartGeometry:
        points = self.filtered_series(state)
        if not points:
            return self.empty_geometry()

        canvas = self.canvas
        x_scale = BandScale([p.x for p in points], canvas.x_range, padding=self.BAND_PADDING)
        y_scale = value_scale(points, canvas)
        baseline = y_scale(0)

        rects = []
        for p in points:
            x0 = x_scale(p.x)
            top = y_scale(p.y)
            height = baseline - top
            if height < 0:
                # Below the zero line: nothing to draw
                top, height = baseline, 0.0
            rects.append(
                RectMark(
                    x=x0 if x0 is not None else 0.0,
                    y=top,
                    width=x_scale.bandwidth,
                    height=height,
                    x_value=p.x,
                    y_value=p.y,
                )
            )

        x_ticks = [
            Tick(position=x_scale(v) + x_scale.bandwidth / 2, label=format_value(v))
            for v in x_scale.domain
        ]

        return ChartGeometry(
            chart_type=self.id,
            canvas=canvas,
            x_axis=bottom_axis(x_ticks, canvas),
            y_axis=left_axis(y_scale, canvas),
            rects=rects,
            x_scale=x_scale,
            y_scale=y_scale,
        )

    def render_figure(self, data: ChartGeometry, state: ChartState) -> go.Figure:
        if data is None or data.is_empty:
            return self.empty_figure(self.canvas)

        fig = cartesian_figure(data)
        fig.add_trace(
            go.Bar(
                x=[r.x + r.width / 2 for r in data.rects],
                y=[r.height for r in data.rects],
                base=[r.y for r in data.rects],
                width=[r.width for r in data.rects],
                marker=dict(color=[r.fill for r in data.rects], line=dict(width=0)),
                hovertext=[
                    hover_text(state.x_field, r.x_value, state.y_field, r.y_value)
                    for r in data.rects
                ],
                hoverinfo="text",
                name="bars",
            )
        )
        return fig
