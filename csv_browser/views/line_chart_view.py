from __future__ import annotations

import plotly.graph_objs as go

from csv_browser.core.base_view import BaseView
from csv_browser.core.chart_state import CHART_LINE, ChartState
from csv_browser.core.coercion import format_value
from csv_browser.core.series import is_numeric_axis
from csv_browser.geometry.marks import ChartGeometry, LinePath, PointMark, Tick
from csv_browser.geometry.scales import LinearScale, PointScale, extent
from csv_browser.views.figure_helpers import (
    bottom_axis,
    cartesian_figure,
    hover_text,
    left_axis,
    value_scale,
)


class LineChartView(BaseView):
    """
    Line chart: one connected path through the rows plus a marker per row.

    The x axis is continuous when every x value is a number, otherwise the
    categories sit on evenly spaced points.
    """

    id = CHART_LINE
    label = "Line Chart"

    POINT_PADDING = 0.5

    def compute_data(self, state: ChartState) -> ChartGeometry:
        points = self.filtered_series(state)
        if not points:
            return self.empty_geometry()

        canvas = self.canvas
        xs = [p.x for p in points]

        if is_numeric_axis(points):
            x_scale = LinearScale(extent(xs), canvas.x_range)
            fmt = x_scale.tick_format()
            x_ticks = [Tick(position=x_scale(t), label=fmt(t)) for t in x_scale.ticks()]
        else:
            x_scale = PointScale(xs, canvas.x_range, padding=self.POINT_PADDING)
            x_ticks = [Tick(position=x_scale(v), label=format_value(v)) for v in x_scale.domain]

        y_scale = value_scale(points, canvas)

        marks = []
        for p in points:
            cx = x_scale(p.x)
            marks.append(
                PointMark(
                    cx=cx if cx is not None else 0.0,
                    cy=y_scale(p.y),
                    x_value=p.x,
                    y_value=p.y,
                )
            )

        return ChartGeometry(
            chart_type=self.id,
            canvas=canvas,
            x_axis=bottom_axis(x_ticks, canvas),
            y_axis=left_axis(y_scale, canvas),
            line=LinePath(points=[(m.cx, m.cy) for m in marks]),
            points=marks,
            x_scale=x_scale,
            y_scale=y_scale,
        )

    def render_figure(self, data: ChartGeometry, state: ChartState) -> go.Figure:
        if data is None or data.is_empty:
            return self.empty_figure(self.canvas)

        fig = cartesian_figure(data)

        if data.line is not None:
            fig.add_trace(
                go.Scatter(
                    x=[x for x, _ in data.line.points],
                    y=[y for _, y in data.line.points],
                    mode="lines",
                    line=dict(color=data.line.stroke, width=data.line.stroke_width),
                    hoverinfo="skip",
                    name="path",
                )
            )

        fig.add_trace(
            go.Scatter(
                x=[m.cx for m in data.points],
                y=[m.cy for m in data.points],
                mode="markers",
                marker=dict(
                    size=[m.r * 2 for m in data.points],
                    color=[m.fill for m in data.points],
                ),
                hovertext=[
                    hover_text(state.x_field, m.x_value, state.y_field, m.y_value)
                    for m in data.points
                ],
                hoverinfo="text",
                name="points",
            )
        )
        return fig
