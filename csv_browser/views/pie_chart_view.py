from __future__ import annotations

import plotly.graph_objs as go

from csv_browser.core.base_view import BaseView
from csv_browser.core.chart_state import CHART_PIE, ChartState
from csv_browser.core.coercion import format_value
from csv_browser.core.series import aggregate_by_category
from csv_browser.geometry.marks import ArcMark, ChartGeometry, TextMark
from csv_browser.geometry.pie import Arc, pie_layout
from csv_browser.geometry.scales import CATEGORY10, OrdinalScale
from csv_browser.views.figure_helpers import full_canvas_figure, hover_text


class PieChartView(BaseView):
    """
    Pie chart of y summed per x category.

    Each category appears once, in order of first appearance, with a stable
    colour and its key printed at the slice centroid.
    """

    id = CHART_PIE
    label = "Pie Chart"

    RADIUS_INSET = 40

    def compute_data(self, state: ChartState) -> ChartGeometry:
        points = self.filtered_series(state)
        if not points:
            return self.empty_geometry()

        canvas = self.canvas
        groups = aggregate_by_category(points)
        radius = min(canvas.width, canvas.height) / 2 - self.RADIUS_INSET
        arc = Arc(inner_radius=0.0, outer_radius=radius)
        color = OrdinalScale(CATEGORY10, domain=[key for key, _ in groups])
        cx, cy = canvas.center

        arcs = []
        labels = []
        for s in pie_layout(groups):
            dx, dy = arc.centroid(s)
            centroid = (cx + dx, cy + dy)
            arcs.append(
                ArcMark(
                    key=s.key,
                    value=s.value,
                    start_angle=s.start_angle,
                    end_angle=s.end_angle,
                    fill=color(s.key),
                    outline=[(cx + x, cy + y) for x, y in arc.outline(s)],
                    centroid=centroid,
                )
            )
            labels.append(TextMark(x=centroid[0], y=centroid[1], text=format_value(s.key)))

        return ChartGeometry(
            chart_type=self.id,
            canvas=canvas,
            arcs=arcs,
            labels=labels,
            color_scale=color,
        )

    def render_figure(self, data: ChartGeometry, state: ChartState) -> go.Figure:
        if data is None or data.is_empty:
            return self.empty_figure(self.canvas)

        fig = full_canvas_figure(data.canvas)

        for mark in data.arcs:
            if not mark.outline:
                continue
            fig.add_trace(
                go.Scatter(
                    x=[x for x, _ in mark.outline],
                    y=[y for _, y in mark.outline],
                    mode="lines",
                    fill="toself",
                    fillcolor=mark.fill,
                    line=dict(color=mark.stroke, width=mark.stroke_width),
                    hoveron="fills",
                    hoverinfo="text",
                    text=hover_text(state.x_field, mark.key, state.y_field, mark.value),
                    name=format_value(mark.key),
                )
            )

        if data.labels:
            fig.add_trace(
                go.Scatter(
                    x=[t.x for t in data.labels],
                    y=[t.y for t in data.labels],
                    mode="text",
                    text=[t.text for t in data.labels],
                    textposition="middle center",
                    textfont=dict(size=[t.font_size for t in data.labels], color="#000000"),
                    hoverinfo="skip",
                    name="labels",
                )
            )
        return fig
