"""
Helpers shared by the chart views: cartesian scales/axes on the canvas, and
painting pixel-space geometry into plotly figures.

Figures use pixel coordinates on both axes (x range = plot-area columns,
y range reversed so pixel rows grow downward). With the layout margins equal
to the canvas margins, each geometry coordinate lands on the same pixel it
was computed for.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

import plotly.graph_objs as go

from csv_browser.config.model import CanvasConfig
from csv_browser.core.coercion import format_value
from csv_browser.core.series import SeriesPoint
from csv_browser.geometry.marks import Axis, ChartGeometry, Tick
from csv_browser.geometry.scales import LinearScale

BOTTOM_LABEL_ANGLE = -40.0


def value_scale(points: Sequence[SeriesPoint], canvas: CanvasConfig) -> LinearScale:
    """Vertical scale: 0 to the largest y, niced."""
    y_max = max(p.y for p in points)
    return LinearScale((0.0, y_max), canvas.y_range).nice()


def left_axis(scale: LinearScale, canvas: CanvasConfig) -> Axis:
    fmt = scale.tick_format()
    return Axis(
        orient="left",
        offset=float(canvas.margin.left),
        ticks=[Tick(position=scale(t), label=fmt(t)) for t in scale.ticks()],
    )


def bottom_axis(ticks: List[Tick], canvas: CanvasConfig) -> Axis:
    return Axis(
        orient="bottom",
        offset=float(canvas.height - canvas.margin.bottom),
        ticks=ticks,
        label_angle=BOTTOM_LABEL_ANGLE,
    )


def hover_text(x_field: str, x_value: Any, y_field: str, y_value: float) -> str:
    return f"{x_field}: {format_value(x_value)}<br>{y_field}: {format_value(y_value)}"


def _axis_layout(axis: Axis | None, pixel_range: Sequence[float]) -> Dict[str, Any]:
    layout: Dict[str, Any] = {
        "range": list(pixel_range),
        "fixedrange": True,
        "showgrid": False,
        "zeroline": False,
        "automargin": False,
    }
    if axis is None:
        layout["visible"] = False
        return layout
    layout.update(
        tickmode="array",
        tickvals=[t.position for t in axis.ticks],
        ticktext=[t.label for t in axis.ticks],
        tickangle=axis.label_angle,
        ticks="outside",
        showline=True,
        linecolor="#000000",
    )
    return layout


def cartesian_figure(geometry: ChartGeometry) -> go.Figure:
    """New figure sized to the canvas, with the geometry's axes and no marks."""
    canvas = geometry.canvas
    m = canvas.margin
    fig = go.Figure()
    fig.update_layout(
        width=canvas.width,
        height=canvas.height,
        autosize=False,
        margin=dict(l=m.left, r=m.right, t=m.top, b=m.bottom, pad=0),
        plot_bgcolor="white",
        paper_bgcolor="white",
        showlegend=False,
        hovermode="closest",
        xaxis=_axis_layout(geometry.x_axis, canvas.x_range),
        yaxis=_axis_layout(geometry.y_axis, canvas.y_range),
    )
    return fig


def full_canvas_figure(canvas: CanvasConfig) -> go.Figure:
    """New figure whose plot area is the whole canvas (used by the pie chart)."""
    fig = go.Figure()
    fig.update_layout(
        width=canvas.width,
        height=canvas.height,
        autosize=False,
        margin=dict(l=0, r=0, t=0, b=0, pad=0),
        plot_bgcolor="white",
        paper_bgcolor="white",
        showlegend=False,
        hovermode="closest",
        xaxis=_axis_layout(None, (0, canvas.width)),
        yaxis=_axis_layout(None, (canvas.height, 0)),
    )
    return fig
