from __future__ import annotations

import plotly.graph_objs as go
import pytest

from csv_browser.core.chart_state import ChartState
from csv_browser.core.dataset import Dataset
from csv_browser.geometry.scales import LinearScale, PointScale
from csv_browser.views import LineChartView


def _make_view(rows) -> LineChartView:
    return LineChartView(Dataset(rows=rows))


def test_numeric_x_uses_linear_scale_over_extent():
    view = _make_view([{"x": 1, "y": 0}, {"x": 2, "y": 5}, {"x": 3, "y": 10}])
    data = view.compute_data(ChartState("line", "x", "y"))

    assert isinstance(data.x_scale, LinearScale)
    assert [p.cx for p in data.points] == pytest.approx([60, 315, 570])
    assert [p.cy for p in data.points] == pytest.approx([350, 195, 40])
    assert data.line.points == [(p.cx, p.cy) for p in data.points]


def test_y_scale_starts_at_zero_and_covers_max():
    view = _make_view([{"x": 1, "y": 3}, {"x": 2, "y": 7.3}])
    data = view.compute_data(ChartState("line", "x", "y"))

    lo, hi = data.y_scale.domain
    assert lo == 0
    assert hi >= 7.3
    assert [t.label for t in data.y_axis.ticks][0] == "0"


def test_categorical_x_uses_point_scale():
    view = _make_view([{"x": "a", "y": 1}, {"x": "b", "y": 2}, {"x": "c", "y": 3}])
    data = view.compute_data(ChartState("line", "x", "y"))

    assert isinstance(data.x_scale, PointScale)
    assert [p.cx for p in data.points] == pytest.approx([145, 315, 485])
    assert [t.label for t in data.x_axis.ticks] == ["a", "b", "c"]
    assert data.x_axis.label_angle == -40


def test_mixed_x_values_are_categorical():
    view = _make_view([{"x": 1, "y": 1}, {"x": "b", "y": 2}])
    data = view.compute_data(ChartState("line", "x", "y"))
    assert isinstance(data.x_scale, PointScale)


def test_non_numeric_y_rows_are_dropped():
    view = _make_view([{"x": "a", "y": 1}, {"x": "b", "y": "abc"}, {"x": "c", "y": 3}])
    data = view.compute_data(ChartState("line", "x", "y"))

    assert [p.x_value for p in data.points] == ["a", "c"]


def test_render_has_path_and_markers():
    view = _make_view([{"x": "a", "y": 1}, {"x": "b", "y": 2}])
    state = ChartState("line", "x", "y")
    fig = view.render_figure(view.compute_data(state), state)

    assert isinstance(fig, go.Figure)
    assert [t.mode for t in fig.data] == ["lines", "markers"]
    assert fig.layout.width == 600
    assert fig.layout.height == 400
    assert fig.layout.xaxis.tickangle == -40
    assert list(fig.data[1].marker.color) == ["steelblue", "steelblue"]


def test_no_valid_rows_renders_blank_canvas():
    view = _make_view([{"x": "a", "y": "abc"}])
    state = ChartState("line", "x", "y")
    data = view.compute_data(state)

    assert data.is_empty
    assert len(view.render_figure(data, state).data) == 0
