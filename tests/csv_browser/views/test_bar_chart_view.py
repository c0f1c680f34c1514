from __future__ import annotations

import pytest

from csv_browser.core.chart_state import ChartState
from csv_browser.core.dataset import Dataset
from csv_browser.geometry.scales import BandScale
from csv_browser.views import BarChartView


def _make_data(rows):
    view = BarChartView(Dataset(rows=rows))
    state = ChartState("bar", "x", "y")
    return view, state, view.compute_data(state)


def test_numeric_x_is_still_banded():
    _, _, data = _make_data([{"x": 1, "y": 0}, {"x": 2, "y": 5}, {"x": 3, "y": 10}])

    assert isinstance(data.x_scale, BandScale)
    assert data.x_scale.bandwidth == pytest.approx(127.5)
    assert [r.width for r in data.rects] == pytest.approx([127.5] * 3)


def test_bars_are_anchored_at_zero():
    _, _, data = _make_data([{"x": "a", "y": 0}, {"x": "b", "y": 5}, {"x": "c", "y": 10}])

    assert [r.height for r in data.rects] == pytest.approx([0, 155, 310])
    for r in data.rects:
        assert r.y + r.height == pytest.approx(350)
        assert r.fill == "orange"


def test_negative_values_collapse_to_baseline():
    _, _, data = _make_data([{"x": "a", "y": -5}, {"x": "b", "y": 10}])

    neg = data.rects[0]
    assert neg.height == 0
    assert neg.y == pytest.approx(data.y_scale(0))


def test_ticks_sit_at_band_centres():
    _, _, data = _make_data([{"x": "a", "y": 1}, {"x": "b", "y": 2}])

    for tick, rect in zip(data.x_axis.ticks, data.rects):
        assert tick.position == pytest.approx(rect.x + rect.width / 2)


def test_render_single_bar_trace():
    view, state, data = _make_data([{"x": "a", "y": 1}, {"x": "b", "y": 2}, {"x": "c", "y": 3}])
    fig = view.render_figure(data, state)

    assert len(fig.data) == 1
    assert fig.data[0].type == "bar"
    assert len(fig.data[0].x) == 3
