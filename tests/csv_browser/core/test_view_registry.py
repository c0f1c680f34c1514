from __future__ import annotations

import pytest

from csv_browser.core.dataset import Dataset
from csv_browser.core.view_registry import ViewRegistry
from csv_browser.ui.dash_app import build_view_registry
from csv_browser.views import BarChartView, LineChartView, PieChartView


def test_default_registry_order_and_create():
    registry = build_view_registry()
    assert [c.id for c in registry.all_classes()] == ["line", "bar", "pie"]

    view = registry.create("bar", Dataset.empty())
    assert isinstance(view, BarChartView)
    assert view.canvas.width == 600
    assert view.canvas.height == 400


def test_register_rejects_duplicates_and_non_views():
    registry = ViewRegistry()
    registry.register(LineChartView)

    with pytest.raises(ValueError):
        registry.register(LineChartView)

    with pytest.raises(TypeError):
        registry.register(object)  # type: ignore[arg-type]


def test_create_unknown_view_raises_key_error():
    registry = ViewRegistry()
    registry.register(PieChartView)

    with pytest.raises(KeyError):
        registry.create("scatter", Dataset.empty())
    assert "pie" in registry
