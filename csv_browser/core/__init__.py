"""
Core domain layer: dataset abstraction, selection state, value coercion
and series filtering. The view base class and registry live in
csv_browser.core.base_view / csv_browser.core.view_registry.
"""

from .chart_state import ChartState
from .dataset import Dataset

__all__ = ["ChartState", "Dataset"]
