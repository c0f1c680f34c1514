"""
Top-level package for the CSV chart browser.

This package exposes the core architecture (data, geometry, views, UI adapters).
Most code should import from submodules such as:
    csv_browser.core
    csv_browser.geometry
    csv_browser.views
    csv_browser.ui
"""

__all__: list[str] = []
