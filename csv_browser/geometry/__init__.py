"""
Pure data -> pixel geometry: scales, pie layout, and mark types.
Nothing here knows about Dash or plotly figures.
"""

from .marks import ArcMark, Axis, ChartGeometry, LinePath, PointMark, RectMark, TextMark, Tick
from .pie import Arc, PieSlice, pie_layout
from .scales import CATEGORY10, BandScale, LinearScale, OrdinalScale, PointScale, extent, ticks

__all__ = [
    "ArcMark", "Axis", "ChartGeometry", "LinePath", "PointMark", "RectMark", "TextMark", "Tick",
    "Arc", "PieSlice", "pie_layout",
    "CATEGORY10", "BandScale", "LinearScale", "OrdinalScale", "PointScale", "extent", "ticks",
]
