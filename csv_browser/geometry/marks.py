from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from csv_browser.config.model import CanvasConfig
from csv_browser.core.coercion import CellValue


@dataclass(frozen=True)
class Tick:
    position: float
    label: str


@dataclass(frozen=True)
class Axis:
    """
    orient: "bottom" or "left"
    offset: pixel position of the axis line (y for bottom, x for left)
    label_angle: rotation of tick labels in degrees
    """
    orient: str
    offset: float
    ticks: List[Tick]
    label_angle: float = 0.0


@dataclass(frozen=True)
class LinePath:
    points: List[Tuple[float, float]]
    stroke: str = "steelblue"
    stroke_width: float = 2.0


@dataclass(frozen=True)
class PointMark:
    cx: float
    cy: float
    x_value: CellValue
    y_value: float
    r: float = 4.0
    fill: str = "steelblue"


@dataclass(frozen=True)
class RectMark:
    x: float
    y: float
    width: float
    height: float
    x_value: CellValue
    y_value: float
    fill: str = "orange"


@dataclass(frozen=True)
class ArcMark:
    key: CellValue
    value: float
    start_angle: float
    end_angle: float
    fill: str
    outline: List[Tuple[float, float]]
    centroid: Tuple[float, float]
    stroke: str = "white"
    stroke_width: float = 2.0


@dataclass(frozen=True)
class TextMark:
    x: float
    y: float
    text: str
    font_size: int = 12


@dataclass
class ChartGeometry:
    """
    Everything needed to draw one chart, in canvas pixel coordinates.

    Derived purely from {dataset, selection}; painting it into a figure never
    mutates it.
    """
    chart_type: str
    canvas: CanvasConfig
    x_axis: Optional[Axis] = None
    y_axis: Optional[Axis] = None
    line: Optional[LinePath] = None
    points: List[PointMark] = field(default_factory=list)
    rects: List[RectMark] = field(default_factory=list)
    arcs: List[ArcMark] = field(default_factory=list)
    labels: List[TextMark] = field(default_factory=list)
    x_scale: Any = None
    y_scale: Any = None
    color_scale: Any = None

    @property
    def is_empty(self) -> bool:
        return not (self.line or self.points or self.rects or self.arcs)

    @property
    def mark_count(self) -> int:
        return len(self.points) + len(self.rects) + len(self.arcs) + (1 if self.line else 0)
