"""
Pie layout and arc geometry.

Angles are in radians, measured clockwise from 12 o'clock, on a canvas whose
y axis grows downward.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

TAU = 2 * math.pi
_EPSILON = 1e-12


@dataclass(frozen=True)
class PieSlice:
    key: Any
    value: float
    index: int
    start_angle: float
    end_angle: float

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle


def pie_layout(
    items: Sequence[Tuple[Any, float]],
    start_angle: float = 0.0,
    end_angle: float = TAU,
) -> List[PieSlice]:
    """
    Lay out (key, value) pairs as pie slices.

    Slices are returned in input order. Angles are handed out in descending
    value order (ties keep input order), so the largest slice starts at
    `start_angle`. Non-positive values get zero-width slices.
    """
    n = len(items)
    total = sum(v for _, v in items if v > 0)
    span = end_angle - start_angle
    k = span / total if total else 0.0

    order = sorted(range(n), key=lambda i: -items[i][1])
    angles: List[Tuple[float, float]] = [(0.0, 0.0)] * n
    a0 = start_angle
    for i in order:
        value = items[i][1]
        a1 = a0 + (value * k if value > 0 else 0.0)
        angles[i] = (a0, a1)
        a0 = a1

    return [
        PieSlice(key=key, value=value, index=i, start_angle=angles[i][0], end_angle=angles[i][1])
        for i, (key, value) in enumerate(items)
    ]


def _point(radius: float, angle: float) -> Tuple[float, float]:
    return radius * math.sin(angle), -radius * math.cos(angle)


@dataclass(frozen=True)
class Arc:
    """Annular sector generator (inner_radius=0 gives plain pie wedges)."""
    inner_radius: float = 0.0
    outer_radius: float = 1.0

    def centroid(self, s: PieSlice) -> Tuple[float, float]:
        """Midpoint of the slice: halfway between the radii, halfway along the angle."""
        r = (self.inner_radius + self.outer_radius) / 2
        a = (s.start_angle + s.end_angle) / 2 - math.pi / 2
        return math.cos(a) * r, math.sin(a) * r

    def outline(self, s: PieSlice, segments_per_radian: float = 24.0) -> List[Tuple[float, float]]:
        """
        Closed polygon approximating the slice, relative to the pie centre.

        Empty for zero-width slices.
        """
        span = s.span
        if span <= _EPSILON:
            return []
        n = max(2, int(math.ceil(span * segments_per_radian)) + 1)
        angles = [s.start_angle + span * i / (n - 1) for i in range(n)]

        outer = [_point(self.outer_radius, a) for a in angles]
        if self.inner_radius > 0:
            inner = [_point(self.inner_radius, a) for a in reversed(angles)]
        elif span >= TAU - 1e-6:
            # Full disc: no radius edge through the centre
            inner = []
        else:
            inner = [(0.0, 0.0)]
        points = outer + inner
        points.append(points[0])
        return points
