"""
Scales mapping data values to canvas pixels.

Semantics follow the usual d3 conventions so charts look the way users expect:

- LinearScale: continuous, with `nice()` rounding the domain to tick boundaries
- PointScale: categories at evenly spaced points (no width)
- BandScale: categories in equal-width slots with inner/outer padding
- OrdinalScale: stable category -> colour assignment
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

from plotly.colors import qualitative

from csv_browser.core.series import category_key, unique_values

CATEGORY10: List[str] = list(qualitative.D3)

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


# ---------------------------------------------------------------------------
# Tick arithmetic
# ---------------------------------------------------------------------------
def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _tick_spec(start: float, stop: float, count: float) -> Tuple[int, int, float]:
    step = (stop - start) / max(0.0, count)
    power = math.floor(math.log10(step))
    error = step / math.pow(10, power)
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1

    if power < 0:
        inc = math.pow(10, -power) / factor
        i1 = _round_half_up(start * inc)
        i2 = _round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = math.pow(10, power) * factor
        i1 = _round_half_up(start / inc)
        i2 = _round_half_up(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1

    if i2 < i1 and 0.5 <= count < 2:
        return _tick_spec(start, stop, count * 2)
    return i1, i2, inc


def tick_increment(start: float, stop: float, count: float) -> float:
    """
    Tick spacing for [start, stop] (start <= stop).

    Positive values are the step itself; negative values -k mean a step of 1/k,
    which keeps fractional steps exact. Returns 0 when no step exists
    (empty or degenerate interval).
    """
    if not count > 0 or not stop > start:
        return 0.0
    return _tick_spec(start, stop, count)[2]


def tick_step(start: float, stop: float, count: float) -> float:
    reverse = stop < start
    inc = tick_increment(stop, start, count) if reverse else tick_increment(start, stop, count)
    if inc == 0:
        return 0.0
    step = 1 / -inc if inc < 0 else inc
    return -step if reverse else step


def ticks(start: float, stop: float, count: float = 10) -> List[float]:
    """Round, evenly spaced values covering [start, stop]."""
    if not count > 0:
        return []
    if start == stop:
        return [float(start)]
    reverse = stop < start
    lo, hi = (stop, start) if reverse else (start, stop)
    i1, i2, inc = _tick_spec(lo, hi, count)
    if not i2 >= i1:
        return []
    n = i2 - i1 + 1
    if inc < 0:
        values = [(i1 + i) / -inc for i in range(n)]
    else:
        values = [(i1 + i) * inc for i in range(n)]
    return values[::-1] if reverse else values


def _precision_fixed(step: float) -> int:
    if step == 0:
        return 0
    return max(0, -math.floor(math.log10(abs(step))))


# ---------------------------------------------------------------------------
# Continuous
# ---------------------------------------------------------------------------
class LinearScale:
    def __init__(
        self,
        domain: Sequence[float] = (0.0, 1.0),
        range_: Sequence[float] = (0.0, 1.0),
    ) -> None:
        self.domain: Tuple[float, float] = (float(domain[0]), float(domain[1]))
        self.range: Tuple[float, float] = (float(range_[0]), float(range_[1]))

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            # Degenerate domain: everything sits in the middle of the range
            t = 0.5
        else:
            t = (float(value) - d0) / (d1 - d0)
        return r0 + t * (r1 - r0)

    def nice(self, count: int = 10) -> LinearScale:
        """
        New scale whose domain is extended outward to round tick values.

        Repeats until the tick step stops changing, since widening the domain can
        change the step.
        """
        start, stop = self.domain
        reverse = stop < start
        if reverse:
            start, stop = stop, start

        prestep: Optional[float] = None
        for _ in range(10):
            step = tick_increment(start, stop, count)
            if step == prestep:
                break
            if step > 0:
                start = math.floor(start / step) * step
                stop = math.ceil(stop / step) * step
            elif step < 0:
                start = math.ceil(start * step) / step
                stop = math.floor(stop * step) / step
            else:
                break
            prestep = step

        domain = (stop, start) if reverse else (start, stop)
        return LinearScale(domain, self.range)

    def ticks(self, count: int = 10) -> List[float]:
        return ticks(self.domain[0], self.domain[1], count)

    def tick_format(self, count: int = 10) -> Callable[[float], str]:
        precision = _precision_fixed(tick_step(self.domain[0], self.domain[1], count))

        def fmt(value: float) -> str:
            if value == 0:
                value = 0.0  # no "-0" labels
            return f"{value:,.{precision}f}"

        return fmt

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.range})"


def extent(values: Iterable[float]) -> Tuple[float, float]:
    vals = list(values)
    if not vals:
        raise ValueError("extent() of an empty sequence")
    return min(vals), max(vals)


# ---------------------------------------------------------------------------
# Discrete
# ---------------------------------------------------------------------------
class BandScale:
    """
    Categories in equal-width slots.

    `padding` sets both inner padding (gap between bands, as a fraction of the
    step) and outer padding (space before the first and after the last band,
    in steps).
    """

    def __init__(
        self,
        domain: Iterable[Any],
        range_: Sequence[float] = (0.0, 1.0),
        padding: float = 0.0,
        padding_inner: Optional[float] = None,
        padding_outer: Optional[float] = None,
        align: float = 0.5,
    ) -> None:
        self.domain: List[Any] = unique_values(domain)
        self.range: Tuple[float, float] = (float(range_[0]), float(range_[1]))
        self.padding_inner = padding if padding_inner is None else padding_inner
        self.padding_outer = padding if padding_outer is None else padding_outer
        self.align = align
        self._positions: Dict[Hashable, float] = {}
        self._rescale()

    def _rescale(self) -> None:
        n = len(self.domain)
        r0, r1 = self.range
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)
        step = (stop - start) / max(1.0, n - self.padding_inner + self.padding_outer * 2)
        start += (stop - start - step * (n - self.padding_inner)) * self.align
        self.step = step
        self.bandwidth = step * (1 - self.padding_inner)
        values = [start + step * i for i in range(n)]
        if reverse:
            values.reverse()
        self._positions = {category_key(v): pos for v, pos in zip(self.domain, values)}

    def __call__(self, value: Any) -> Optional[float]:
        """Start of the band for `value`, or None if it is not in the domain."""
        return self._positions.get(category_key(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self.domain)}, range={self.range}, step={self.step:.3f})"


class PointScale(BandScale):
    """
    Categories at evenly spaced points. `padding` is the outer padding in steps.
    """

    def __init__(
        self,
        domain: Iterable[Any],
        range_: Sequence[float] = (0.0, 1.0),
        padding: float = 0.0,
        align: float = 0.5,
    ) -> None:
        super().__init__(domain, range_, padding_inner=1.0, padding_outer=padding, align=align)


class OrdinalScale:
    """
    Explicit category -> output mapping. Outputs cycle through `range_`; keys not
    yet in the domain are appended on first use, so assignments stay stable.
    """

    def __init__(self, range_: Sequence[str], domain: Iterable[Any] = ()) -> None:
        if not range_:
            raise ValueError("OrdinalScale needs a non-empty range")
        self.range: List[str] = list(range_)
        self.domain: List[Any] = []
        self._index: Dict[Hashable, int] = {}
        for value in domain:
            self._add(value)

    def _add(self, value: Any) -> int:
        key = category_key(value)
        if key not in self._index:
            self._index[key] = len(self.domain)
            self.domain.append(value)
        return self._index[key]

    def __call__(self, value: Any) -> str:
        return self.range[self._add(value) % len(self.range)]
