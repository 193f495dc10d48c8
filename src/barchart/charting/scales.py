"""Band and linear scales.

Both scales are immutable and rebuilt from scratch on every draw; nothing
is carried across renders.

Band scale: distinct categories (first-seen order) partition ``[0, width]``
into equal, gapless bands. ``round=True`` mirrors d3's ``rangeRound``:
the step is floored to a whole pixel and the leftover is split evenly on
both ends.

Linear scale: domain ``[0, max(values)]`` mapped onto ``[height, 0]`` so
larger values sit higher on screen. The domain always starts at zero so
bars grow from a true baseline.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from matplotlib.ticker import MaxNLocator

from .errors import DataError
from .fields import numeric_values
from .types import Tick

__all__ = ["BandScale", "LinearScale", "build_band_scale", "build_linear_scale"]


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


@dataclass(frozen=True)
class BandScale:
    domain: Tuple[Any, ...]
    range: Tuple[float, float]
    start: float
    step: float
    bandwidth: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {v: i for i, v in enumerate(self.domain)})

    def __call__(self, value: Any) -> float:
        index: Dict[Any, int] = self._index  # type: ignore[attr-defined]
        if value not in index:
            raise KeyError(f"Value not in band domain: {value!r}")
        return self.start + self.step * index[value]

    def ticks(self) -> Tuple[Tick, ...]:
        """One tick per category, centred on its band."""
        half = self.bandwidth / 2
        return tuple(Tick(self(v) + half, str(v)) for v in self.domain)


@dataclass(frozen=True)
class LinearScale:
    domain: Tuple[float, float]
    range: Tuple[float, float]
    round: bool = False

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        out = r0 + (float(value) - d0) * (r1 - r0) / (d1 - d0)
        return _round_half_up(out) if self.round else out

    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        return d0 + (float(pixel) - r0) * (d1 - d0) / (r1 - r0)

    def tick_values(self, count: int = 10) -> List[float]:
        lo, hi = sorted(self.domain)
        locator = MaxNLocator(nbins=count, steps=[1, 2, 5, 10])
        eps = (hi - lo) * 1e-9
        return [float(t) for t in locator.tick_values(lo, hi) if lo - eps <= t <= hi + eps]

    def ticks(self, count: int = 10) -> Tuple[Tick, ...]:
        return tuple(Tick(self(t), f"{t:g}") for t in self.tick_values(count))


def _distinct(values: Iterable[Any]) -> Tuple[Any, ...]:
    seen: Dict[Any, None] = {}
    for v in values:
        seen.setdefault(v, None)
    return tuple(seen)


def build_band_scale(values: Sequence[Any], chart_width: float, *, round: bool = False) -> BandScale:
    domain = _distinct(values)
    if not domain:
        raise DataError("Cannot build a band scale from an empty dataset")
    n = len(domain)
    start = 0.0
    step = chart_width / n
    if round:
        step = float(math.floor(step))
        start = _round_half_up((chart_width - step * n) / 2)
    return BandScale(domain=domain, range=(0.0, float(chart_width)), start=start, step=step, bandwidth=step)


def build_linear_scale(values: Sequence[Any], chart_height: float, *, round: bool = False) -> LinearScale:
    numbers = numeric_values(values)
    if not numbers:
        raise DataError("Y series has no numeric values; cannot build a linear domain")
    top = max(numbers)
    if top <= 0:
        raise DataError(f"Y series maximum must be > 0 for a zero-anchored domain, got {top:g}")
    return LinearScale(domain=(0.0, top), range=(float(chart_height), 0.0), round=round)
