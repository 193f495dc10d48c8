"""Motion utilities: easing curves and attribute transitions.

Easing names map either to a plain function (``linear``) or to a CSS-like
``cubic-bezier(x1, y1, x2, y2)`` string. A ``Transition`` tweens numeric
attributes of target objects; it holds no clock of its own; a scheduler
(manual, Qt, ...) feeds it elapsed time or progress.

Does not require PyQt imports for testability.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

__all__ = [
    "CubicBezier",
    "Easing",
    "ease_linear",
    "parse_cubic_bezier",
    "cubic_bezier_easing",
    "get_easing",
    "AttributeTween",
    "Transition",
]

CubicBezier = Tuple[float, float, float, float]
Easing = Callable[[float], float]


def ease_linear(t: float) -> float:
    return t


EASING_TOKENS: Dict[str, str] = {
    "ease": "cubic-bezier(0.25, 0.1, 0.25, 1.0)",
    "ease-in": "cubic-bezier(0.42, 0, 1.0, 1.0)",
    "ease-out": "cubic-bezier(0, 0, 0.58, 1.0)",
    "ease-in-out": "cubic-bezier(0.42, 0, 0.58, 1.0)",
}


def parse_cubic_bezier(spec: str) -> CubicBezier:
    """Parse a CSS-like cubic-bezier string into numeric tuple.

    Expected format: 'cubic-bezier(x1, y1, x2, y2)'. Whitespace tolerated.
    """
    s = spec.strip().lower()
    if not s.startswith("cubic-bezier(") or not s.endswith(")"):
        raise ValueError(f"Invalid cubic-bezier format: {spec}")
    inner = s[len("cubic-bezier(") : -1]
    parts = [p.strip() for p in inner.split(",")]
    if len(parts) != 4:
        raise ValueError(f"cubic-bezier requires 4 components, got {len(parts)}: {spec}")
    try:
        x1, y1, x2, y2 = (float(p) for p in parts)
    except ValueError as e:
        raise ValueError(f"Non-numeric cubic-bezier value in {spec}") from e
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise ValueError(f"cubic-bezier x components must lie in [0, 1]: {spec}")
    return x1, y1, x2, y2


def cubic_bezier_easing(x1: float, y1: float, x2: float, y2: float) -> Easing:
    """Return an easing function for the curve through (0,0), (x1,y1), (x2,y2), (1,1)."""

    def _bezier(a1: float, a2: float, s: float) -> float:
        return 3 * a1 * (1 - s) ** 2 * s + 3 * a2 * (1 - s) * s**2 + s**3

    def _solve_s(x: float) -> float:
        # x(s) is monotonic for x1, x2 in [0, 1]; bisection is enough at UI precision
        lo, hi = 0.0, 1.0
        for _ in range(40):
            mid = (lo + hi) / 2
            if _bezier(x1, x2, mid) < x:
                lo = mid
            else:
                hi = mid
        return (lo + hi) / 2

    def _ease(t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return _bezier(y1, y2, _solve_s(t))

    return _ease


def get_easing(name: str) -> Easing:
    if name == "linear":
        return ease_linear
    raw = EASING_TOKENS.get(name)
    if raw is None:
        raise KeyError(f"Unknown easing token: {name}")
    return cubic_bezier_easing(*parse_cubic_bezier(raw))


@dataclass
class AttributeTween:
    target: Any
    attr: str
    start: float
    end: float

    def value_at(self, eased: float) -> float:
        return self.start + (self.end - self.start) * eased


class Transition:
    """A set of attribute tweens sharing one duration and easing.

    ``apply(progress)`` writes interpolated values for a normalized progress
    in [0, 1] and then calls ``on_frame``; reaching 1.0 marks the transition
    finished and fires ``on_finish`` once. A cancelled transition ignores
    further frames, leaving targets wherever the last applied frame put them.
    """

    def __init__(
        self,
        tweens: Iterable[AttributeTween],
        duration_ms: int,
        *,
        easing: Easing = ease_linear,
        on_frame: Optional[Callable[["Transition"], None]] = None,
        on_finish: Optional[Callable[["Transition"], None]] = None,
    ) -> None:
        if duration_ms < 0:
            raise ValueError("duration_ms must be >= 0")
        self.tweens: List[AttributeTween] = list(tweens)
        self.duration_ms = int(duration_ms)
        self.easing = easing
        self.progress = 0.0
        self._on_frame = on_frame
        self._on_finish = on_finish
        self._finished = False
        self._cancelled = False

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def active(self) -> bool:
        return not (self._finished or self._cancelled)

    def targets(self) -> List[Any]:
        seen: Dict[int, Any] = {}
        for tw in self.tweens:
            seen.setdefault(id(tw.target), tw.target)
        return list(seen.values())

    def apply(self, progress: float) -> None:
        if not self.active:
            return
        p = min(1.0, max(0.0, float(progress)))
        eased = self.easing(p)
        for tw in self.tweens:
            setattr(tw.target, tw.attr, tw.value_at(eased))
        self.progress = p
        if self._on_frame is not None:
            self._on_frame(self)
        if p >= 1.0:
            self._finished = True
            if self._on_finish is not None:
                self._on_finish(self)

    def step(self, elapsed_ms: float) -> bool:
        """Apply the frame for ``elapsed_ms`` since start; return True once finished."""
        if self.duration_ms == 0:
            self.apply(1.0)
        else:
            self.apply(elapsed_ms / self.duration_ms)
        return self._finished

    def cancel(self) -> None:
        if self._finished:
            return
        self._cancelled = True
