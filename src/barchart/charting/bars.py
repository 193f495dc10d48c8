"""Bar enter + rise animation.

Every draw creates fresh bars keyed by array position. Bars enter at the
zero baseline (``y = linear(0)``, ``height = 0``) with their final ``x`` and
``width`` already set; that frame is pushed to the canvas synchronously,
then one transition raises ``y``/``height`` to the data-driven target.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from ..config import settings
from ..design.motion import AttributeTween, Easing, Transition, ease_linear
from .fields import MISSING, numeric_values
from .scales import BandScale, LinearScale
from .types import BarVisual, Canvas, Dataset, PlottingArea, TransitionScheduler

__all__ = ["BarAnimator"]

log = logging.getLogger(__name__)


class BarAnimator:
    def __init__(
        self,
        duration_ms: int = settings.TRANSITION_DURATION_MS,
        easing: Easing = ease_linear,
    ) -> None:
        if duration_ms < 0:
            raise ValueError("duration_ms must be >= 0")
        self.duration_ms = duration_ms
        self.easing = easing

    def enter(
        self,
        canvas: Canvas,
        dataset: Dataset,
        x_field: str,
        band: BandScale,
        linear: LinearScale,
        area: PlottingArea,
    ) -> List[BarVisual]:
        baseline = linear(0)
        bars: List[BarVisual] = []
        for i, record in enumerate(dataset):
            bar = BarVisual(
                index=i,
                datum=record,
                x=band(record.get(x_field, MISSING)),
                y=baseline,
                width=band.bandwidth,
                height=area.chart_height - baseline,
            )
            canvas.add_bar(bar)
            bars.append(bar)
        canvas.refresh()
        return bars

    def settled_geometry(
        self, bar: BarVisual, y_field: str, linear: LinearScale, area: PlottingArea
    ) -> Tuple[float, float]:
        """Return the target ``(y, height)`` for a bar."""
        value = numeric_values([bar.datum.get(y_field, MISSING)])
        if not value:
            # non-numeric value: stay on the baseline instead of going NaN
            baseline = linear(0)
            return baseline, area.chart_height - baseline
        y = linear(value[0])
        return y, area.chart_height - y

    def animate(
        self,
        canvas: Canvas,
        scheduler: TransitionScheduler,
        dataset: Dataset,
        x_field: str,
        y_field: str,
        band: BandScale,
        linear: LinearScale,
        area: PlottingArea,
        *,
        on_finish: Optional[Callable[[Transition], None]] = None,
    ) -> Tuple[List[BarVisual], Transition]:
        bars = self.enter(canvas, dataset, x_field, band, linear, area)
        tweens: List[AttributeTween] = []
        for bar in bars:
            y, height = self.settled_geometry(bar, y_field, linear, area)
            tweens.append(AttributeTween(bar, "y", bar.y, y))
            tweens.append(AttributeTween(bar, "height", bar.height, height))

        def _push_frame(_t: Transition) -> None:
            for bar in bars:
                canvas.update_bar(bar)
            canvas.refresh()

        transition = Transition(
            tweens,
            self.duration_ms,
            easing=self.easing,
            on_frame=_push_frame,
            on_finish=on_finish,
        )
        log.debug("Starting %d ms rise for %d bar(s)", self.duration_ms, len(bars))
        scheduler.start(transition)
        return bars, transition
