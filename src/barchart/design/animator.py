"""Qt transition scheduler.

Drives ``Transition`` objects with PyQt6 ``QVariantAnimation`` so bar rises
run on the Qt event loop next to an embedded chart widget. Each animation
interpolates a plain 0.0 -> 1.0 progress value with a linear ``QEasingCurve``;
the transition applies its own easing on top, which keeps the headless and
Qt paths numerically identical.

The helpers return configured animation objects; tests can inspect
duration/easing or drive ``setCurrentTime`` without running an event loop.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from PyQt6.QtCore import QEasingCurve, QObject, QVariantAnimation

from .motion import Transition

__all__ = ["create_progress_animation", "QtTransitionScheduler"]

log = logging.getLogger(__name__)


def create_progress_animation(
    transition: Transition, parent: Optional[QObject] = None
) -> QVariantAnimation:
    anim = QVariantAnimation(parent)
    anim.setStartValue(0.0)
    anim.setEndValue(1.0)
    anim.setDuration(transition.duration_ms)
    anim.setEasingCurve(QEasingCurve(QEasingCurve.Type.Linear))
    anim.valueChanged.connect(lambda value: transition.apply(float(value)))
    return anim


class QtTransitionScheduler:
    """Scheduler running each transition as a ``QVariantAnimation``."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._parent = parent
        # keep python references alive while animations run
        self._running: List[Tuple[Transition, QVariantAnimation]] = []

    @property
    def animations(self) -> List[QVariantAnimation]:
        return [anim for _t, anim in self._running]

    def start(self, transition: Transition) -> None:
        if transition.duration_ms == 0:
            transition.apply(1.0)
            return
        anim = create_progress_animation(transition, self._parent)
        # valueChanged may not fire for the exact end value; force the final frame
        anim.finished.connect(lambda: self._on_finished(transition, anim))
        self._running.append((transition, anim))
        anim.start()

    def cancel(self, transition: Transition) -> None:
        transition.cancel()
        keep: List[Tuple[Transition, QVariantAnimation]] = []
        for t, anim in self._running:
            if t is transition:
                anim.stop()
            else:
                keep.append((t, anim))
        self._running = keep

    def cancel_all(self) -> None:
        for transition, anim in self._running:
            transition.cancel()
            anim.stop()
        if self._running:
            log.debug("Cancelled %d in-flight transition(s)", len(self._running))
        self._running.clear()

    def _on_finished(self, transition: Transition, anim: QVariantAnimation) -> None:
        transition.apply(1.0)
        self._running = [(t, a) for t, a in self._running if a is not anim]
