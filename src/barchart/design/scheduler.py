"""Deterministic transition scheduler.

Advances transitions from an explicit clock instead of an event loop, so
headless renders (export, tests) can step or complete animations on demand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .motion import Transition

__all__ = ["ManualScheduler"]


@dataclass
class _Running:
    transition: Transition
    elapsed: float = 0.0


class ManualScheduler:
    """Scheduler driven by ``advance(ms)`` calls.

    Several charts may share one scheduler; each transition keeps its own
    elapsed time. Frame callbacks may start or cancel transitions while a
    step is in progress.

    Usage:
        scheduler = ManualScheduler()
        chart = BarChart(canvas, scheduler=scheduler)
        chart.render(config, rows)
        scheduler.advance(440)   # halfway through an 880 ms rise
        scheduler.finish_all()
    """

    def __init__(self) -> None:
        self._running: List[_Running] = []

    @property
    def active(self) -> List[Transition]:
        return [r.transition for r in self._running if r.transition.active]

    def start(self, transition: Transition) -> None:
        self._running.append(_Running(transition))
        # frame zero
        transition.step(0.0)
        self._prune()

    def advance(self, ms: float) -> None:
        if ms < 0:
            raise ValueError("ms must be >= 0")
        for entry in list(self._running):
            entry.elapsed += ms
            entry.transition.step(entry.elapsed)
        self._prune()

    def finish_all(self) -> None:
        for entry in list(self._running):
            entry.transition.apply(1.0)
        self._prune()

    def cancel(self, transition: Transition) -> None:
        transition.cancel()
        self._running = [r for r in self._running if r.transition is not transition]

    def cancel_all(self) -> None:
        for entry in self._running:
            entry.transition.cancel()
        self._running = []

    def _prune(self) -> None:
        self._running = [r for r in self._running if r.transition.active]
