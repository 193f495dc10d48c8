"""In-memory canvas that records every drawing call."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..charting.types import AxisSpec, BarVisual, ChartConfig, PlottingArea, TextLabel


@dataclass(frozen=True)
class CanvasCall:
    op: str
    arg: Any = None


class RecordingCanvas:
    """Canvas double keeping both a call log and the current scene.

    ``calls`` is the full history across renders; ``axes`` / ``labels`` /
    ``bars`` describe only what is on the surface now. ``frames`` stores a
    snapshot of bar geometry at every ``refresh()``.
    """

    def __init__(self) -> None:
        self.calls: List[CanvasCall] = []
        self.config: Optional[ChartConfig] = None
        self.area: Optional[PlottingArea] = None
        self.axes: List[AxisSpec] = []
        self.labels: List[TextLabel] = []
        self.bars: Dict[int, BarVisual] = {}
        self.frames: List[List[Tuple[float, float, float, float]]] = []

    @property
    def drawing_calls(self) -> List[CanvasCall]:
        return [c for c in self.calls if c.op != "refresh"]

    def ops(self) -> List[str]:
        return [c.op for c in self.calls]

    def reset(self, config: ChartConfig, area: PlottingArea) -> None:
        self.calls.append(CanvasCall("reset", (config, area)))
        self._wipe()
        self.config = config
        self.area = area

    def clear(self) -> None:
        self.calls.append(CanvasCall("clear"))
        self._wipe()
        self.config = None
        self.area = None

    def add_axis(self, axis: AxisSpec) -> None:
        self.calls.append(CanvasCall("add_axis", axis))
        self.axes.append(axis)

    def add_label(self, label: TextLabel) -> None:
        self.calls.append(CanvasCall("add_label", label))
        self.labels.append(label)

    def add_bar(self, bar: BarVisual) -> None:
        self.calls.append(CanvasCall("add_bar", copy.copy(bar)))
        self.bars[bar.index] = copy.copy(bar)

    def update_bar(self, bar: BarVisual) -> None:
        if bar.index not in self.bars:
            raise KeyError(f"update for unknown bar {bar.index}")
        self.calls.append(CanvasCall("update_bar", copy.copy(bar)))
        self.bars[bar.index] = copy.copy(bar)

    def refresh(self) -> None:
        self.calls.append(CanvasCall("refresh"))
        self.frames.append([(b.x, b.y, b.width, b.height) for _, b in sorted(self.bars.items())])

    def _wipe(self) -> None:
        self.axes = []
        self.labels = []
        self.bars = {}
