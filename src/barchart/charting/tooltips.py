"""Hover tooltips for bars drawn on a ``MatplotlibCanvas``."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from .backends import MatplotlibCanvas
from .fields import MISSING
from .types import BarVisual, Canvas, TooltipLabels

__all__ = ["MatplotlibTooltipService"]


class MatplotlibTooltipService:
    """Shows '<x field>: <x>' / '<y field>: <y>' over the bar under the cursor.

    Re-attaching (every render) drops the previous annotation and event
    connection first, so tooltips never point at discarded bars.
    """

    def __init__(self) -> None:
        self._canvas: Optional[MatplotlibCanvas] = None
        self._bars: List[BarVisual] = []
        self._labels: Optional[TooltipLabels] = None
        self._annot: Any = None
        self._cid: Optional[int] = None

    @property
    def annotation(self) -> Any:
        return self._annot

    def attach(self, bars: Sequence[BarVisual], labels: TooltipLabels, canvas: Optional[Canvas]) -> None:
        if not isinstance(canvas, MatplotlibCanvas):
            raise TypeError("MatplotlibTooltipService requires a MatplotlibCanvas")
        self.detach()
        annot = canvas.axes.annotate(
            "",
            xy=(0, 0),
            xytext=(10, -10),
            textcoords="offset points",
            bbox={"boxstyle": "round", "fc": "w", "alpha": 0.8},
            annotation_clip=False,
        )
        annot.set_visible(False)
        self._canvas = canvas
        self._bars = list(bars)
        self._labels = labels
        self._annot = annot
        self._cid = canvas.figure.canvas.mpl_connect("motion_notify_event", self._on_motion)

    def detach(self) -> None:
        if self._canvas is not None and self._cid is not None:
            self._canvas.figure.canvas.mpl_disconnect(self._cid)
        if self._annot is not None and self._annot.axes is not None:
            self._annot.remove()
        self._canvas = None
        self._bars = []
        self._labels = None
        self._annot = None
        self._cid = None

    def text_for(self, bar: BarVisual) -> str:
        if self._labels is None:
            return ""
        x_key, y_key = self._labels.x_label, self._labels.y_label
        x_val = bar.datum.get(x_key, MISSING)
        y_val = bar.datum.get(y_key, MISSING)
        return f"{x_key}: {x_val}\n{y_key}: {y_val}"

    def bar_at(self, x: float, y: float) -> Optional[BarVisual]:
        """Return the bar whose current rectangle contains plotting-area point (x, y)."""
        for bar in self._bars:
            top, bottom = sorted((bar.y, bar.y + bar.height))
            if bar.x <= x <= bar.x + bar.width and top <= y <= bottom:
                return bar
        return None

    def _on_motion(self, event) -> None:
        if self._canvas is None or self._annot is None:
            return
        annot = self._annot
        was_visible = annot.get_visible()
        bar = None
        if event.inaxes is self._canvas.axes and event.xdata is not None:
            bar = self.bar_at(event.xdata, event.ydata)
        if bar is not None:
            annot.xy = (bar.x + bar.width / 2, bar.y)
            annot.set_text(self.text_for(bar))
            annot.set_visible(True)
            self._canvas.refresh()
        elif was_visible:
            annot.set_visible(False)
            self._canvas.refresh()
