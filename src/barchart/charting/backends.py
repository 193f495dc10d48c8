"""Matplotlib canvas backend.

Maps the pipeline's pixel-space drawing model onto a matplotlib ``Figure``:
the plotting area becomes an Axes placed exactly inside the margins, with
data limits ``[0, chart_width] x [chart_height, 0]`` so one data unit is one
pixel and y grows downward like the scales expect. Bars are ``Rectangle``
patches updated in place while a transition runs.

The figure renders headless (Agg) for export; ``widget()`` wraps it in a
``FigureCanvasQTAgg`` for embedding in a PyQt6 window.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from matplotlib.figure import Figure
from matplotlib.patches import Rectangle
from matplotlib.text import Text

from ..config import settings
from .types import AxisSpec, BarVisual, ChartConfig, PlottingArea, TextLabel

__all__ = ["MatplotlibCanvas"]

_ANCHOR_TO_HA = {"start": "left", "middle": "center", "end": "right"}


class MatplotlibCanvas:
    def __init__(
        self,
        *,
        dpi: int = settings.DEFAULT_DPI,
        bar_color: str = settings.BAR_COLOR,
        axis_color: str = settings.AXIS_COLOR,
        figure: Optional[Figure] = None,
    ) -> None:
        self.figure = figure if figure is not None else Figure(dpi=dpi)
        self.bar_color = bar_color
        self.axis_color = axis_color
        self._ax: Any = None
        self._patches: Dict[int, Rectangle] = {}
        self._labels: List[Text] = []

    @property
    def axes(self) -> Any:
        if self._ax is None:
            raise RuntimeError("Canvas has not been reset for a render yet")
        return self._ax

    @property
    def patches(self) -> List[Rectangle]:
        return [self._patches[i] for i in sorted(self._patches)]

    @property
    def labels(self) -> List[Text]:
        return list(self._labels)

    def patch_for(self, bar: BarVisual) -> Rectangle:
        return self._patches[bar.index]

    # Canvas protocol ---------------------------------------------------
    def reset(self, config: ChartConfig, area: PlottingArea) -> None:
        self.clear()
        fig = self.figure
        fig.set_size_inches(config.width / fig.dpi, config.height / fig.dpi)
        m = config.margins
        # add_axes takes (left, bottom, width, height) as figure fractions
        ax = fig.add_axes(
            (
                m.left / config.width,
                m.bottom / config.height,
                area.chart_width / config.width,
                area.chart_height / config.height,
            )
        )
        ax.set_xlim(0, area.chart_width)
        ax.set_ylim(area.chart_height, 0)
        for spine in ax.spines.values():
            spine.set_visible(False)
            spine.set_color(self.axis_color)
        ax.set_xticks([])
        ax.set_yticks([])
        ax.patch.set_alpha(0.0)
        self._ax = ax

    def clear(self) -> None:
        self.figure.clear()
        self._ax = None
        self._patches = {}
        self._labels = []

    def add_axis(self, axis: AxisSpec) -> None:
        ax = self.axes
        positions = [t.position for t in axis.ticks]
        labels = [t.label for t in axis.ticks]
        if axis.orient == "bottom":
            ax.spines["bottom"].set_visible(True)
            ax.set_xticks(positions, labels=labels)
        elif axis.orient == "left":
            ax.spines["left"].set_visible(True)
            ax.set_yticks(positions, labels=labels)
        else:
            raise ValueError(f"Unsupported axis orientation: {axis.orient}")
        ax.tick_params(colors=self.axis_color)

    def add_label(self, label: TextLabel) -> None:
        x, y = label.screen_position()
        text = self.axes.text(
            x,
            y,
            label.text,
            rotation=-label.rotation,  # matplotlib turns counter-clockwise for positive angles
            rotation_mode="anchor",
            ha=_ANCHOR_TO_HA.get(label.anchor, "center"),
            va="top" if label.dy > 0 else "baseline",
            color=self.axis_color,
            clip_on=False,
        )
        self._labels.append(text)

    def add_bar(self, bar: BarVisual) -> None:
        rect = Rectangle(
            (bar.x, bar.y),
            bar.width,
            bar.height,
            facecolor=self.bar_color,
            gid=f"bar-{bar.index}",
        )
        self.axes.add_patch(rect)
        self._patches[bar.index] = rect

    def update_bar(self, bar: BarVisual) -> None:
        rect = self._patches[bar.index]
        rect.set_xy((bar.x, bar.y))
        rect.set_width(bar.width)
        rect.set_height(bar.height)

    def refresh(self) -> None:
        self.figure.canvas.draw_idle()

    # Qt embedding ------------------------------------------------------
    def widget(self) -> Any:  # QWidget
        from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg  # local import keeps Qt optional

        return FigureCanvasQTAgg(self.figure)
