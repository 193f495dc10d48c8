"""Axis rendering: a categorical bottom axis and a linear left axis.

Each call appends two axis groups and two labels to the canvas; clearing
old ones before a redraw is the coordinator's responsibility.
"""

from __future__ import annotations

from typing import Tuple

from ..config import settings
from .scales import BandScale, LinearScale
from .types import AxisSpec, Canvas, Margins, PlottingArea, TextLabel

__all__ = ["x_axis", "y_axis", "render_axes"]


def x_axis(area: PlottingArea, margins: Margins, band: BandScale, x_field: str) -> Tuple[AxisSpec, TextLabel]:
    axis = AxisSpec(
        orient="bottom",
        css_class="x-axis",
        offset=(0.0, area.chart_height),
        extent=band.range,
        ticks=band.ticks(),
    )
    label = TextLabel(
        text=x_field,
        x=area.chart_width / 2,
        y=area.chart_height + margins.bottom - settings.X_LABEL_OFFSET,
    )
    return axis, label


def y_axis(area: PlottingArea, margins: Margins, linear: LinearScale, y_field: str) -> Tuple[AxisSpec, TextLabel]:
    axis = AxisSpec(
        orient="left",
        css_class="y-axis",
        offset=(0.0, 0.0),
        extent=linear.range,
        ticks=linear.ticks(),
    )
    # Rotated -90 deg: the frame's x runs up the screen, so -h/2 is the vertical middle
    label = TextLabel(
        text=y_field,
        x=-area.chart_height / 2,
        y=-margins.left,
        rotation=-90.0,
        anchor="middle",
        dy=1.0,
    )
    return axis, label


def render_axes(
    canvas: Canvas,
    area: PlottingArea,
    margins: Margins,
    band: BandScale,
    linear: LinearScale,
    x_field: str,
    y_field: str,
) -> None:
    for axis, label in (
        x_axis(area, margins, band, x_field),
        y_axis(area, margins, linear, y_field),
    ):
        canvas.add_axis(axis)
        canvas.add_label(label)
