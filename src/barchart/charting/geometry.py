"""Plotting-area geometry."""

from __future__ import annotations

from .errors import ConfigError
from .types import Margins, PlottingArea

__all__ = ["compute_plotting_area"]


def compute_plotting_area(width: float, height: float, margins: Margins) -> PlottingArea:
    """Return the area left for bars once margins are taken off.

    Raises ConfigError instead of clamping when margins are negative or
    leave no positive width/height.
    """
    for side in ("top", "right", "bottom", "left"):
        if getattr(margins, side) < 0:
            raise ConfigError(f"Margin '{side}' must be >= 0, got {getattr(margins, side)}")
    chart_width = width - margins.left - margins.right
    chart_height = height - margins.top - margins.bottom
    if chart_width <= 0 or chart_height <= 0:
        raise ConfigError(
            f"Margins leave no plotting area ({chart_width} x {chart_height}) "
            f"for a {width} x {height} chart"
        )
    return PlottingArea(chart_width=chart_width, chart_height=chart_height)
