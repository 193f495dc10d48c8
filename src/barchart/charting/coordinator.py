"""Chart coordinator: the render entry point.

``BarChart.render(config, dataset)`` runs the full pipeline on every call
(no diffing):

    validate -> plotting area -> extract X/Y -> scales -> reset canvas
             -> axes -> bars (enter, then transition) -> tooltip hand-off

Everything that can fail on caller input (missing dataset, bad margins,
empty or non-numeric series) runs before the canvas is touched, so a failed
render leaves the previous frame as it was. A new render cancels the
chart's own in-flight transition (a scheduler may be shared between charts);
the new bars always rise from the zero baseline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..config import settings
from ..design.motion import Easing, Transition, get_easing
from ..design.scheduler import ManualScheduler
from ..services.event_bus import ChartEvent, EventBus
from .axes import render_axes
from .bars import BarAnimator
from .errors import ChartError, MissingDataError
from .fields import extract_field
from .geometry import compute_plotting_area
from .scales import BandScale, LinearScale, build_band_scale, build_linear_scale
from .types import (
    BarVisual,
    Canvas,
    ChartConfig,
    Dataset,
    PlottingArea,
    TooltipLabels,
    TooltipService,
    TransitionScheduler,
)

__all__ = ["BarChart", "RenderResult"]

log = logging.getLogger(__name__)


@dataclass
class RenderResult:
    area: PlottingArea
    x_scale: BandScale
    y_scale: LinearScale
    bars: List[BarVisual]
    transition: Transition


class BarChart:
    """Owns one drawing surface and renders bar charts into it.

    Usage:
        chart = BarChart(MatplotlibCanvas(), scheduler=QtTransitionScheduler())
        chart.render(ChartConfig(x_field="cat", y_field="val"), rows)
        ...
        chart.close()  # then drop the instance
    """

    def __init__(
        self,
        canvas: Canvas,
        *,
        scheduler: TransitionScheduler | None = None,
        tooltip_service: TooltipService | None = None,
        event_bus: EventBus | None = None,
        duration_ms: int = settings.TRANSITION_DURATION_MS,
        easing: Easing | None = None,
        round_scales: bool = False,
    ) -> None:
        self._canvas = canvas
        self._scheduler: TransitionScheduler = scheduler or ManualScheduler()
        self._tooltips = tooltip_service
        self._bus = event_bus
        self._animator = BarAnimator(duration_ms, easing or get_easing(settings.TRANSITION_EASING))
        self._round = round_scales
        self._area: PlottingArea | None = None
        self._last: RenderResult | None = None

    @property
    def canvas(self) -> Canvas:
        return self._canvas

    @property
    def scheduler(self) -> TransitionScheduler:
        return self._scheduler

    @property
    def plotting_area(self) -> PlottingArea | None:
        return self._area

    @property
    def last_render(self) -> RenderResult | None:
        return self._last

    def render(self, config: ChartConfig, dataset: Optional[Dataset]) -> RenderResult:
        if dataset is None:
            missing = MissingDataError()
            log.warning("Render rejected: %s", missing)
            self._publish(ChartEvent.RENDER_FAILED, {"error": "MissingDataError", "message": str(missing)})
            raise missing
        self._publish(ChartEvent.RENDER_STARTED, {"records": len(dataset)})
        try:
            area = compute_plotting_area(config.width, config.height, config.margins)
            x_values = extract_field(dataset, config.x_field)
            y_values = extract_field(dataset, config.y_field)
            band = build_band_scale(x_values, area.chart_width, round=self._round)
            linear = build_linear_scale(y_values, area.chart_height, round=self._round)
        except ChartError as exc:
            log.warning("Render rejected: %s", exc)
            self._publish(ChartEvent.RENDER_FAILED, {"error": type(exc).__name__, "message": str(exc)})
            raise
        self._area = area

        # Drawing starts here; last draw wins over this chart's running rise.
        self._cancel_own_transition()
        if self._tooltips is not None:
            self._tooltips.detach()
        self._canvas.reset(config, area)
        render_axes(self._canvas, area, config.margins, band, linear, config.x_field, config.y_field)
        bars, transition = self._animator.animate(
            self._canvas,
            self._scheduler,
            dataset,
            config.x_field,
            config.y_field,
            band,
            linear,
            area,
            on_finish=self._on_transition_finished,
        )
        if self._tooltips is not None:
            self._tooltips.attach(bars, TooltipLabels(config.x_field, config.y_field), self._canvas)

        self._last = RenderResult(area=area, x_scale=band, y_scale=linear, bars=bars, transition=transition)
        log.debug(
            "Rendered %d bar(s) into %gx%g plotting area",
            len(bars),
            area.chart_width,
            area.chart_height,
        )
        self._publish(ChartEvent.RENDER_COMPLETED, {"bars": len(bars), "categories": len(band.domain)})
        return self._last

    def close(self) -> None:
        """Stop this chart's animation and clear the surface; the owner drops the instance afterwards."""
        self._cancel_own_transition()
        if self._tooltips is not None:
            self._tooltips.detach()
        self._canvas.clear()
        self._last = None
        self._area = None

    def _cancel_own_transition(self) -> None:
        # the scheduler may be shared with other charts; leave theirs running
        if self._last is not None:
            self._scheduler.cancel(self._last.transition)

    def _on_transition_finished(self, transition: Transition) -> None:
        self._publish(ChartEvent.TRANSITION_COMPLETED, {"bars": len(transition.targets())})

    def _publish(self, event: ChartEvent, payload: dict) -> None:
        if self._bus is not None:
            self._bus.publish(event, payload)
