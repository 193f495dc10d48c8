"""Core charting types.

Value objects flowing through the render pipeline plus the structural
protocols of its external collaborators (drawing canvas, transition
scheduler, tooltip service). Nothing here imports matplotlib or Qt so the
pipeline stays headless-testable.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, Optional, Protocol, Sequence, Tuple

from ..config import settings
from .errors import ConfigError

if TYPE_CHECKING:  # pragma: no cover
    from ..design.motion import Transition

Record = Mapping[str, Any]
Dataset = Sequence[Record]


@dataclass(frozen=True)
class Margins:
    top: float = settings.DEFAULT_MARGINS["top"]
    right: float = settings.DEFAULT_MARGINS["right"]
    bottom: float = settings.DEFAULT_MARGINS["bottom"]
    left: float = settings.DEFAULT_MARGINS["left"]

    @classmethod
    def from_mapping(cls, values: Mapping[str, float]) -> "Margins":
        unknown = set(values) - {"top", "right", "bottom", "left"}
        if unknown:
            raise ConfigError(f"Unknown margin keys: {sorted(unknown)}")
        return cls(**values)


@dataclass(frozen=True)
class ChartConfig:
    """Settings for one render pass.

    Attributes:
        width / height: Total surface size in pixels, margins included.
        margins: Space reserved around the plotting area for axes and labels.
        x_field: Record key holding the categorical value.
        y_field: Record key holding the numeric value.
    """

    x_field: str
    y_field: str
    width: float = settings.DEFAULT_WIDTH
    height: float = settings.DEFAULT_HEIGHT
    margins: Margins = field(default_factory=Margins)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ChartConfig":
        data = dict(values)
        margins = data.pop("margins", None)
        if isinstance(margins, Mapping):
            data["margins"] = Margins.from_mapping(margins)
        elif margins is not None:
            data["margins"] = margins
        return cls(**data)


@dataclass(frozen=True)
class PlottingArea:
    chart_width: float
    chart_height: float


@dataclass
class BarVisual:
    """One rendered bar; geometry is in plotting-area pixels (y grows downward)."""

    index: int
    datum: Record
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Tick:
    position: float
    label: str


@dataclass(frozen=True)
class AxisSpec:
    """An axis group: ``orient`` is 'bottom' or 'left', ``offset`` its translate."""

    orient: str
    css_class: str
    offset: Tuple[float, float]
    extent: Tuple[float, float]
    ticks: Tuple[Tick, ...]


@dataclass(frozen=True)
class TextLabel:
    """Text placed at ``(x, y)`` inside a frame rotated by ``rotation`` degrees.

    Rotation follows the SVG convention (screen y grows downward, so -90 turns
    the text counter-clockwise). ``dy`` shifts the baseline along the rotated
    y axis in ems.
    """

    text: str
    x: float
    y: float
    rotation: float = 0.0
    anchor: str = "middle"
    dy: float = 0.0

    def screen_position(self) -> Tuple[float, float]:
        """Return the anchor point in unrotated plotting-area coordinates."""
        theta = math.radians(self.rotation)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        sx = self.x * cos_t - self.y * sin_t
        sy = self.x * sin_t + self.y * cos_t
        # snap float noise from cos(90deg) so labels land on whole pixels
        return round(sx, 9) + 0.0, round(sy, 9) + 0.0


@dataclass(frozen=True)
class TooltipLabels:
    x_label: str
    y_label: str


class Canvas(Protocol):  # pragma: no cover - structural only
    """Drawing sink the pipeline renders into."""

    def reset(self, config: ChartConfig, area: PlottingArea) -> None: ...

    def clear(self) -> None: ...

    def add_axis(self, axis: AxisSpec) -> None: ...

    def add_label(self, label: TextLabel) -> None: ...

    def add_bar(self, bar: BarVisual) -> None: ...

    def update_bar(self, bar: BarVisual) -> None: ...

    def refresh(self) -> None: ...


class TransitionScheduler(Protocol):  # pragma: no cover - structural only
    """Timed driver for transitions (event loop, timer or manual clock)."""

    def start(self, transition: "Transition") -> None: ...

    def cancel(self, transition: "Transition") -> None: ...

    def cancel_all(self) -> None: ...


class TooltipService(Protocol):  # pragma: no cover - structural only
    def attach(
        self, bars: Sequence[BarVisual], labels: TooltipLabels, canvas: Optional[Canvas]
    ) -> None: ...

    def detach(self) -> None: ...
