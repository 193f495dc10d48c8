"""Global configuration and defaults for chart rendering."""

from __future__ import annotations

import os
from typing import Final, Mapping

DEFAULT_WIDTH: Final = 400
DEFAULT_HEIGHT: Final = 400
DEFAULT_MARGINS: Final[Mapping[str, int]] = {"top": 60, "right": 60, "bottom": 60, "left": 60}

# Bar rise animation; linear easing keeps the growth rate constant over the interval
TRANSITION_DURATION_MS: Final = int(os.environ.get("BARCHART_TRANSITION_MS", "880"))
TRANSITION_EASING: Final = os.environ.get("BARCHART_TRANSITION_EASING", "linear")

BAR_COLOR: Final = os.environ.get("BARCHART_BAR_COLOR", "#4E79A7")
AXIS_COLOR: Final = "#222222"

DEFAULT_DPI: Final = 100
EXPORT_DPI: Final = 120
X_LABEL_OFFSET: Final = 5  # px above the bottom edge of the margin
