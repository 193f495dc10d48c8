"""Bar chart rendering pipeline.

Components, leaves first: geometry -> fields -> scales -> axes -> bars,
wired together by ``BarChart`` (coordinator). Drawing goes through the
``Canvas`` protocol; ``MatplotlibCanvas`` is the concrete backend and
``barchart.testing.RecordingCanvas`` an in-memory one.
"""

from .coordinator import BarChart, RenderResult  # noqa: F401
from .errors import ChartError, ConfigError, DataError, MissingDataError  # noqa: F401
from .fields import MISSING, extract_field, numeric_values  # noqa: F401
from .geometry import compute_plotting_area  # noqa: F401
from .scales import BandScale, LinearScale, build_band_scale, build_linear_scale  # noqa: F401
from .types import (  # noqa: F401
    AxisSpec,
    BarVisual,
    ChartConfig,
    Margins,
    PlottingArea,
    TextLabel,
    Tick,
    TooltipLabels,
)
