"""barchart public API.

Curated, intentionally small surface: configuration types, the ``BarChart``
coordinator and its error kinds. Backends (``barchart.charting.backends``),
the Qt scheduler (``barchart.design.animator``) and export helpers are
imported from their modules so that importing ``barchart`` never pulls in
PyQt6.
"""

from __future__ import annotations

from .charting import (  # noqa: F401
    BarChart,
    ChartConfig,
    ChartError,
    ConfigError,
    DataError,
    Margins,
    MissingDataError,
    RenderResult,
)
from .design import ManualScheduler  # noqa: F401
from .services import ChartEvent, EventBus  # noqa: F401

__version__ = "0.3.0"
