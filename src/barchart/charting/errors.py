"""Error kinds raised by the render pipeline.

All of them are caller-input errors: they are raised synchronously from
``BarChart.render`` and never retried.
"""

from __future__ import annotations

__all__ = ["ChartError", "MissingDataError", "DataError", "ConfigError"]


class ChartError(Exception):
    """Base class for chart rendering failures."""


class MissingDataError(ChartError, ValueError):
    """Raised when render is called without a dataset."""

    def __init__(self, message: str = "Missing Data!") -> None:
        super().__init__(message)


class DataError(ChartError, ValueError):
    """Raised when the dataset cannot produce a scale (empty, no numeric maximum)."""


class ConfigError(ChartError, ValueError):
    """Raised when margins leave no positive plotting area."""
