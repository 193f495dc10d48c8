"""Field extraction from loosely structured records."""

from __future__ import annotations

import enum
import math
from numbers import Real
from typing import Any, Iterable, List

from .types import Dataset

__all__ = ["MISSING", "extract_field", "numeric_values"]


class _Missing(enum.Enum):
    MISSING = "missing"

    def __repr__(self) -> str:
        return "MISSING"

    def __str__(self) -> str:
        return ""


# Returned for records lacking the requested key; it takes part in scales as a
# degenerate band entry and never crashes rendering.
MISSING = _Missing.MISSING


def extract_field(dataset: Dataset, field: str) -> List[Any]:
    """Return the value of ``field`` for each record, preserving order."""
    return [record.get(field, MISSING) for record in dataset]


def numeric_values(values: Iterable[Any]) -> List[float]:
    """Keep only finite real numbers (bools, NaN, infinities and MISSING are dropped)."""
    out: List[float] = []
    for v in values:
        if isinstance(v, bool) or not isinstance(v, Real):
            continue
        f = float(v)
        if not math.isfinite(f):
            continue
        out.append(f)
    return out
