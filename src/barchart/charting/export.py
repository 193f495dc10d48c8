"""Chart export utilities."""

from __future__ import annotations

from ..config import settings
from .backends import MatplotlibCanvas

__all__ = ["export_chart"]


def export_chart(canvas, path: str, *, format: str = "png", dpi: int = settings.EXPORT_DPI) -> None:
    """Write the canvas' current frame to disk.

    Args:
        canvas: A MatplotlibCanvas that has been rendered into.
        path: Destination file path (existing directory required).
        format: 'png' or 'svg'.
        dpi: Raster resolution for PNG.
    """
    if not isinstance(canvas, MatplotlibCanvas):
        raise ValueError("Unsupported canvas type for export")
    fmt = format.lower()
    if fmt not in {"png", "svg"}:
        raise ValueError("format must be 'png' or 'svg'")
    canvas.figure.savefig(path, format=fmt, dpi=dpi if fmt == "png" else None)
