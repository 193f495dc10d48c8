"""Testing utilities for headless chart verification.

This subpackage avoids importing PyQt so pipeline tests can run headless
against a pure in-memory canvas.
"""

from __future__ import annotations

__all__ = ["RecordingCanvas", "CanvasCall"]

from .recording import CanvasCall, RecordingCanvas
