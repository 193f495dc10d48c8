"""Motion design helpers: easings, transitions and headless scheduling.

The Qt scheduler lives in ``barchart.design.animator`` and is imported
explicitly so that importing this package never pulls in PyQt6.
"""

from .motion import (  # noqa: F401
    AttributeTween,
    Transition,
    cubic_bezier_easing,
    ease_linear,
    get_easing,
    parse_cubic_bezier,
)
from .scheduler import ManualScheduler  # noqa: F401
