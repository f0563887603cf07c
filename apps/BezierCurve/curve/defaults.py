from __future__ import annotations

from apps.BezierCurve.curve.bezier import BezierDegree
from apps.BezierCurve.curve.handles import HandleLayout

DEFAULT_SEGMENT_COUNT = 80
MIN_SEGMENT_COUNT = 1
MAX_SEGMENT_COUNT = 300
DEFAULT_CANVAS_WIDTH = 400.0
DEFAULT_CANVAS_HEIGHT = 300.0


def default_layout() -> HandleLayout:
    return HandleLayout(
        anchor1=(0.2, 0.7),
        anchor2=(0.8, 0.7),
        control1=(0.3, 0.3),
        control2=(0.7, 0.3),
    )


def default_degree() -> BezierDegree:
    return BezierDegree.CUBIC
