from apps.BezierCurve.curve.bezier import (
    BezierDegree,
    ContractViolation,
    bezier_curve,
    point_at,
    sample_curve,
)
from apps.BezierCurve.curve.defaults import default_layout
from apps.BezierCurve.curve.handles import HandleLayout, HandleRole

__all__ = [
    "BezierDegree",
    "ContractViolation",
    "HandleLayout",
    "HandleRole",
    "bezier_curve",
    "default_layout",
    "point_at",
    "sample_curve",
]
