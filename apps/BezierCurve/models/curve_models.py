from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import numpy as np

from apps.BezierCurve.curve.bezier import BezierDegree, sample_curve
from apps.BezierCurve.curve.defaults import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_SEGMENT_COUNT,
    default_degree,
    default_layout,
)
from apps.BezierCurve.curve.handles import (
    HandleLayout,
    construction_lines,
    control_points,
)


@dataclass
class CurveParams:
    degree: BezierDegree = field(default_factory=default_degree)
    segment_count: int = DEFAULT_SEGMENT_COUNT
    layout: HandleLayout = field(default_factory=default_layout)
    canvas_width: float = DEFAULT_CANVAS_WIDTH
    canvas_height: float = DEFAULT_CANVAS_HEIGHT


@dataclass
class CurveState:
    params: CurveParams
    control_points: np.ndarray
    polyline: np.ndarray
    construction_lines: List[np.ndarray]
    serialized: Dict[str, Any]


def evaluate_curve(params: CurveParams) -> CurveState:
    degree = BezierDegree.parse(params.degree)
    ctrl = control_points(params.layout, degree, params.canvas_width, params.canvas_height)
    polyline = sample_curve(degree, ctrl, params.segment_count)
    lines = construction_lines(params.layout, degree, params.canvas_width, params.canvas_height)
    state = CurveState(
        params=params,
        control_points=ctrl,
        polyline=polyline,
        construction_lines=lines,
        serialized={},
    )
    state.serialized = serialize_curve(state)
    return state


def serialize_curve(state: CurveState) -> Dict[str, Any]:
    degree = BezierDegree.parse(state.params.degree)
    return {
        "degree": degree.name.lower(),
        "degree_value": int(degree),
        "segment_count": int(state.params.segment_count),
        "control_points": state.control_points.tolist(),
        "polyline": state.polyline.tolist(),
        "construction_lines": [line.tolist() for line in state.construction_lines],
        "handles": state.params.layout.to_dict(),
        "canvas": {
            "width": float(state.params.canvas_width),
            "height": float(state.params.canvas_height),
        },
    }
