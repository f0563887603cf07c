from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np

from apps.BezierCurve.curve.bezier import BezierDegree

HANDLE_SIZE = 20.0
MIN_HIT_TARGET = 50.0


class HandleRole(str, Enum):
    ANCHOR1 = "anchor1"
    ANCHOR2 = "anchor2"
    CONTROL1 = "control1"
    CONTROL2 = "control2"


@dataclass(frozen=True)
class HandleLayout:
    """Handle centres as fractions of the canvas width and height."""

    anchor1: Tuple[float, float]
    anchor2: Tuple[float, float]
    control1: Tuple[float, float]
    control2: Tuple[float, float]

    def position(self, role: HandleRole | str) -> Tuple[float, float]:
        return getattr(self, HandleRole(role).value)

    def with_position(self, role: HandleRole | str, relative: Sequence[float]) -> HandleLayout:
        x, y = relative
        return replace(self, **{HandleRole(role).value: (float(x), float(y))})

    @classmethod
    def from_dict(cls, data: dict) -> HandleLayout:
        return cls(**{role.value: _pair(data[role.value]) for role in HandleRole})

    def to_dict(self) -> dict:
        return {role.value: list(self.position(role)) for role in HandleRole}


_CONTROL_ROLES = {
    BezierDegree.LINEAR: (HandleRole.ANCHOR1, HandleRole.ANCHOR2),
    BezierDegree.QUADRATIC: (HandleRole.ANCHOR1, HandleRole.CONTROL1, HandleRole.ANCHOR2),
    BezierDegree.CUBIC: (
        HandleRole.ANCHOR1,
        HandleRole.CONTROL1,
        HandleRole.CONTROL2,
        HandleRole.ANCHOR2,
    ),
}


def _pair(value: Sequence[float]) -> Tuple[float, float]:
    if len(value) != 2:
        raise ValueError(f"Expected an (x, y) pair, got {value!r}")
    return float(value[0]), float(value[1])


def _clamp_norm(value: float) -> float:
    return max(0.0, min(1.0, value))


def _validate_canvas(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError("Canvas width and height must be positive.")


def control_roles(degree: BezierDegree | int | str) -> Tuple[HandleRole, ...]:
    return _CONTROL_ROLES[BezierDegree.parse(degree)]


def visible_roles(degree: BezierDegree | int | str) -> frozenset:
    return frozenset(control_roles(degree))


def to_absolute(relative: Sequence[float], width: float, height: float) -> np.ndarray:
    _validate_canvas(width, height)
    return np.array([width * relative[0], height * relative[1]], dtype=float)


def to_relative(point: Sequence[float], width: float, height: float) -> np.ndarray:
    _validate_canvas(width, height)
    return np.array([point[0] / width, point[1] / height], dtype=float)


def handle_frame(
    relative: Sequence[float],
    width: float,
    height: float,
    size: float = HANDLE_SIZE,
) -> Tuple[float, float, float, float]:
    center = to_absolute(relative, width, height)
    return (
        float(center[0] - size / 2),
        float(center[1] - size / 2),
        float(size),
        float(size),
    )


def hit_test(
    point: Sequence[float],
    center: Sequence[float],
    size: float = HANDLE_SIZE,
    min_target: float = MIN_HIT_TARGET,
) -> bool:
    # Small handles still get a min_target x min_target touch area.
    half = max(size, min_target) / 2
    return abs(point[0] - center[0]) <= half and abs(point[1] - center[1]) <= half


def drag_handle(
    layout: HandleLayout,
    role: HandleRole | str,
    translation: Sequence[float],
    width: float,
    height: float,
) -> HandleLayout:
    center = to_absolute(layout.position(role), width, height)
    moved = center + np.asarray(translation, dtype=float)
    relative = to_relative(moved, width, height)
    return layout.with_position(role, (_clamp_norm(relative[0]), _clamp_norm(relative[1])))


def find_handle(
    layout: HandleLayout,
    degree: BezierDegree | int | str,
    point: Sequence[float],
    width: float,
    height: float,
    size: float = HANDLE_SIZE,
) -> Optional[HandleRole]:
    # Control handles sit on top of the anchors when drawn, so test them first.
    for role in sorted(control_roles(degree), key=lambda r: r.value.startswith("anchor")):
        center = to_absolute(layout.position(role), width, height)
        if hit_test(point, center, size=size):
            return role
    return None


def control_points(
    layout: HandleLayout,
    degree: BezierDegree | int | str,
    width: float,
    height: float,
) -> np.ndarray:
    return np.vstack(
        [to_absolute(layout.position(role), width, height) for role in control_roles(degree)]
    )


def construction_lines(
    layout: HandleLayout,
    degree: BezierDegree | int | str,
    width: float,
    height: float,
) -> List[np.ndarray]:
    degree = BezierDegree.parse(degree)

    def _abs(role: HandleRole) -> np.ndarray:
        return to_absolute(layout.position(role), width, height)

    if degree == BezierDegree.QUADRATIC:
        return [
            np.vstack(
                [_abs(HandleRole.ANCHOR1), _abs(HandleRole.CONTROL1), _abs(HandleRole.ANCHOR2)]
            )
        ]
    if degree == BezierDegree.CUBIC:
        return [
            np.vstack([_abs(HandleRole.ANCHOR1), _abs(HandleRole.CONTROL1)]),
            np.vstack([_abs(HandleRole.ANCHOR2), _abs(HandleRole.CONTROL2)]),
        ]
    return []
