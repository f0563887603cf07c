from __future__ import annotations

from enum import IntEnum
from math import comb
from operator import index
from typing import Sequence

import numpy as np


class ContractViolation(ValueError):
    """Raised when a caller hands the evaluator inputs that break its contract."""


class BezierDegree(IntEnum):
    LINEAR = 1
    QUADRATIC = 2
    CUBIC = 3

    @property
    def n_control_points(self) -> int:
        return int(self) + 1

    @classmethod
    def parse(cls, value: BezierDegree | int | str) -> BezierDegree:
        if isinstance(value, cls):
            return value
        message = f"degree must be one of linear/quadratic/cubic or 1-3, got {value!r}"
        if isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]
            if not name.isdigit():
                raise ContractViolation(message)
            number = int(name)
        else:
            number = _integer(value, message)
        try:
            return cls(number)
        except ValueError as exc:
            raise ContractViolation(message) from exc


def _integer(value, message: str) -> int:
    # bool is an int subclass, but True is not a degree or a segment count.
    if isinstance(value, bool):
        raise ContractViolation(message)
    try:
        return index(value)
    except TypeError as exc:
        raise ContractViolation(message) from exc


def binomial(n: int, i: int) -> int:
    return comb(n, i)


def bernstein_poly(n: int, i: int, t: np.ndarray) -> np.ndarray:
    return binomial(n, i) * np.power(1 - t, n - i) * np.power(t, i)


def _as_control_points(
    control_points: Sequence[Sequence[float]] | np.ndarray,
    degree: BezierDegree,
) -> np.ndarray:
    points = np.asarray(control_points, dtype=float)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ContractViolation("control_points must have shape (n_ctrl, 2)")
    if points.shape[0] != degree.n_control_points:
        raise ContractViolation(
            f"{degree.name.lower()} curve needs {degree.n_control_points} control points, "
            f"got {points.shape[0]}"
        )
    return points


def bezier_curve(
    control_points: Sequence[Sequence[float]] | np.ndarray,
    t: np.ndarray,
    degree: BezierDegree | int | str | None = None,
) -> np.ndarray:
    """Evaluate the curve at every parameter in ``t``.

    Returns an array of shape ``(t.size, 2)``. When ``degree`` is omitted it
    is taken from the number of control points.
    """
    if degree is None:
        degree = len(control_points) - 1
    degree = BezierDegree.parse(degree)
    points = _as_control_points(control_points, degree)
    t = np.atleast_1d(np.asarray(t, dtype=float))
    n = int(degree)
    samples = np.zeros((t.size, 2), dtype=float)
    for i in range(n + 1):
        samples += bernstein_poly(n, i, t)[:, None] * points[i]
    return samples


def point_at(
    t: float,
    degree: BezierDegree | int | str,
    control_points: Sequence[Sequence[float]] | np.ndarray,
) -> np.ndarray:
    """Point on the curve at parameter ``t``. ``t`` is not clamped to [0, 1]."""
    return bezier_curve(control_points, np.array([t], dtype=float), degree)[0]


def sample_curve(
    degree: BezierDegree | int | str,
    control_points: Sequence[Sequence[float]] | np.ndarray,
    segment_count: int,
) -> np.ndarray:
    """Polyline vertices at ``t = i / segment_count`` for ``i = 0..segment_count``."""
    message = f"segment_count must be a positive integer, got {segment_count!r}"
    segment_count = _integer(segment_count, message)
    if segment_count <= 0:
        raise ContractViolation(message)
    t = np.arange(segment_count + 1, dtype=float) / segment_count
    return bezier_curve(control_points, t, degree)
