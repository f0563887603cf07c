from __future__ import annotations

from datetime import datetime, timezone

from apps.BezierCurve.curve.defaults import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_SEGMENT_COUNT,
    default_degree,
    default_layout,
)

APP_NAME = "BezierCurve"

CURVE_DEFAULTS = {
    "meta": {"app": APP_NAME, "case_id": "", "units": "view"},
    "curve": {
        "degree": default_degree().name.lower(),
        "segment_count": DEFAULT_SEGMENT_COUNT,
    },
    "canvas": {"width": DEFAULT_CANVAS_WIDTH, "height": DEFAULT_CANVAS_HEIGHT},
    "handles": default_layout().to_dict(),
}


def timestamp_utc() -> str:
    return datetime.now(timezone.utc).isoformat()
