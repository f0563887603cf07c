from __future__ import annotations

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict

import numpy as np

from apps.BezierCurve.curve.bezier import BezierDegree, sample_curve
from apps.BezierCurve.curve.handles import HandleLayout
from apps.BezierCurve.io.json_codec import load_json, merge_dicts, save_json, to_jsonable
from apps.BezierCurve.io.schemas import APP_NAME, CURVE_DEFAULTS, timestamp_utc
from apps.BezierCurve.models.curve_models import CurveParams, evaluate_curve

logger = logging.getLogger(__name__)


def _section(payload: Dict[str, Any], key: str) -> Dict[str, Any]:
    section = payload.get(key, {})
    if not isinstance(section, dict):
        raise ValueError(f"{key} must be a JSON object")
    return section


def _build_params(payload: Dict[str, Any]) -> CurveParams:
    curve = _section(payload, "curve")
    canvas = _section(payload, "canvas")
    handles = _section(payload, "handles")

    if curve.get("degree") is None:
        raise ValueError("curve.degree is required")
    segment_count = curve.get("segment_count")
    if segment_count is None:
        raise ValueError("curve.segment_count is required")
    width = canvas.get("width")
    height = canvas.get("height")
    if width is None or height is None:
        raise ValueError("canvas.width and canvas.height are required")

    try:
        layout = HandleLayout.from_dict(handles)
    except KeyError as exc:
        raise ValueError(f"handles.{exc.args[0]} is required") from exc
    except TypeError as exc:
        raise ValueError("handles must map each handle to an [x, y] pair") from exc

    try:
        canvas_width, canvas_height = float(width), float(height)
    except TypeError as exc:
        raise ValueError("canvas.width and canvas.height must be numbers") from exc

    return CurveParams(
        degree=BezierDegree.parse(curve["degree"]),
        segment_count=segment_count,
        layout=layout,
        canvas_width=canvas_width,
        canvas_height=canvas_height,
    )


def _explicit_curve(params: CurveParams, points: Any) -> Dict[str, Any]:
    ctrl = np.asarray(points, dtype=float)
    polyline = sample_curve(params.degree, ctrl, params.segment_count)
    return {
        "degree": params.degree.name.lower(),
        "degree_value": int(params.degree),
        "segment_count": int(params.segment_count),
        "control_points": ctrl.tolist(),
        "polyline": polyline.tolist(),
        "construction_lines": [],
    }


def evaluate_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    payload = merge_dicts(deepcopy(CURVE_DEFAULTS), payload)
    meta = payload.get("meta", {})
    params = _build_params(payload)
    explicit_points = payload.get("curve", {}).get("control_points")

    if explicit_points is not None:
        curve_result = _explicit_curve(params, explicit_points)
        source = "control_points"
    else:
        curve_result = evaluate_curve(params).serialized
        source = "handles"

    logger.info(
        "Evaluated %s curve from %s: %d samples",
        curve_result["degree"],
        source,
        len(curve_result["polyline"]),
    )

    return {
        "meta": {
            "app": meta.get("app", APP_NAME),
            "case_id": meta.get("case_id", ""),
            "stage": "curve",
            "units": meta.get("units", "view"),
            "timestamp": timestamp_utc(),
        },
        "curve": curve_result,
        "constants_used": {
            "source": source,
            "canvas": payload.get("canvas", {}),
            "handles": payload.get("handles", {}),
        },
    }


def run_curve(input_path: str | Path, output_path: str | Path) -> Dict[str, Any]:
    payload = load_json(input_path)
    output = evaluate_payload(payload)
    save_json(output_path, to_jsonable(output))
    logger.debug("Wrote curve output to %s", output_path)
    return output


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Run BezierCurve sampling pipeline")
    parser.add_argument("--in", dest="input_path", required=True)
    parser.add_argument("--out", dest="output_path", required=True)
    args = parser.parse_args()

    run_curve(args.input_path, args.output_path)
