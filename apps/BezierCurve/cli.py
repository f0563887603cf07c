from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from apps.BezierCurve.curve.bezier import BezierDegree, point_at
from apps.BezierCurve.io.json_codec import load_json, merge_dicts, save_json, to_jsonable
from apps.BezierCurve.pipeline.run_curve import evaluate_payload

logger = logging.getLogger(__name__)


def _default_paths() -> dict[str, Path]:
    examples = Path(__file__).resolve().parent / "io" / "examples"
    return {
        "curve_in": examples / "curve_input.example.json",
        "curve_out": examples / "curve_output.example.json",
    }


def _parse_point(text: str) -> List[float]:
    try:
        x_text, y_text = text.split(",")
        return [float(x_text), float(y_text)]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}") from exc


def _build_payload(
    input_path: Optional[str],
    case_path: Optional[str],
    constants_path: Optional[str],
    default_input: Path,
) -> dict:
    if input_path:
        return load_json(input_path)

    if case_path or constants_path:
        merged: dict = {}
        if constants_path:
            merged = merge_dicts(merged, load_json(constants_path))
        if case_path:
            merged = merge_dicts(merged, load_json(case_path))
        return merged

    return load_json(default_input)


def _apply_overrides(payload: dict, args: argparse.Namespace) -> dict:
    overrides: dict = {}
    if args.degree is not None:
        overrides["degree"] = args.degree
    if args.segments is not None:
        overrides["segment_count"] = args.segments
    if not overrides:
        return payload
    return merge_dicts(payload, {"curve": overrides})


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="BezierCurve CLI")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sample_parser = subparsers.add_parser("sample", help="Sample a curve into a polyline")
    sample_parser.add_argument("--in", dest="input_path")
    sample_parser.add_argument("--out", dest="output_path")
    sample_parser.add_argument("--case", dest="case_path")
    sample_parser.add_argument("--constants", dest="constants_path")
    sample_parser.add_argument("--degree")
    sample_parser.add_argument("--segments", type=int)

    point_parser = subparsers.add_parser("point", help="Evaluate a single curve point")
    point_parser.add_argument("--degree", required=True)
    point_parser.add_argument(
        "--point",
        dest="points",
        action="append",
        type=_parse_point,
        required=True,
        help="Control point as X,Y; repeat in curve order",
    )
    point_parser.add_argument("-t", dest="t", type=float, required=True)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "point":
        try:
            point = point_at(args.t, BezierDegree.parse(args.degree), args.points)
        except ValueError as exc:
            parser.error(str(exc))
        print(json.dumps({"t": args.t, "point": to_jsonable(point)}))
        return

    defaults = _default_paths()
    output_path = Path(args.output_path or defaults["curve_out"])
    try:
        payload = _build_payload(
            args.input_path,
            args.case_path,
            args.constants_path,
            defaults["curve_in"],
        )
        output = evaluate_payload(_apply_overrides(payload, args))
    except (OSError, ValueError) as exc:
        parser.error(str(exc))
    save_json(output_path, output)
    logger.info("Wrote %d samples to %s", len(output["curve"]["polyline"]), output_path)


if __name__ == "__main__":
    main()
