import json
from pathlib import Path

import numpy as np
import pytest

from apps.BezierCurve import cli
from apps.BezierCurve.io.json_codec import load_json, save_json

EXAMPLES = Path(__file__).resolve().parents[1] / "apps" / "BezierCurve" / "io" / "examples"


def test_point_command_prints_json(capsys):
    cli.main(
        [
            "point",
            "--degree",
            "cubic",
            "--point",
            "0,0",
            "--point",
            "0,10",
            "--point",
            "10,10",
            "--point",
            "10,0",
            "-t",
            "0.5",
        ]
    )

    result = json.loads(capsys.readouterr().out)
    assert result["t"] == 0.5
    assert result["point"] == pytest.approx([5.0, 7.5])


def test_point_command_rejects_wrong_count():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["point", "--degree", "3", "--point", "0,0", "--point", "1,1", "-t", "0.5"])
    assert excinfo.value.code == 2


def test_point_command_rejects_malformed_point():
    with pytest.raises(SystemExit):
        cli.main(["point", "--degree", "1", "--point", "0;0", "--point", "1,1", "-t", "0.5"])


def test_sample_command_with_overrides(tmp_path):
    output_path = tmp_path / "out.json"
    cli.main(
        [
            "sample",
            "--in",
            str(EXAMPLES / "curve_input.example.json"),
            "--out",
            str(output_path),
            "--degree",
            "quadratic",
            "--segments",
            "6",
        ]
    )

    output = load_json(output_path)
    assert output["curve"]["degree"] == "quadratic"
    assert len(output["curve"]["polyline"]) == 7


def test_sample_command_merges_case_and_constants(tmp_path):
    save_json(tmp_path / "constants.json", {"canvas": {"width": 10.0, "height": 10.0}})
    save_json(tmp_path / "case.json", {"curve": {"degree": "linear", "segment_count": 2}})
    output_path = tmp_path / "out.json"

    cli.main(
        [
            "sample",
            "--case",
            str(tmp_path / "case.json"),
            "--constants",
            str(tmp_path / "constants.json"),
            "--out",
            str(output_path),
        ]
    )

    polyline = load_json(output_path)["curve"]["polyline"]
    np.testing.assert_allclose(polyline, [[2.0, 7.0], [5.0, 7.0], [8.0, 7.0]])


def test_sample_command_rejects_zero_segments(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["sample", "--out", str(tmp_path / "out.json"), "--segments", "0"])
    assert excinfo.value.code == 2
    assert not (tmp_path / "out.json").exists()


@pytest.mark.parametrize(
    "content",
    [
        '{"curve": {"degree": "cubic"',
        '{"handles": [[0.1, 0.2]]}',
        '{"handles": {"control1": 7}}',
    ],
)
def test_sample_command_reports_bad_input_files(tmp_path, content):
    input_path = tmp_path / "bad.json"
    input_path.write_text(content, encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["sample", "--in", str(input_path), "--out", str(tmp_path / "out.json")])
    assert excinfo.value.code == 2
    assert not (tmp_path / "out.json").exists()


def test_sample_command_reports_missing_file(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["sample", "--in", str(tmp_path / "nope.json"), "--out", str(tmp_path / "o.json")])
    assert excinfo.value.code == 2
