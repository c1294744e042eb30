"""Command line entry point."""
from __future__ import annotations

import io
import json

import pytest

from dropin_utils.cli import create_parser, main


def _run(argv):
    buffer = io.StringIO()
    code = main(argv, stdout=buffer)
    return code, json.loads(buffer.getvalue()) if buffer.getvalue() else None


def test_catenary_command_prints_points():
    code, payload = _run(["catenary", "--start", "0,0,0", "--end", "4,0,0", "--segments", "4", "--slack", "1"])
    assert code == 0
    assert payload["target_length"] == pytest.approx(5.0)
    assert len(payload["points"]) == 5
    assert payload["points"][0] == [0.0, 0.0, 0.0]
    assert payload["points"][-1] == [4.0, 0.0, 0.0]
    assert payload["points"][2][1] < 0.0


def test_catenary_length_option_sets_absolute_length():
    code, payload = _run(["catenary", "--start", "0,0,0", "--end", "4,0,0", "--length", "6"])
    assert code == 0
    assert payload["target_length"] == pytest.approx(6.0)


def test_interpolate_command_reaches_end():
    code, timeline = _run(["interpolate", "--max-speed", "2", "--dt", "0.25", "--steps", "4"])
    assert code == 0
    assert [entry["time"] for entry in timeline] == [0.25, 0.5, 0.75, 1.0]
    assert timeline[-1]["state"] == "AT_END"
    assert timeline[-1]["progress"] == 1.0


def test_inertial_interpolate_with_braking():
    code, timeline = _run(
        ["interpolate", "--inertial", "--braking", "2", "--dt", "0.1", "--steps", "30", "--brake-at", "5"]
    )
    assert code == 0
    assert len(timeline) == 30
    assert timeline[-1]["velocity"] == 0.0
    assert timeline[-1]["progress"] < 1.0


def test_bad_config_returns_error_code(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("not json", encoding="utf-8")
    code, payload = _run(["--config", str(path), "catenary", "--start", "0,0,0", "--end", "1,0,0"])
    assert code == 2
    assert payload is None


def test_malformed_point_is_rejected():
    with pytest.raises(SystemExit):
        create_parser().parse_args(["catenary", "--start", "0,0", "--end", "1,0,0"])


def test_envelope_command_uses_envelope_settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"envelope": {"attack": 0.2, "decay": 0.2, "sustain": 0.5, "release": 0.4}}), encoding="utf-8")
    code, timeline = _run(["--config", str(path), "envelope", "--hold", "0.5", "--dt", "0.1", "--steps", "10"])
    assert code == 0
    assert len(timeline) == 10
    assert [entry["pressed"] for entry in timeline[:5]] == [True] * 5
    assert timeline[1]["value"] == pytest.approx(1.0)
    assert timeline[4]["value"] == pytest.approx(0.5)
    assert timeline[-1]["value"] == 0.0
