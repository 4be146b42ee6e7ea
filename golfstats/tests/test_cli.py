import json
from pathlib import Path

import pytest

from golfstats.cli import main


def _run(capsys: pytest.CaptureFixture[str], *argv: str):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured


def _json(capsys, *argv):
    code, captured = _run(capsys, *argv)
    assert code == 0, captured.err
    return json.loads(captured.out)


def test_stats_command(export_file: Path, capsys) -> None:
    payload = _json(capsys, "--data", str(export_file), "stats")

    assert payload["roundsCount"] == 3
    assert payload["handicap"] is None  # only two handicap-eligible rounds
    assert payload["stats"]["avgScore"] == 40
    assert payload["stats"]["girPct"] == 56


def test_stats_command_with_filters(export_file: Path, capsys) -> None:
    payload = _json(
        capsys, "--data", str(export_file), "stats", "--count", "2", "--round-type", "normal"
    )

    assert payload["roundsCount"] == 2
    assert payload["stats"]["avgScore"] == 39


def test_course_command(export_file: Path, capsys) -> None:
    payload = _json(capsys, "--data", str(export_file), "course", "c1")

    assert payload["courseId"] == "c1"
    assert payload["roundsPlayed"] == 3
    assert payload["totalPar"] == 36
    assert payload["bestRound"] == {"roundId": "r2", "score": 38, "date": "2025-06-01"}
    assert len(payload["holeStats"]) == 9


def test_trend_command(export_file: Path, capsys) -> None:
    payload = _json(capsys, "--data", str(export_file), "trend", "avgScore", "--window", "2")

    assert payload["window"] == 2
    assert [p["value"] for p in payload["series"]] == [40, 38, 42]
    assert [p["value"] for p in payload["movingAverage"]] == [40, 39, 40]


def test_trend_window_from_settings(
    export_file: Path, capsys, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("GOLFSTATS_TREND_WINDOW", "3")

    payload = _json(capsys, "--data", str(export_file), "trend", "girPct")

    assert payload["window"] == 3


def test_rounds_command(export_file: Path, capsys) -> None:
    payload = _json(capsys, "--data", str(export_file), "rounds")

    assert [r["roundId"] for r in payload] == ["r3", "r2", "r1"]
    assert payload[1]["diffStr"] == "+2"


def test_matches_command(export_file: Path, capsys) -> None:
    payload = _json(capsys, "--data", str(export_file), "matches")

    assert payload["matchesPlayed"] == 0
    assert payload["winPct"] == 0


def test_goals_command(export_file: Path, capsys) -> None:
    payload = _json(
        capsys,
        "--data",
        str(export_file),
        "goals",
        "--target",
        "girPct=50",
        "--target",
        "avgScore=36",
    )

    assert payload == [
        {
            "key": "girPct",
            "label": "Greens in Regulation",
            "unit": "%",
            "value": 56,
            "target": 50.0,
            "status": "above",
        },
        {
            "key": "avgScore",
            "label": "Scoring Average",
            "unit": "strokes",
            "value": 40.0,
            "target": 36.0,
            "status": "far-below",
        },
    ]


@pytest.mark.parametrize("target", ["girPct", "bogus=1"])
def test_goals_command_rejects_bad_targets(export_file: Path, capsys, target: str) -> None:
    code, captured = _run(capsys, "--data", str(export_file), "goals", "--target", target)

    assert code == 1
    assert captured.err


def test_missing_export_file(tmp_path: Path, capsys) -> None:
    code, captured = _run(capsys, "--data", str(tmp_path / "nope.json"), "stats")

    assert code == 1
    assert "export file not found" in captured.err


def test_unknown_course(export_file: Path, capsys) -> None:
    code, captured = _run(capsys, "--data", str(export_file), "course", "zzz")

    assert code == 1
    assert "unknown course: zzz" in captured.err


def test_goals_command_lower_is_better(export_file: Path, capsys) -> None:
    payload = _json(
        capsys, "--data", str(export_file), "goals", "--target", "puttsPer9=18"
    )

    # 17 putts per nine against a target of 18 with a 1.5 putt buffer
    assert payload[0]["value"] == 17
    assert payload[0]["status"] == "above"
