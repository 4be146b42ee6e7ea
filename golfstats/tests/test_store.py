import json
import logging
from pathlib import Path

import pytest

from golfstats.rounds.filters import RoundFilter
from golfstats.store import CourseNotFound, ExportFormatError, ExportNotFound, RoundStore

from .factories import course_dict, round_dict


def test_loads_courses_and_rounds(export_file: Path) -> None:
    store = RoundStore(export_file)

    assert [c.id for c in store.list_courses()] == ["c1"]
    assert [r.id for r in store.all_rounds()] == ["r1", "r2", "r3"]
    assert store.get_course("c1").total_par == 36
    assert store.path == export_file.resolve()


def test_list_rounds_applies_filters(export_file: Path) -> None:
    store = RoundStore(export_file)

    assert [r.id for r in store.list_rounds()] == ["r3", "r2", "r1"]
    assert [r.id for r in store.list_rounds(count=2)] == ["r3", "r2"]
    assert [r.id for r in store.list_rounds({"roundType": "normal"})] == ["r2", "r1"]
    assert [r.id for r in store.list_rounds(RoundFilter(end_date="2025-06-01"))] == [
        "r2",
        "r1",
    ]


def test_returned_lists_are_copies(export_file: Path) -> None:
    store = RoundStore(export_file)

    store.all_rounds().clear()

    assert len(store.all_rounds()) == 3


def test_unknown_course(export_file: Path) -> None:
    with pytest.raises(CourseNotFound):
        RoundStore(export_file).get_course("missing")


def test_invalid_records_are_skipped(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    bad = round_dict(id="bad")
    del bad["totalScore"]
    path = tmp_path / "export.json"
    path.write_text(
        json.dumps({"courses": [course_dict()], "rounds": [round_dict(), bad]}),
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING, logger="golfstats.store"):
        rounds = RoundStore(path).all_rounds()

    assert [r.id for r in rounds] == ["1"]
    assert "skipping rounds[1]" in caplog.text


def test_missing_sections_are_empty(tmp_path: Path) -> None:
    path = tmp_path / "export.json"
    path.write_text("{}", encoding="utf-8")

    store = RoundStore(path)

    assert store.list_courses() == []
    assert store.all_rounds() == []


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ExportNotFound):
        RoundStore(tmp_path / "nope.json").all_rounds()


@pytest.mark.parametrize("content", ["not json", "[]", '{"rounds": {}}'])
def test_malformed_export(tmp_path: Path, content: str) -> None:
    path = tmp_path / "export.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ExportFormatError):
        RoundStore(path).all_rounds()
