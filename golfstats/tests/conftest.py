"""Shared pytest fixtures for golfstats tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from golfstats.config import reset_settings_cache

from .factories import course_dict, round_dict


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ("GOLFSTATS_DATA_FILE", "GOLFSTATS_TREND_WINDOW", "GOLFSTATS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def export_file(tmp_path: Path) -> Path:
    """A tracker export with one course and three dated rounds on it."""

    payload = {
        "courses": [course_dict()],
        "rounds": [
            round_dict(id="r1", date="2025-05-01", totalScore=40),
            round_dict(id="r2", date="2025-06-01", totalScore=38),
            round_dict(id="r3", date="2025-07-01", totalScore=42, roundType="casual"),
        ],
        "settings": {"apiKey": "", "spreadsheetId": ""},
    }
    path = tmp_path / "export.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
