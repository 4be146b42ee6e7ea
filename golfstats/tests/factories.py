"""Builders for the nine-hole reference round used across the tests.

Reference round (par 36, total 40):

    hole  par  score  putts  fairway  approach
    1     4    5      2      hit      short
    2     3    3      1      -        gir
    3     5    5      2      left     gir
    4     4    4      2      hit      gir
    5     4    5      3      right    right
    6     3    4      2      -        long
    7     4    4      1      hit      gir
    8     5    6      2      left     short
    9     4    4      2      hit      gir
"""

from __future__ import annotations

from typing import Any

from golfstats.rounds.models import Course, Round

_REFERENCE_HOLES = [
    (1, 4, 5, 2, "hit", "short"),
    (2, 3, 3, 1, None, "gir"),
    (3, 5, 5, 2, "left", "gir"),
    (4, 4, 4, 2, "hit", "gir"),
    (5, 4, 5, 3, "right", "right"),
    (6, 3, 4, 2, None, "long"),
    (7, 4, 4, 1, "hit", "gir"),
    (8, 5, 6, 2, "left", "short"),
    (9, 4, 4, 2, "hit", "gir"),
]


def hole_dict(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "number": 1,
        "par": 4,
        "score": 4,
        "putts": 2,
        "penalties": 0,
        "fairwayHit": True,
        "fairwayDirection": "hit",
        "gir": True,
        "approachResult": "gir",
        "bunker": False,
    }
    data.update(overrides)
    return data


def reference_holes() -> list[dict[str, Any]]:
    return [
        hole_dict(
            number=number,
            par=par,
            score=score,
            putts=putts,
            fairwayHit=fairway == "hit",
            fairwayDirection=fairway,
            gir=approach == "gir",
            approachResult=approach,
        )
        for number, par, score, putts, fairway, approach in _REFERENCE_HOLES
    ]


def round_dict(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": "1",
        "courseId": "c1",
        "courseName": "Test Course",
        "numHoles": 9,
        "date": "2025-06-15",
        "tees": "white",
        "courseRating": 35.5,
        "slopeRating": 113,
        "totalScore": 40,
        "holes": reference_holes(),
    }
    data.update(overrides)
    return data


def make_round(**overrides: Any) -> Round:
    return Round.model_validate(round_dict(**overrides))


def course_dict(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": "c1",
        "name": "Test Course",
        "location": "Test City, TS",
        "numHoles": 9,
        "holes": [
            {"number": number, "par": par}
            for number, par, *_rest in _REFERENCE_HOLES
        ],
        "tees": {
            "white": {
                "enabled": True,
                "rating": 35.5,
                "slope": 113,
                "totalYardage": 3200,
            }
        },
    }
    data.update(overrides)
    return data


def make_course(**overrides: Any) -> Course:
    return Course.model_validate(course_dict(**overrides))
