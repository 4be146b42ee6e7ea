import pytest

from golfstats.goals import (
    GOAL_DEFS,
    GoalDirection,
    GoalKey,
    GoalStatus,
    get_goal_status,
    goal_status_for,
)
from golfstats.rounds.stats import Stats


@pytest.mark.parametrize(
    "value, expected",
    [(75, "far-above"), (70, "far-above"), (65, "above"), (60, "above"), (55, "below"), (50, "below"), (45, "far-below")],
)
def test_higher_is_better(value: float, expected: str) -> None:
    assert get_goal_status(value, 60, "higher", 10) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(70, "far-above"), (72, "far-above"), (74, "above"), (77, "below"), (78, "below"), (79, "far-below")],
)
def test_lower_is_better(value: float, expected: str) -> None:
    assert get_goal_status(value, 75, GoalDirection.LOWER, 3) == expected


def test_missing_value_or_target() -> None:
    assert get_goal_status(None, 60, "higher", 10) is None
    assert get_goal_status(60, None, "higher", 10) is None


def test_zero_value_is_classified() -> None:
    assert get_goal_status(0, 60, "higher", 10) is GoalStatus.FAR_BELOW


def test_registry_covers_sixteen_kpis() -> None:
    assert len(GOAL_DEFS) == 16
    assert set(GOAL_DEFS) == set(GoalKey)


def test_registry_keys_are_stats_fields() -> None:
    aliases = {info.serialization_alias for info in Stats.model_fields.values()}

    missing = {key.value for key in GOAL_DEFS} - aliases
    assert not missing


def test_registry_entries_are_complete() -> None:
    for goal in GOAL_DEFS.values():
        assert goal.direction in set(GoalDirection)
        assert goal.buffer > 0
        assert goal.label
        assert goal.unit


def test_goal_status_for_uses_registry_defaults() -> None:
    # avgScore: lower is better with a 3 stroke buffer
    assert goal_status_for("avgScore", 80, 85) == "far-above"
    assert goal_status_for(GoalKey.GIR_PCT, 52, 50) == "above"
