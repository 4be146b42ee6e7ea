"""Target-vs-actual classification for KPI goal coloring."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class GoalDirection(str, Enum):
    HIGHER = "higher"
    LOWER = "lower"


class GoalStatus(str, Enum):
    FAR_ABOVE = "far-above"
    ABOVE = "above"
    BELOW = "below"
    FAR_BELOW = "far-below"


class GoalKey(str, Enum):
    AVG_SCORE = "avgScore"
    FAIRWAY_PCT = "fairwayPct"
    GIR_PCT = "girPct"
    AVG_FIRST_PUTT_DIST = "avgFirstPuttDist"
    SCRAMBLING_PCT = "scramblingPct"
    SAND_SAVE_PCT = "sandSavePct"
    BOGEY_AVOIDANCE_PCT = "bogeyAvoidancePct"
    PAR_CONVERSION_PCT = "parConversionPct"
    BOUNCE_BACK_RATE = "bounceBackRate"
    PUTTS_PER_9 = "puttsPer9"
    FEET_MADE_PER_9 = "feetMadePer9"
    PENALTIES_PER_9 = "penaltiesPer9"
    SCORING_AVG_PAR3 = "scoringAvgPar3"
    SCORING_AVG_PAR4 = "scoringAvgPar4"
    SCORING_AVG_PAR5 = "scoringAvgPar5"
    LAG_PUTT_3_PUTT_AVOID_PCT = "lagPutt3PuttAvoidPct"


@dataclass(frozen=True)
class GoalDef:
    direction: GoalDirection
    buffer: float
    label: str
    unit: str


_HIGHER = GoalDirection.HIGHER
_LOWER = GoalDirection.LOWER

GOAL_DEFS: Dict[GoalKey, GoalDef] = {
    GoalKey.AVG_SCORE: GoalDef(_LOWER, 3, "Scoring Average", "strokes"),
    GoalKey.FAIRWAY_PCT: GoalDef(_HIGHER, 10, "Fairways Hit", "%"),
    GoalKey.GIR_PCT: GoalDef(_HIGHER, 10, "Greens in Regulation", "%"),
    GoalKey.AVG_FIRST_PUTT_DIST: GoalDef(_LOWER, 5, "Avg First Putt", "ft"),
    GoalKey.SCRAMBLING_PCT: GoalDef(_HIGHER, 10, "Scrambling", "%"),
    GoalKey.SAND_SAVE_PCT: GoalDef(_HIGHER, 10, "Sand Saves", "%"),
    GoalKey.BOGEY_AVOIDANCE_PCT: GoalDef(_HIGHER, 10, "Bogey Avoidance", "%"),
    GoalKey.PAR_CONVERSION_PCT: GoalDef(_HIGHER, 10, "Par Conversion", "%"),
    GoalKey.BOUNCE_BACK_RATE: GoalDef(_HIGHER, 10, "Bounce-back Rate", "%"),
    GoalKey.PUTTS_PER_9: GoalDef(_LOWER, 1.5, "Putts per 9", "putts"),
    GoalKey.FEET_MADE_PER_9: GoalDef(_HIGHER, 10, "Feet Made per 9", "ft"),
    GoalKey.PENALTIES_PER_9: GoalDef(_LOWER, 0.5, "Penalties per 9", "strokes"),
    GoalKey.SCORING_AVG_PAR3: GoalDef(_LOWER, 0.3, "Par 3 Scoring Avg", "strokes"),
    GoalKey.SCORING_AVG_PAR4: GoalDef(_LOWER, 0.3, "Par 4 Scoring Avg", "strokes"),
    GoalKey.SCORING_AVG_PAR5: GoalDef(_LOWER, 0.3, "Par 5 Scoring Avg", "strokes"),
    GoalKey.LAG_PUTT_3_PUTT_AVOID_PCT: GoalDef(
        _HIGHER, 10, "Lag Putt 3-Putt Avoidance", "%"
    ),
}


def get_goal_status(
    value: float | None,
    target: float | None,
    direction: GoalDirection | str,
    buffer: float,
) -> GoalStatus | None:
    """Bucket ``value`` against ``target``; ``buffer`` sets the far bands."""

    if value is None or target is None:
        return None

    if GoalDirection(direction) is GoalDirection.HIGHER:
        if value >= target + buffer:
            return GoalStatus.FAR_ABOVE
        if value >= target:
            return GoalStatus.ABOVE
        if value >= target - buffer:
            return GoalStatus.BELOW
        return GoalStatus.FAR_BELOW

    if value <= target - buffer:
        return GoalStatus.FAR_ABOVE
    if value <= target:
        return GoalStatus.ABOVE
    if value <= target + buffer:
        return GoalStatus.BELOW
    return GoalStatus.FAR_BELOW


def goal_status_for(
    key: GoalKey | str, value: float | None, target: float | None
) -> GoalStatus | None:
    """Classify using the registry's direction and default buffer."""

    goal = GOAL_DEFS[GoalKey(key)]
    return get_goal_status(value, target, goal.direction, goal.buffer)


__all__ = [
    "GOAL_DEFS",
    "GoalDef",
    "GoalDirection",
    "GoalKey",
    "GoalStatus",
    "get_goal_status",
    "goal_status_for",
]
