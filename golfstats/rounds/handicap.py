"""USGA-style handicap index from a count-scaled selection of differentials."""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from golfstats.utils.numbers import round_half_up

from .models import HANDICAP_ROUND_TYPES, Round

_LOG = logging.getLogger(__name__)

MIN_ELIGIBLE_ROUNDS = 3
STANDARD_SLOPE = 113
BONUS_FOR_EXCELLENCE = 0.96

# (minimum eligible rounds, differentials used), checked top down
_BEST_OF_THRESHOLDS = (
    (20, 8),
    (17, 7),
    (14, 6),
    (11, 5),
    (8, 4),
    (6, 3),
    (4, 2),
)


def is_handicap_eligible(round_: Round) -> bool:
    return (
        round_.course_rating is not None
        and bool(round_.slope_rating)
        and round_.round_type in HANDICAP_ROUND_TYPES
    )


def score_differential(round_: Round) -> float:
    return (
        (round_.total_score - round_.course_rating) * STANDARD_SLOPE
    ) / round_.slope_rating


def differentials_to_use(eligible_count: int) -> int:
    for minimum, used in _BEST_OF_THRESHOLDS:
        if eligible_count >= minimum:
            return used
    return 1


def eligible_differentials(rounds: Iterable[Round]) -> List[float]:
    """Sorted (best first) differentials of every handicap-eligible round."""

    return sorted(score_differential(r) for r in rounds if is_handicap_eligible(r))


def compute_handicap(rounds: Sequence[Round]) -> float | None:
    differentials = eligible_differentials(rounds)
    if len(differentials) < MIN_ELIGIBLE_ROUNDS:
        _LOG.debug(
            "handicap unavailable: %d eligible of %d rounds",
            len(differentials),
            len(rounds),
        )
        return None

    used = differentials_to_use(len(differentials))
    best = differentials[:used]
    return round_half_up(sum(best) / used * BONUS_FOR_EXCELLENCE, 1)


__all__ = [
    "MIN_ELIGIBLE_ROUNDS",
    "compute_handicap",
    "differentials_to_use",
    "eligible_differentials",
    "is_handicap_eligible",
    "score_differential",
]
