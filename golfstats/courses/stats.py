"""Per-course rollups: scoped round stats plus hole-by-hole difficulty."""

from __future__ import annotations

import logging
from collections import defaultdict
from statistics import mean
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from golfstats.rounds.models import (
    ApproachResult,
    Course,
    FairwayDirection,
    HoleDefinition,
    HoleResult,
    MATCH_ROUND_TYPES,
    MatchResult,
    Round,
)
from golfstats.rounds.stats import (
    ScoringDistribution,
    Stats,
    build_scoring_distribution,
    compute_stats,
)
from golfstats.utils.numbers import pct, ratio, round_half_up

_LOG = logging.getLogger(__name__)

RANKED_HOLES = 3

# Evaluation order matters: the first direction with the highest count wins.
GIR_MISS_ORDER = (
    ApproachResult.LONG,
    ApproachResult.SHORT,
    ApproachResult.LEFT,
    ApproachResult.RIGHT,
)


class CourseRoundRef(BaseModel):
    round_id: str = Field(serialization_alias="roundId")
    score: int
    date: str

    model_config = ConfigDict(populate_by_name=True)


class HoleStats(BaseModel):
    number: int
    par: int
    rounds_with_data: int = Field(default=0, serialization_alias="roundsWithData")
    scoring_avg: Optional[float] = Field(default=None, serialization_alias="scoringAvg")
    vs_par: Optional[float] = Field(default=None, serialization_alias="vsPar")
    distribution: ScoringDistribution = Field(default_factory=ScoringDistribution)
    fairway_pct: Optional[int] = Field(default=None, serialization_alias="fairwayPct")
    fairway_miss_dir: Optional[FairwayDirection] = Field(
        default=None, serialization_alias="fairwayMissDir"
    )
    gir_pct: Optional[int] = Field(default=None, serialization_alias="girPct")
    gir_miss_dir: Optional[ApproachResult] = Field(
        default=None, serialization_alias="girMissDir"
    )
    avg_putts: Optional[float] = Field(default=None, serialization_alias="avgPutts")
    match_win_pct: Optional[int] = Field(default=None, serialization_alias="matchWinPct")
    match_draw_pct: Optional[int] = Field(
        default=None, serialization_alias="matchDrawPct"
    )
    match_loss_pct: Optional[int] = Field(
        default=None, serialization_alias="matchLossPct"
    )

    model_config = ConfigDict(populate_by_name=True)


class CourseStats(BaseModel):
    course_id: str = Field(serialization_alias="courseId")
    course_name: str | None = Field(default=None, serialization_alias="courseName")
    rounds_played: int = Field(default=0, serialization_alias="roundsPlayed")
    total_par: int = Field(serialization_alias="totalPar")
    avg_score: Optional[float] = Field(default=None, serialization_alias="avgScore")
    vs_par: Optional[float] = Field(default=None, serialization_alias="vsPar")
    best_round: Optional[CourseRoundRef] = Field(
        default=None, serialization_alias="bestRound"
    )
    worst_round: Optional[CourseRoundRef] = Field(
        default=None, serialization_alias="worstRound"
    )
    course_stats: Stats = Field(
        default_factory=Stats, serialization_alias="courseStats"
    )
    hole_stats: List[HoleStats] = Field(
        default_factory=list, serialization_alias="holeStats"
    )
    hardest_holes: List[HoleStats] = Field(
        default_factory=list, serialization_alias="hardestHoles"
    )
    easiest_holes: List[HoleStats] = Field(
        default_factory=list, serialization_alias="easiestHoles"
    )
    matches_played: int = Field(default=0, serialization_alias="matchesPlayed")

    model_config = ConfigDict(populate_by_name=True)


def _fairway_miss_dir(entries: Sequence[HoleResult]) -> FairwayDirection | None:
    left = right = 0
    for entry in entries:
        if entry.fairway_hit:
            continue
        if entry.fairway_direction == FairwayDirection.LEFT:
            left += 1
        elif entry.fairway_direction == FairwayDirection.RIGHT:
            right += 1
    if not left and not right:
        return None
    return FairwayDirection.LEFT if left >= right else FairwayDirection.RIGHT


def _gir_miss_dir(entries: Sequence[HoleResult]) -> ApproachResult | None:
    counts = {direction: 0 for direction in GIR_MISS_ORDER}
    for entry in entries:
        if not entry.gir and entry.approach_result in counts:
            counts[entry.approach_result] += 1

    best: ApproachResult | None = None
    for direction in GIR_MISS_ORDER:
        if counts[direction] and (best is None or counts[direction] > counts[best]):
            best = direction
    return best


def _match_split(entries: Sequence[HoleResult]) -> Dict[MatchResult, int | None]:
    results = [e.match_result for e in entries if e.match_result is not None]
    return {
        outcome: pct(sum(1 for r in results if r == outcome), len(results))
        for outcome in MatchResult
    }


def build_hole_stats(hole: HoleDefinition, entries: Sequence[HoleResult]) -> HoleStats:
    if not entries:
        return HoleStats(number=hole.number, par=hole.par)

    average = mean(e.score for e in entries)
    # Scores are judged against the par recorded with each round.
    to_par = mean(e.to_par for e in entries)
    fairway_entries = [
        e for e in entries if e.par > 3 and e.fairway_direction is not None
    ]
    approach_entries = [e for e in entries if e.approach_result is not None]
    split = _match_split(entries)

    return HoleStats(
        number=hole.number,
        par=hole.par,
        rounds_with_data=len(entries),
        scoring_avg=round_half_up(average, 2),
        vs_par=round_half_up(to_par, 2),
        distribution=build_scoring_distribution(entries),
        fairway_pct=pct(
            sum(1 for e in fairway_entries if e.fairway_hit), len(fairway_entries)
        ),
        fairway_miss_dir=_fairway_miss_dir(fairway_entries),
        gir_pct=pct(sum(1 for e in approach_entries if e.gir), len(approach_entries)),
        gir_miss_dir=_gir_miss_dir(approach_entries),
        avg_putts=ratio(sum(e.putts for e in entries), len(entries), 1),
        match_win_pct=split[MatchResult.WIN],
        match_draw_pct=split[MatchResult.DRAW],
        match_loss_pct=split[MatchResult.LOSS],
    )


def rank_holes(
    hole_stats: Sequence[HoleStats], *, hardest: bool, limit: int = RANKED_HOLES
) -> List[HoleStats]:
    """Top ``limit`` holes by vsPar; ties keep hole order."""

    rated = [h for h in hole_stats if h.vs_par is not None]
    ordered = sorted(rated, key=lambda h: -h.vs_par if hardest else h.vs_par)
    return ordered[:limit]


def _best_and_worst(rounds: Sequence[Round]) -> tuple[CourseRoundRef, CourseRoundRef]:
    # Score ascending, most recent first among equal scores.
    by_date = sorted(rounds, key=lambda r: r.date, reverse=True)
    ordered = sorted(by_date, key=lambda r: r.total_score)

    def ref(round_: Round) -> CourseRoundRef:
        return CourseRoundRef(
            round_id=round_.id, score=round_.total_score, date=round_.date
        )

    return ref(ordered[0]), ref(ordered[-1])


def compute_course_stats(
    course_id: str, all_rounds: Sequence[Round], course: Course
) -> CourseStats:
    rounds = [r for r in all_rounds if r.course_id == course_id]
    total_par = course.total_par
    _LOG.debug("course %s: %d of %d rounds", course_id, len(rounds), len(all_rounds))

    if not rounds:
        return CourseStats(
            course_id=course_id,
            course_name=course.name,
            total_par=total_par,
            hole_stats=[HoleStats(number=h.number, par=h.par) for h in course.holes],
        )

    entries: Dict[int, List[HoleResult]] = defaultdict(list)
    for round_ in rounds:
        for hole in round_.holes:
            entries[hole.number].append(hole)

    hole_stats = [build_hole_stats(h, entries.get(h.number, [])) for h in course.holes]
    avg_score = round_half_up(mean(r.total_score for r in rounds), 1)
    best, worst = _best_and_worst(rounds)

    return CourseStats(
        course_id=course_id,
        course_name=course.name,
        rounds_played=len(rounds),
        total_par=total_par,
        avg_score=avg_score,
        vs_par=round_half_up(avg_score - total_par, 1),
        best_round=best,
        worst_round=worst,
        course_stats=compute_stats(rounds),
        hole_stats=hole_stats,
        hardest_holes=rank_holes(hole_stats, hardest=True),
        easiest_holes=rank_holes(hole_stats, hardest=False),
        matches_played=sum(
            1
            for r in rounds
            if r.round_type in MATCH_ROUND_TYPES and r.has_match_results
        ),
    )


__all__ = [
    "CourseRoundRef",
    "CourseStats",
    "HoleStats",
    "build_hole_stats",
    "compute_course_stats",
    "rank_holes",
]
