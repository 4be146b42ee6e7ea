from __future__ import annotations

import logging
from dataclasses import dataclass, field
from statistics import mean
from typing import Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from golfstats.utils.numbers import per_nine, pct, pct_or_zero, ratio, round_half_up

from .models import ApproachResult, FairwayDirection, HoleResult, Round

_LOG = logging.getLogger(__name__)

LAG_PUTT_MIN_FEET = 20.0

SCORING_BUCKETS = ("eagle", "birdie", "par", "bogey", "double", "triple")

# (lower bound inclusive, upper bound exclusive, label)
PUTT_DISTANCE_BUCKETS: tuple[tuple[float, float | None, str], ...] = (
    (0.0, 3.0, "Inside 3 ft"),
    (3.0, 6.0, "3-6 ft"),
    (6.0, 10.0, "6-10 ft"),
    (10.0, 15.0, "10-15 ft"),
    (15.0, 20.0, "15-20 ft"),
    (20.0, None, "20+ ft"),
)


class FairwayDistribution(BaseModel):
    left: int
    hit: int
    right: int


class ApproachDistribution(BaseModel):
    gir: int
    long: int
    short: int
    left: int
    right: int


class PuttingBreakdown(BaseModel):
    one_putt: int = Field(serialization_alias="onePutt")
    two_putt: int = Field(serialization_alias="twoPutt")
    three_putt: int = Field(serialization_alias="threePutt")
    three_plus: int = Field(serialization_alias="threePlus")

    model_config = ConfigDict(populate_by_name=True)


class ParTypeScoring(BaseModel):
    avg: float
    vs_par: float = Field(serialization_alias="vsPar")

    model_config = ConfigDict(populate_by_name=True)


class ScoringByPar(BaseModel):
    par3: Optional[ParTypeScoring] = None
    par4: Optional[ParTypeScoring] = None
    par5: Optional[ParTypeScoring] = None


class ScoringDistribution(BaseModel):
    eagle: int = 0
    birdie: int = 0
    par: int = 0
    bogey: int = 0
    double: int = 0
    triple: int = 0
    total: int = 0
    eagle_pct: int = Field(default=0, serialization_alias="eaglePct")
    birdie_pct: int = Field(default=0, serialization_alias="birdiePct")
    par_pct: int = Field(default=0, serialization_alias="parPct")
    bogey_pct: int = Field(default=0, serialization_alias="bogeyPct")
    double_pct: int = Field(default=0, serialization_alias="doublePct")
    triple_pct: int = Field(default=0, serialization_alias="triplePct")

    model_config = ConfigDict(populate_by_name=True)


class PuttMakeBucket(BaseModel):
    label: str
    attempts: int
    made: int
    pct: int


class Stats(BaseModel):
    avg_score: Optional[float] = Field(default=None, serialization_alias="avgScore")

    fairway_pct: Optional[int] = Field(default=None, serialization_alias="fairwayPct")
    fairway_dist: Optional[FairwayDistribution] = Field(
        default=None, serialization_alias="fairwayDist"
    )
    gir_pct: Optional[int] = Field(default=None, serialization_alias="girPct")
    approach_dist: Optional[ApproachDistribution] = Field(
        default=None, serialization_alias="approachDist"
    )

    total_putts: Optional[int] = Field(default=None, serialization_alias="totalPutts")
    avg_putts: Optional[float] = Field(default=None, serialization_alias="avgPutts")
    putts_per_9: Optional[float] = Field(default=None, serialization_alias="puttsPer9")
    putting_breakdown: Optional[PuttingBreakdown] = Field(
        default=None, serialization_alias="puttingBreakdown"
    )
    penalties_per_9: Optional[float] = Field(
        default=None, serialization_alias="penaltiesPer9"
    )

    scrambling_pct: Optional[int] = Field(
        default=None, serialization_alias="scramblingPct"
    )
    sand_save_pct: Optional[int] = Field(
        default=None, serialization_alias="sandSavePct"
    )

    feet_of_putts_made: Optional[float] = Field(
        default=None, serialization_alias="feetOfPuttsMade"
    )
    avg_first_putt_dist: Optional[float] = Field(
        default=None, serialization_alias="avgFirstPuttDist"
    )
    feet_made_per_9: Optional[float] = Field(
        default=None, serialization_alias="feetMadePer9"
    )
    putt_make_rate: Optional[List[PuttMakeBucket]] = Field(
        default=None, serialization_alias="puttMakeRate"
    )

    lag_putt_3_putt_avoid_pct: Optional[int] = Field(
        default=None, serialization_alias="lagPutt3PuttAvoidPct"
    )
    lag_putt_avg_leave: Optional[float] = Field(
        default=None, serialization_alias="lagPuttAvgLeave"
    )
    lag_putt_count: Optional[int] = Field(
        default=None, serialization_alias="lagPuttCount"
    )

    par_conversion_pct: Optional[int] = Field(
        default=None, serialization_alias="parConversionPct"
    )
    bogey_avoidance_pct: Optional[int] = Field(
        default=None, serialization_alias="bogeyAvoidancePct"
    )
    bounce_back_rate: Optional[int] = Field(
        default=None, serialization_alias="bounceBackRate"
    )

    scoring_by_par: Optional[ScoringByPar] = Field(
        default=None, serialization_alias="scoringByPar"
    )
    scoring_avg_par3: Optional[float] = Field(
        default=None, serialization_alias="scoringAvgPar3"
    )
    scoring_avg_par4: Optional[float] = Field(
        default=None, serialization_alias="scoringAvgPar4"
    )
    scoring_avg_par5: Optional[float] = Field(
        default=None, serialization_alias="scoringAvgPar5"
    )
    scoring_distribution: Optional[ScoringDistribution] = Field(
        default=None, serialization_alias="scoringDistribution"
    )

    model_config = ConfigDict(populate_by_name=True)

    def value(self, key: str) -> float | None:
        """Look up a scalar metric by its camelCase key (``"girPct"``)."""

        for name, info in type(self).model_fields.items():
            if key in (name, info.serialization_alias):
                result = getattr(self, name)
                return result if isinstance(result, (int, float)) else None
        return None


@dataclass
class _Counters:
    holes: int = 0
    fairway_opps: int = 0
    fairway_hits: int = 0
    fairway_left: int = 0
    fairway_right: int = 0
    approach_opps: int = 0
    gir: int = 0
    approach_misses: dict[ApproachResult, int] = field(
        default_factory=lambda: {result: 0 for result in ApproachResult}
    )
    putts: int = 0
    holes_with_putts: int = 0
    one_putts: int = 0
    two_putts: int = 0
    three_putts: int = 0
    more_putts: int = 0
    penalties: int = 0
    scramble_opps: int = 0
    scrambles: int = 0
    sand_opps: int = 0
    sand_saves: int = 0
    feet_made: float = 0.0
    made_distances: int = 0
    first_putt_total: float = 0.0
    first_putts: int = 0
    bucket_attempts: list[int] = field(
        default_factory=lambda: [0] * len(PUTT_DISTANCE_BUCKETS)
    )
    bucket_made: list[int] = field(
        default_factory=lambda: [0] * len(PUTT_DISTANCE_BUCKETS)
    )
    lag_opps: int = 0
    lag_successes: int = 0
    lag_leaves: list[float] = field(default_factory=list)
    par_conversions: int = 0
    par_or_better: int = 0
    bounce_opps: int = 0
    bounce_backs: int = 0
    par_scores: dict[int, list[int]] = field(
        default_factory=lambda: {3: [], 4: [], 5: []}
    )
    distribution: dict[str, int] = field(
        default_factory=lambda: {key: 0 for key in SCORING_BUCKETS}
    )


def scoring_bucket(to_par: int) -> str:
    if to_par <= -2:
        return "eagle"
    if to_par == -1:
        return "birdie"
    if to_par == 0:
        return "par"
    if to_par == 1:
        return "bogey"
    if to_par == 2:
        return "double"
    return "triple"


def build_scoring_distribution(holes: Iterable[HoleResult]) -> ScoringDistribution:
    counts = {key: 0 for key in SCORING_BUCKETS}
    total = 0
    for hole in holes:
        counts[scoring_bucket(hole.to_par)] += 1
        total += 1
    return _distribution_from_counts(counts, total)


def _distribution_from_counts(counts: dict[str, int], total: int) -> ScoringDistribution:
    return ScoringDistribution(
        **counts,
        total=total,
        **{f"{key}_pct": pct_or_zero(counts[key], total) for key in SCORING_BUCKETS},
    )


def putt_bucket_index(distance: float) -> int:
    for index, (low, high, _label) in enumerate(PUTT_DISTANCE_BUCKETS):
        if distance >= low and (high is None or distance < high):
            return index
    # Negative distances are out of contract; treat them as tap-ins.
    return 0


def _accumulate_hole(
    counters: _Counters, hole: HoleResult, previous: HoleResult | None
) -> None:
    counters.holes += 1
    par_or_better = hole.score <= hole.par

    if hole.par > 3 and hole.fairway_direction is not None:
        counters.fairway_opps += 1
        if hole.fairway_hit:
            counters.fairway_hits += 1
        if hole.fairway_direction == FairwayDirection.LEFT:
            counters.fairway_left += 1
        elif hole.fairway_direction == FairwayDirection.RIGHT:
            counters.fairway_right += 1

    if hole.approach_result is not None:
        counters.approach_opps += 1
        if hole.gir:
            counters.gir += 1
        elif hole.approach_result != ApproachResult.GIR:
            counters.approach_misses[hole.approach_result] += 1

        if not hole.gir:
            counters.scramble_opps += 1
            if par_or_better:
                counters.scrambles += 1

    counters.putts += hole.putts
    if hole.putts > 0 or hole.approach_result is not None:
        counters.holes_with_putts += 1
        if hole.putts == 1:
            counters.one_putts += 1
        elif hole.putts == 2:
            counters.two_putts += 1
        elif hole.putts == 3:
            counters.three_putts += 1
        elif hole.putts > 3:
            counters.more_putts += 1

    counters.penalties += hole.penalties

    if hole.bunker:
        counters.sand_opps += 1
        if par_or_better:
            counters.sand_saves += 1

    recorded = hole.recorded_putt_distances
    if recorded:
        counters.feet_made += recorded[-1]
        counters.made_distances += 1
        counters.first_putt_total += recorded[0]
        counters.first_putts += 1

        last_index = len(recorded) - 1
        for index, distance in enumerate(recorded):
            bucket = putt_bucket_index(distance)
            counters.bucket_attempts[bucket] += 1
            if index == last_index:
                counters.bucket_made[bucket] += 1

        if recorded[0] >= LAG_PUTT_MIN_FEET:
            counters.lag_opps += 1
            if hole.putts <= 2:
                counters.lag_successes += 1
            if len(recorded) > 1:
                counters.lag_leaves.append(recorded[1])

    if hole.gir and par_or_better:
        counters.par_conversions += 1
    if par_or_better:
        counters.par_or_better += 1

    if hole.par >= 5:
        counters.par_scores[5].append(hole.score)
    elif hole.par in counters.par_scores:
        counters.par_scores[hole.par].append(hole.score)

    counters.distribution[scoring_bucket(hole.to_par)] += 1

    if previous is not None and previous.score > previous.par:
        counters.bounce_opps += 1
        if par_or_better:
            counters.bounce_backs += 1


def _par_type_scoring(scores: Sequence[int], par: int) -> ParTypeScoring | None:
    if not scores:
        return None
    average = sum(scores) / len(scores)
    return ParTypeScoring(
        avg=round_half_up(average, 2), vs_par=round_half_up(average - par, 2)
    )


def _putt_make_rate(counters: _Counters) -> list[PuttMakeBucket] | None:
    if not any(counters.bucket_attempts):
        return None
    return [
        PuttMakeBucket(
            label=label,
            attempts=counters.bucket_attempts[index],
            made=counters.bucket_made[index],
            pct=pct_or_zero(counters.bucket_made[index], counters.bucket_attempts[index]),
        )
        for index, (_low, _high, label) in enumerate(PUTT_DISTANCE_BUCKETS)
    ]


def compute_stats(rounds: Sequence[Round]) -> Stats:
    """Roll a set of rounds into a single metrics bundle.

    Every percentage is gated on its own opportunity count and is ``None``
    when that count is zero. An empty input yields a bundle where every field
    is ``None``.
    """

    if not rounds:
        return Stats()

    counters = _Counters()
    for round_ in rounds:
        previous: HoleResult | None = None
        for hole in round_.holes:
            _accumulate_hole(counters, hole, previous)
            previous = hole

    _LOG.debug(
        "computed stats over %d rounds / %d holes", len(rounds), counters.holes
    )

    holes = counters.holes
    approach = counters.approach_opps
    misses = counters.approach_misses
    by_par = ScoringByPar(
        par3=_par_type_scoring(counters.par_scores[3], 3),
        par4=_par_type_scoring(counters.par_scores[4], 4),
        par5=_par_type_scoring(counters.par_scores[5], 5),
    )

    return Stats(
        avg_score=round_half_up(mean(r.total_score for r in rounds), 1),
        fairway_pct=pct(counters.fairway_hits, counters.fairway_opps),
        fairway_dist=(
            FairwayDistribution(
                left=pct(counters.fairway_left, counters.fairway_opps),
                hit=pct(counters.fairway_hits, counters.fairway_opps),
                right=pct(counters.fairway_right, counters.fairway_opps),
            )
            if counters.fairway_opps
            else None
        ),
        gir_pct=pct(counters.gir, approach),
        approach_dist=(
            ApproachDistribution(
                gir=pct(counters.gir, approach),
                long=pct(misses[ApproachResult.LONG], approach),
                short=pct(misses[ApproachResult.SHORT], approach),
                left=pct(misses[ApproachResult.LEFT], approach),
                right=pct(misses[ApproachResult.RIGHT], approach),
            )
            if approach
            else None
        ),
        total_putts=counters.putts,
        avg_putts=ratio(counters.putts, len(rounds), 1),
        putts_per_9=per_nine(counters.putts, holes),
        putting_breakdown=(
            PuttingBreakdown(
                one_putt=pct(counters.one_putts, counters.holes_with_putts),
                two_putt=pct(counters.two_putts, counters.holes_with_putts),
                three_putt=pct(counters.three_putts, counters.holes_with_putts),
                three_plus=pct(counters.more_putts, counters.holes_with_putts),
            )
            if counters.holes_with_putts
            else None
        ),
        penalties_per_9=per_nine(counters.penalties, holes),
        scrambling_pct=pct(counters.scrambles, counters.scramble_opps),
        sand_save_pct=pct(counters.sand_saves, counters.sand_opps),
        feet_of_putts_made=counters.feet_made if counters.made_distances else None,
        avg_first_putt_dist=ratio(counters.first_putt_total, counters.first_putts, 1),
        feet_made_per_9=(
            per_nine(counters.feet_made, holes) if counters.made_distances else None
        ),
        putt_make_rate=_putt_make_rate(counters),
        lag_putt_3_putt_avoid_pct=pct(counters.lag_successes, counters.lag_opps),
        lag_putt_avg_leave=ratio(
            sum(counters.lag_leaves), len(counters.lag_leaves), 1
        ),
        lag_putt_count=counters.lag_opps,
        par_conversion_pct=pct(counters.par_conversions, counters.gir),
        bogey_avoidance_pct=pct(counters.par_or_better, holes),
        bounce_back_rate=pct(counters.bounce_backs, counters.bounce_opps),
        scoring_by_par=by_par,
        scoring_avg_par3=by_par.par3.avg if by_par.par3 else None,
        scoring_avg_par4=by_par.par4.avg if by_par.par4 else None,
        scoring_avg_par5=by_par.par5.avg if by_par.par5 else None,
        scoring_distribution=_distribution_from_counts(counters.distribution, holes),
    )


__all__ = [
    "ApproachDistribution",
    "FairwayDistribution",
    "LAG_PUTT_MIN_FEET",
    "PUTT_DISTANCE_BUCKETS",
    "ParTypeScoring",
    "PuttMakeBucket",
    "PuttingBreakdown",
    "SCORING_BUCKETS",
    "ScoringByPar",
    "ScoringDistribution",
    "Stats",
    "build_scoring_distribution",
    "compute_stats",
    "putt_bucket_index",
    "scoring_bucket",
]
