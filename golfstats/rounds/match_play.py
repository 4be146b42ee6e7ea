"""Point and hole tallies for hole-by-hole match play results."""

from __future__ import annotations

import logging
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field

from golfstats.utils.numbers import round_half_up

from .models import MatchResult, Round

_LOG = logging.getLogger(__name__)

MATCH_POINTS: dict[MatchResult, float] = {
    MatchResult.WIN: 1.0,
    MatchResult.DRAW: 0.5,
    MatchResult.LOSS: 0.0,
}


class MatchStats(BaseModel):
    matches_played: int = Field(default=0, serialization_alias="matchesPlayed")
    total_points: float = Field(default=0.0, serialization_alias="totalPoints")
    total_match_holes: int = Field(default=0, serialization_alias="totalMatchHoles")
    holes_won: int = Field(default=0, serialization_alias="holesWon")
    holes_drawn: int = Field(default=0, serialization_alias="holesDrawn")
    holes_lost: int = Field(default=0, serialization_alias="holesLost")
    avg_points_per_match: float = Field(
        default=0.0, serialization_alias="avgPointsPerMatch"
    )
    win_pct: float = Field(default=0.0, serialization_alias="winPct")
    draw_pct: float = Field(default=0.0, serialization_alias="drawPct")
    loss_pct: float = Field(default=0.0, serialization_alias="lossPct")
    points_per_9: float = Field(default=0.0, serialization_alias="pointsPer9")

    model_config = ConfigDict(populate_by_name=True)


def _share(part: int, total: int) -> float:
    return round_half_up(part / total * 100, 1) if total else 0.0


def compute_match_play_stats(rounds: Sequence[Round]) -> MatchStats:
    tally = {result: 0 for result in MatchResult}
    matches = 0
    points = 0.0

    for round_ in rounds:
        if not round_.has_match_results:
            continue
        matches += 1
        for hole in round_.holes:
            if hole.match_result is None:
                continue
            tally[hole.match_result] += 1
            points += MATCH_POINTS[hole.match_result]

    holes = sum(tally.values())
    _LOG.debug("match play: %d matches, %d holes", matches, holes)

    return MatchStats(
        matches_played=matches,
        total_points=points,
        total_match_holes=holes,
        holes_won=tally[MatchResult.WIN],
        holes_drawn=tally[MatchResult.DRAW],
        holes_lost=tally[MatchResult.LOSS],
        avg_points_per_match=round_half_up(points / matches, 1) if matches else 0.0,
        win_pct=_share(tally[MatchResult.WIN], holes),
        draw_pct=_share(tally[MatchResult.DRAW], holes),
        loss_pct=_share(tally[MatchResult.LOSS], holes),
        points_per_9=round_half_up(points / holes * 9, 1) if holes else 0.0,
    )


__all__ = ["MATCH_POINTS", "MatchStats", "compute_match_play_stats"]
