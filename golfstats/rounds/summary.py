from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .models import Round


class RoundSummary(BaseModel):
    round_id: str = Field(serialization_alias="roundId")
    course_name: str | None = Field(default=None, serialization_alias="courseName")
    date: str
    total_score: int = Field(serialization_alias="totalScore")

    total_par: int = Field(serialization_alias="totalPar")
    diff: int
    diff_str: str = Field(serialization_alias="diffStr")
    putts: int
    fairways: int
    fairway_total: int = Field(serialization_alias="fairwayTotal")
    girs: int
    bunker_holes: int = Field(serialization_alias="bunkerHoles")
    sand_saves: int = Field(serialization_alias="sandSaves")
    feet_of_putts_made: float = Field(serialization_alias="feetOfPuttsMade")

    model_config = ConfigDict(populate_by_name=True)


def format_to_par(diff: int) -> str:
    if diff > 0:
        return f"+{diff}"
    if diff == 0:
        return "E"
    return str(diff)


def build_round_summary(round_: Round) -> RoundSummary:
    holes = round_.holes
    total_par = round_.total_par
    diff = round_.total_score - total_par

    return RoundSummary(
        round_id=round_.id,
        course_name=round_.course_name,
        date=round_.date,
        total_score=round_.total_score,
        total_par=total_par,
        diff=diff,
        diff_str=format_to_par(diff),
        putts=sum(h.putts for h in holes),
        fairways=sum(1 for h in holes if h.par > 3 and h.fairway_hit),
        fairway_total=sum(
            1 for h in holes if h.par > 3 and h.fairway_direction is not None
        ),
        girs=sum(1 for h in holes if h.gir),
        bunker_holes=sum(1 for h in holes if h.bunker),
        sand_saves=sum(1 for h in holes if h.bunker and h.score <= h.par),
        feet_of_putts_made=sum(h.made_putt_distance or 0 for h in holes),
    )


__all__ = ["RoundSummary", "build_round_summary", "format_to_par"]
