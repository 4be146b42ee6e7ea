from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class TeeColor(str, Enum):
    RED = "red"
    WHITE = "white"
    BLUE = "blue"


class FairwayDirection(str, Enum):
    LEFT = "left"
    HIT = "hit"
    RIGHT = "right"


class ApproachResult(str, Enum):
    GIR = "gir"
    LONG = "long"
    SHORT = "short"
    LEFT = "left"
    RIGHT = "right"


class MatchResult(str, Enum):
    WIN = "win"
    DRAW = "draw"
    LOSS = "loss"


class RoundType(str, Enum):
    NORMAL = "normal"
    LEAGUE = "league"
    MATCH_PLAY = "match_play"
    CASUAL = "casual"
    SCRAMBLE = "scramble"


HANDICAP_ROUND_TYPES = frozenset(
    {RoundType.NORMAL, RoundType.LEAGUE, RoundType.MATCH_PLAY}
)
MATCH_ROUND_TYPES = frozenset({RoundType.LEAGUE, RoundType.MATCH_PLAY})


class HoleDefinition(BaseModel):
    number: int
    par: int

    model_config = ConfigDict(frozen=True)


class Tee(BaseModel):
    color: TeeColor
    enabled: bool = False
    rating: Optional[float] = None
    slope: Optional[int] = None
    total_yardage: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("total_yardage", "totalYardage"),
        serialization_alias="totalYardage",
    )
    yardages: List[Optional[int]] = Field(default_factory=list)
    handicaps: List[Optional[int]] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class Course(BaseModel):
    id: str
    name: str
    location: str | None = None
    num_holes: int = Field(
        default=18,
        validation_alias=AliasChoices("num_holes", "numHoles"),
        serialization_alias="numHoles",
    )
    holes: List[HoleDefinition] = Field(default_factory=list)
    tees: Dict[TeeColor, Tee] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _fill_tee_colors(cls, data: Any) -> Any:
        # Exports key tees by color and often omit the color inside the entry.
        if isinstance(data, dict) and isinstance(data.get("tees"), dict):
            tees = {}
            for color, tee in data["tees"].items():
                if isinstance(tee, dict) and "color" not in tee:
                    tee = {**tee, "color": color}
                tees[color] = tee
            data = {**data, "tees": tees}
        return data

    @property
    def total_par(self) -> int:
        return sum(hole.par for hole in self.holes)

    def tee(self, color: TeeColor | str) -> Tee | None:
        return self.tees.get(TeeColor(color))


class HoleResult(BaseModel):
    number: int
    par: int
    score: int
    putts: int = 0
    putt_distances: List[Optional[float]] = Field(
        default_factory=list,
        validation_alias=AliasChoices("putt_distances", "puttDistances"),
        serialization_alias="puttDistances",
    )
    penalties: int = 0
    fairway_hit: bool = Field(
        default=False,
        validation_alias=AliasChoices("fairway_hit", "fairwayHit"),
        serialization_alias="fairwayHit",
    )
    fairway_direction: Optional[FairwayDirection] = Field(
        default=None,
        validation_alias=AliasChoices("fairway_direction", "fairwayDirection"),
        serialization_alias="fairwayDirection",
    )
    gir: bool = False
    approach_result: Optional[ApproachResult] = Field(
        default=None,
        validation_alias=AliasChoices("approach_result", "approachResult"),
        serialization_alias="approachResult",
    )
    bunker: bool = False
    match_result: Optional[MatchResult] = Field(
        default=None,
        validation_alias=AliasChoices("match_result", "matchResult"),
        serialization_alias="matchResult",
    )

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _normalize_legacy_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        # Older exports recorded bunker holes as ``sandSave``.
        legacy = data.pop("sandSave", None)
        legacy = data.pop("sand_save", legacy)
        if legacy and not data.get("bunker"):
            data["bunker"] = True
        for key in ("putts", "penalties", "putt_distances", "puttDistances"):
            if key in data and data[key] is None:
                del data[key]
        return data

    @property
    def recorded_putt_distances(self) -> list[float]:
        return [dist for dist in self.putt_distances if dist is not None]

    @property
    def first_putt_distance(self) -> float | None:
        recorded = self.recorded_putt_distances
        return recorded[0] if recorded else None

    @property
    def made_putt_distance(self) -> float | None:
        recorded = self.recorded_putt_distances
        return recorded[-1] if recorded else None

    @property
    def to_par(self) -> int:
        return self.score - self.par


class Round(BaseModel):
    id: str
    course_id: str = Field(
        validation_alias=AliasChoices("course_id", "courseId"),
        serialization_alias="courseId",
    )
    course_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("course_name", "courseName"),
        serialization_alias="courseName",
    )
    num_holes: int = Field(
        default=18,
        validation_alias=AliasChoices("num_holes", "numHoles"),
        serialization_alias="numHoles",
    )
    date: str
    tees: str | None = None
    round_type: RoundType = Field(
        default=RoundType.NORMAL,
        validation_alias=AliasChoices("round_type", "roundType"),
        serialization_alias="roundType",
    )
    course_rating: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("course_rating", "courseRating"),
        serialization_alias="courseRating",
    )
    slope_rating: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("slope_rating", "slopeRating"),
        serialization_alias="slopeRating",
    )
    total_score: int = Field(
        validation_alias=AliasChoices("total_score", "totalScore"),
        serialization_alias="totalScore",
    )
    holes: List[HoleResult] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _default_round_type(cls, data: Any) -> Any:
        if isinstance(data, dict):
            for key in ("roundType", "round_type"):
                if key in data and data[key] is None:
                    data = {k: v for k, v in data.items() if k != key}
        return data

    @property
    def total_par(self) -> int:
        return sum(hole.par for hole in self.holes)

    @property
    def has_match_results(self) -> bool:
        return any(hole.match_result is not None for hole in self.holes)


__all__ = [
    "ApproachResult",
    "Course",
    "FairwayDirection",
    "HANDICAP_ROUND_TYPES",
    "HoleDefinition",
    "HoleResult",
    "MATCH_ROUND_TYPES",
    "MatchResult",
    "Round",
    "RoundType",
    "Tee",
    "TeeColor",
]
