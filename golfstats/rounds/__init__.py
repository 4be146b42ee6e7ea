from .filters import RoundFilter, filter_rounds
from .handicap import compute_handicap
from .match_play import MatchStats, compute_match_play_stats
from .models import (
    ApproachResult,
    Course,
    FairwayDirection,
    HoleDefinition,
    HoleResult,
    MatchResult,
    Round,
    RoundType,
    Tee,
    TeeColor,
)
from .stats import Stats, compute_stats
from .summary import RoundSummary, build_round_summary

__all__ = [
    "ApproachResult",
    "Course",
    "FairwayDirection",
    "HoleDefinition",
    "HoleResult",
    "MatchResult",
    "MatchStats",
    "Round",
    "RoundFilter",
    "RoundSummary",
    "RoundType",
    "Stats",
    "Tee",
    "TeeColor",
    "build_round_summary",
    "compute_handicap",
    "compute_match_play_stats",
    "compute_stats",
    "filter_rounds",
]
