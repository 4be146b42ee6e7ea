"""Golf round analytics: scoring, short game, putting, handicap and trends."""

from golfstats.courses import CourseStats, compute_course_stats
from golfstats.goals import GOAL_DEFS, GoalStatus, get_goal_status
from golfstats.rounds import (
    Course,
    HoleResult,
    MatchStats,
    Round,
    RoundSummary,
    Stats,
    build_round_summary,
    compute_handicap,
    compute_match_play_stats,
    compute_stats,
    filter_rounds,
)
from golfstats.trends import TrendPoint, compute_moving_average, compute_trend_data

__all__ = [
    "Course",
    "CourseStats",
    "GOAL_DEFS",
    "GoalStatus",
    "HoleResult",
    "MatchStats",
    "Round",
    "RoundSummary",
    "Stats",
    "TrendPoint",
    "build_round_summary",
    "compute_course_stats",
    "compute_handicap",
    "compute_match_play_stats",
    "compute_moving_average",
    "compute_stats",
    "compute_trend_data",
    "filter_rounds",
    "get_goal_status",
]
