from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel

from golfstats.config import get_settings
from golfstats.courses.stats import compute_course_stats
from golfstats.goals import GOAL_DEFS, GoalKey, goal_status_for
from golfstats.rounds.filters import RoundFilter
from golfstats.rounds.handicap import compute_handicap
from golfstats.rounds.match_play import compute_match_play_stats
from golfstats.rounds.stats import compute_stats
from golfstats.rounds.summary import build_round_summary
from golfstats.store import CourseNotFound, ExportFormatError, ExportNotFound, RoundStore
from golfstats.trends import TREND_KPIS, compute_moving_average, compute_trend_data

LOGGER = logging.getLogger(__name__)


def _dump(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True)
    if isinstance(payload, list):
        return [_dump(item) for item in payload]
    if isinstance(payload, dict):
        return {key: _dump(value) for key, value in payload.items()}
    return payload


def _emit(payload: Any) -> None:
    print(json.dumps(_dump(payload), indent=2, sort_keys=False))


def _round_filter(args: argparse.Namespace) -> RoundFilter:
    return RoundFilter(
        start_date=args.start,
        end_date=args.end,
        count=args.count,
        course_id=args.course,
        round_type=args.round_type,
    )


def _parse_targets(values: Sequence[str]) -> Dict[GoalKey, float]:
    targets: Dict[GoalKey, float] = {}
    for item in values:
        key, sep, raw = item.partition("=")
        if not sep:
            raise ValueError(f"target must look like KEY=VALUE: {item!r}")
        targets[GoalKey(key.strip())] = float(raw)
    return targets


def _cmd_stats(store: RoundStore, args: argparse.Namespace) -> Any:
    rounds = store.list_rounds(_round_filter(args))
    return {
        "roundsCount": len(rounds),
        "handicap": compute_handicap(rounds),
        "stats": compute_stats(rounds),
    }


def _cmd_course(store: RoundStore, args: argparse.Namespace) -> Any:
    course = store.get_course(args.course_id)
    return compute_course_stats(course.id, store.all_rounds(), course)


def _cmd_trend(store: RoundStore, args: argparse.Namespace) -> Any:
    series = compute_trend_data(store.list_rounds(_round_filter(args)), args.kpi)
    window = args.window or get_settings().trend_window
    return {
        "kpi": args.kpi,
        "window": window,
        "series": series,
        "movingAverage": compute_moving_average(series, window),
    }


def _cmd_matches(store: RoundStore, args: argparse.Namespace) -> Any:
    return compute_match_play_stats(store.list_rounds(_round_filter(args)))


def _cmd_rounds(store: RoundStore, args: argparse.Namespace) -> Any:
    return [build_round_summary(r) for r in store.list_rounds(_round_filter(args))]


def _cmd_goals(store: RoundStore, args: argparse.Namespace) -> Any:
    stats = compute_stats(store.list_rounds(_round_filter(args)))
    results: List[Dict[str, Any]] = []
    for key, target in _parse_targets(args.target).items():
        goal = GOAL_DEFS[key]
        value = stats.value(key.value)
        status = goal_status_for(key, value, target)
        results.append(
            {
                "key": key.value,
                "label": goal.label,
                "unit": goal.unit,
                "value": value,
                "target": target,
                "status": status.value if status else None,
            }
        )
    return results


def _add_filter_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--start", dest="start", help="Earliest date (YYYY-MM-DD)")
    parser.add_argument("--end", dest="end", help="Latest date (YYYY-MM-DD)")
    parser.add_argument(
        "--count", dest="count", default=None, help="Most recent N rounds or 'all'"
    )
    parser.add_argument("--course", dest="course", help="Course id or 'all'")
    parser.add_argument(
        "--round-type", dest="round_type", help="Round type or 'all'"
    )


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="golfstats", description="Golf round analytics over a tracker export"
    )
    parser.add_argument(
        "--data", dest="data_file", help="Path to the tracker's JSON export"
    )
    parser.add_argument(
        "--log-level", dest="log_level", default=None, help="Logging level"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    stats = sub.add_parser("stats", help="Aggregate stats and handicap")
    _add_filter_args(stats)
    stats.set_defaults(handler=_cmd_stats)

    course = sub.add_parser("course", help="Per-course and per-hole stats")
    course.add_argument("course_id")
    course.set_defaults(handler=_cmd_course)

    trend = sub.add_parser("trend", help="KPI series with moving average")
    trend.add_argument("kpi", choices=TREND_KPIS)
    trend.add_argument("--window", dest="window", type=int, default=None)
    _add_filter_args(trend)
    trend.set_defaults(handler=_cmd_trend)

    matches = sub.add_parser("matches", help="Match play tallies")
    _add_filter_args(matches)
    matches.set_defaults(handler=_cmd_matches)

    rounds = sub.add_parser("rounds", help="One summary per round, newest first")
    _add_filter_args(rounds)
    rounds.set_defaults(handler=_cmd_rounds)

    goals = sub.add_parser("goals", help="Classify KPIs against targets")
    goals.add_argument(
        "--target",
        dest="target",
        action="append",
        default=[],
        help="KPI target as KEY=VALUE (repeatable)",
    )
    _add_filter_args(goals)
    goals.set_defaults(handler=_cmd_goals)

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    level = args.log_level or get_settings().log_level
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO))

    store = RoundStore(args.data_file)
    try:
        _emit(args.handler(store, args))
    except ExportNotFound as exc:
        print(f"export file not found: {exc}", file=sys.stderr)
        return 1
    except ExportFormatError as exc:
        print(f"invalid export: {exc}", file=sys.stderr)
        return 1
    except CourseNotFound as exc:
        print(f"unknown course: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
