"""Per-round KPI time series and backward-looking smoothing."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from pydantic import BaseModel

from golfstats.rounds.handicap import compute_handicap
from golfstats.rounds.models import Round
from golfstats.rounds.stats import compute_stats
from golfstats.utils.numbers import round_half_up

_LOG = logging.getLogger(__name__)

HANDICAP_KPI = "handicap"
STAT_KPIS = ("avgScore", "puttsPer9", "fairwayPct", "girPct", "scramblingPct")
TREND_KPIS = (HANDICAP_KPI,) + STAT_KPIS
DEFAULT_WINDOW = 5


class TrendPoint(BaseModel):
    date: str
    value: Optional[float] = None


def _clean(value: float | None) -> float | None:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    return value


def compute_trend_data(all_rounds: Sequence[Round], kpi_key: str) -> List[TrendPoint]:
    """One point per round, oldest first.

    The handicap series recomputes the index over the growing prefix of
    rounds at each step, so it costs O(n^2) in the number of rounds.
    """

    if not all_rounds or kpi_key not in TREND_KPIS:
        if all_rounds:
            _LOG.debug("unknown trend kpi %r", kpi_key)
        return []

    ordered = sorted(all_rounds, key=lambda r: r.date)

    if kpi_key == HANDICAP_KPI:
        return [
            TrendPoint(date=r.date, value=compute_handicap(ordered[: index + 1]))
            for index, r in enumerate(ordered)
        ]

    return [
        TrendPoint(date=r.date, value=_clean(compute_stats([r]).value(kpi_key)))
        for r in ordered
    ]


def compute_moving_average(
    series: Sequence[TrendPoint], window: int = DEFAULT_WINDOW
) -> List[TrendPoint]:
    """Average of up to ``window`` non-null values ending at each point.

    Nulls are skipped rather than counted, so the scan keeps walking back
    until it has ``window`` values or reaches the start of the series.
    """

    smoothed: List[TrendPoint] = []
    for index, point in enumerate(series):
        collected: List[float] = []
        cursor = index
        while cursor >= 0 and len(collected) < window:
            value = series[cursor].value
            if value is not None:
                collected.append(value)
            cursor -= 1
        average = (
            round_half_up(sum(collected) / len(collected), 1) if collected else None
        )
        smoothed.append(TrendPoint(date=point.date, value=average))
    return smoothed


__all__ = [
    "DEFAULT_WINDOW",
    "HANDICAP_KPI",
    "STAT_KPIS",
    "TREND_KPIS",
    "TrendPoint",
    "compute_moving_average",
    "compute_trend_data",
]
