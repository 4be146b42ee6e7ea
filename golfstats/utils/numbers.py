"""Rounding helpers matching the browser tracker's number formatting.

Stored dashboards were produced with ``Math.round`` and ``Number.toFixed``,
both of which round halves away from zero on the exact binary value. Python's
``round`` uses banker's rounding instead, so reported values go through these
helpers.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int = 0) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def pct(numerator: float, denominator: float) -> int | None:
    """Integer percentage, ``None`` when there was no opportunity."""

    if not denominator:
        return None
    return int(round_half_up(numerator / denominator * 100))


def pct_or_zero(numerator: float, denominator: float) -> int:
    value = pct(numerator, denominator)
    return value if value is not None else 0


def per_nine(total: float, holes: int) -> float | None:
    """Normalize a running total to a nine-hole rate, one decimal."""

    if not holes:
        return None
    return round_half_up(total / holes * 9, 1)


def ratio(numerator: float, denominator: float, places: int = 1) -> float | None:
    if not denominator:
        return None
    return round_half_up(numerator / denominator, places)


__all__ = ["per_nine", "pct", "pct_or_zero", "ratio", "round_half_up"]
