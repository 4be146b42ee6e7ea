from .numbers import per_nine, pct, pct_or_zero, ratio, round_half_up

__all__ = ["per_nine", "pct", "pct_or_zero", "ratio", "round_half_up"]
