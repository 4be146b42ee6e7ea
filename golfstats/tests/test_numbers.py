import pytest

from golfstats.utils import per_nine, pct, pct_or_zero, ratio, round_half_up


@pytest.mark.parametrize(
    "value, places, expected",
    [(2.5, 0, 3), (3.5, 0, 4), (0.45, 1, 0.5), (41.25, 1, 41.3), (-1.5, 0, -2)],
)
def test_round_half_up(value: float, places: int, expected: float) -> None:
    assert round_half_up(value, places) == expected


def test_pct() -> None:
    assert pct(1, 8) == 13
    assert pct(5, 9) == 56
    assert pct(0, 0) is None
    assert pct_or_zero(0, 0) == 0


def test_ratio_and_per_nine() -> None:
    assert ratio(7, 2) == 3.5
    assert ratio(1, 3, 2) == 0.33
    assert ratio(1, 0) is None
    assert per_nine(34, 18) == 17
    assert per_nine(6, 12) == 4.5
    assert per_nine(5, 0) is None
