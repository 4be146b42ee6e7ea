from golfstats.rounds.summary import build_round_summary, format_to_par

from .factories import make_round


def test_total_par_and_diff() -> None:
    summary = build_round_summary(make_round(totalScore=40))

    assert summary.total_par == 36
    assert summary.diff == 4
    assert summary.diff_str == "+4"


def test_even_and_under_par() -> None:
    assert build_round_summary(make_round(totalScore=36)).diff_str == "E"

    under = build_round_summary(make_round(totalScore=34))
    assert under.diff == -2
    assert under.diff_str == "-2"


def test_format_to_par() -> None:
    assert [format_to_par(v) for v in (3, 0, -1)] == ["+3", "E", "-1"]


def test_counts() -> None:
    summary = build_round_summary(make_round())

    assert summary.putts == 17
    assert summary.fairways == 4
    assert summary.fairway_total == 7
    assert summary.girs == 5
    assert summary.bunker_holes == 0
    assert summary.sand_saves == 0
    assert summary.feet_of_putts_made == 0


def test_bunkers_and_sand_saves() -> None:
    round_ = make_round()
    round_.holes[0].bunker = True  # bogey, no save
    round_.holes[1].bunker = True  # par, save

    summary = build_round_summary(round_)

    assert summary.bunker_holes == 2
    assert summary.sand_saves == 1


def test_feet_of_putts_made_uses_last_recorded_distance() -> None:
    round_ = make_round()
    round_.holes[0].putt_distances = [20, 3]
    round_.holes[6].putt_distances = [15]
    round_.holes[8].putt_distances = [9, None]

    assert build_round_summary(round_).feet_of_putts_made == 27


def test_serializes_with_camel_case() -> None:
    dumped = build_round_summary(make_round()).model_dump(by_alias=True)

    assert dumped["diffStr"] == "+4"
    assert dumped["fairwayTotal"] == 7
    assert dumped["roundId"] == "1"
