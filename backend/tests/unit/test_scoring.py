"""
Unit Tests: Score Calculator

Test cases:
- Final score formula and 2-place rounding
- Shared performance ordering
- Complete-tie (re-test) detection
- Podium medals
"""

import math

from typerank.scoring import (
    compare_performance,
    compute_final_score,
    is_retest_required,
    medal_for_rank,
)


def test_final_score_formula() -> None:
    assert compute_final_score(52, 92) == 47.84
    assert compute_final_score(60, 95) == 57.0
    assert compute_final_score(55, 98) == 53.9


def test_final_score_zero_inputs() -> None:
    assert compute_final_score(0, 100) == 0
    assert compute_final_score(100, 0) == 0


def test_final_score_rounds_half_away_from_zero() -> None:
    # 10.125 is exact in binary; banker's rounding would give 10.12
    assert compute_final_score(10.125, 100) == 10.13
    assert compute_final_score(33.333, 100) == 33.33


def test_final_score_nan_passes_through() -> None:
    assert math.isnan(compute_final_score(float("nan"), 90))


def test_ordering_precedence(make_participant) -> None:
    high_score = make_participant("High", 60, 95, 10)
    low_score = make_participant("Low", 55, 98, 0)
    assert compare_performance(high_score, low_score) == -1
    assert compare_performance(low_score, high_score) == 1

    # 50 * 90% == 45 * 100% == 45.0; accuracy breaks the tie
    precise = make_participant("Precise", 45, 100, 4)
    fast = make_participant("Fast", 50, 90, 0)
    assert precise.final_score == fast.final_score
    assert compare_performance(precise, fast) == -1

    clean = make_participant("Clean", 50, 90, 2)
    sloppy = make_participant("Sloppy", 50, 90, 5)
    assert compare_performance(clean, sloppy) == -1
    assert compare_performance(sloppy, clean) == 1


def test_retest_required_only_on_complete_tie(make_participant) -> None:
    a = make_participant("A", 50, 90, 3)
    b = make_participant("B", 50, 90, 3)
    c = make_participant("C", 50, 90, 4)
    assert is_retest_required(a, b)
    assert not is_retest_required(a, c)


def test_medal_for_rank() -> None:
    assert medal_for_rank(1) == "gold"
    assert medal_for_rank(2) == "silver"
    assert medal_for_rank(3) == "bronze"
    assert medal_for_rank(4) == "default"


def test_final_score_handles_very_large_speed() -> None:
    assert compute_final_score(1e30, 100) == 1e30
    assert compute_final_score(2e26, 50) == 1e26
    assert compute_final_score(123456789012345.67, 100) == 123456789012345.67


def test_medal_respects_podium_size() -> None:
    assert medal_for_rank(1, podium_size=1) == "gold"
    assert medal_for_rank(2, podium_size=1) == "default"
    assert medal_for_rank(3, podium_size=2) == "default"
