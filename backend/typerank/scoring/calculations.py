"""Score calculations for typing-test results.

These pure functions turn raw metrics into the composite score used by the
ranker and the comparator. Bounds are not enforced here; callers validate
input before it reaches this module (see `typerank.storage.roster.ParticipantEntry`).
"""

import math
from decimal import ROUND_HALF_UP, Decimal

_TWO_PLACES = Decimal("0.01")

MEDALS = {1: "gold", 2: "silver", 3: "bronze"}


def round2(value: float) -> float:
    """Round to 2 decimal places, halves away from zero."""
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(float(value)))
    # Already at 2 places or coarser (e.g. 1e+30); quantize would overflow precision
    if exact.as_tuple().exponent >= -2:
        return float(value)
    return float(exact.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def compute_final_score(wpm: float, accuracy: float) -> float:
    """Calculate final score: wpm * (accuracy / 100), rounded to 2 places."""
    return round2(wpm * (accuracy / 100))


def medal_for_rank(rank: int, podium_size: int = 3) -> str:
    """Podium medal for a rank: gold, silver, bronze, or default.

    Ranks beyond `podium_size` get no medal.
    """
    if rank > podium_size:
        return "default"
    return MEDALS.get(rank, "default")
