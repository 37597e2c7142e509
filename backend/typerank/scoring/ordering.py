"""Shared "who performed better" ordering.

Precedence: final score (higher first), accuracy (higher first), errors
(lower first). The ranker sorts with this and the comparator picks its winner
with it, so a change here applies to both.
"""

from functools import cmp_to_key

from typerank.scoring.models import Participant


def compare_performance(a: Participant, b: Participant) -> int:
    """Return -1 if `a` ranks ahead of `b`, 1 if behind, 0 on a complete tie."""
    if a.final_score != b.final_score:
        return -1 if a.final_score > b.final_score else 1
    if a.accuracy != b.accuracy:
        return -1 if a.accuracy > b.accuracy else 1
    if a.errors != b.errors:
        return -1 if a.errors < b.errors else 1
    return 0


performance_key = cmp_to_key(compare_performance)


def is_retest_required(a: Participant, b: Participant) -> bool:
    """True when two participants tie on every ranking key."""
    return compare_performance(a, b) == 0
