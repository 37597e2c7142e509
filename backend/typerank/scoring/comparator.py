"""Head-to-head comparison of two participants.

Builds the per-metric table, picks the overall winner with the shared
ordering, and writes the explanation and the coaching message for the loser.
"""

import logging
from typing import Callable

from typerank.scoring import messages
from typerank.scoring.models import (
    ComparisonResult,
    MetricOutcome,
    MetricWinner,
    Participant,
)
from typerank.scoring.ordering import compare_performance

logger = logging.getLogger(__name__)

# Score gap below which a loss counts as a close match
CLOSE_MATCH_THRESHOLD = 3

# (metric label, attribute, higher is better), in display order of the table
_METRIC_TABLE: list[tuple[str, str, bool]] = [
    ("WPM (Speed)", "wpm", True),
    ("Accuracy", "accuracy", True),
    ("Errors", "errors", False),
    ("Final Score", "final_score", True),
]

# (reason, attribute, higher is better), in display order of the explanation
_REASONS: list[tuple[str, str, bool]] = [
    ("Higher Final Score", "final_score", True),
    ("Better Accuracy", "accuracy", True),
    ("Faster Typing Speed", "wpm", True),
    ("Fewer Errors", "errors", False),
]

# First matching predicate picks the message; order matters.
_MOTIVATION_RULES: list[tuple[Callable[[Participant, Participant], bool], str]] = [
    (
        lambda loser, winner: abs(winner.final_score - loser.final_score)
        < CLOSE_MATCH_THRESHOLD,
        messages.CLOSE_MATCH,
    ),
    (lambda loser, winner: loser.accuracy < winner.accuracy, messages.ACCURACY_COACHING),
    (lambda loser, winner: loser.wpm < winner.wpm, messages.SPEED_PRACTICE),
    (lambda loser, winner: loser.errors > winner.errors, messages.ERROR_REDUCTION),
]


def _format_value(value: float) -> str:
    """Render a metric without a trailing '.0' (57.0 -> '57', 53.9 -> '53.9')."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _metric_winner(a_value: float, b_value: float, higher_is_better: bool) -> MetricWinner:
    if a_value == b_value:
        return "Tie"
    a_ahead = a_value > b_value if higher_is_better else a_value < b_value
    return "A" if a_ahead else "B"


def build_metric_table(a: Participant, b: Participant) -> list[MetricOutcome]:
    """Per-metric outcomes, independent of the overall verdict."""
    return [
        MetricOutcome(
            metric=label,
            value_a=getattr(a, attr),
            value_b=getattr(b, attr),
            winner=_metric_winner(getattr(a, attr), getattr(b, attr), higher_is_better),
        )
        for label, attr, higher_is_better in _METRIC_TABLE
    ]


def explain_win(winner: Participant, loser: Participant) -> str:
    """List every metric the winner is strictly ahead on."""
    reasons = []
    for reason, attr, higher_is_better in _REASONS:
        w_value = getattr(winner, attr)
        l_value = getattr(loser, attr)
        ahead = w_value > l_value if higher_is_better else w_value < l_value
        if ahead:
            reasons.append(f"{reason} ({_format_value(w_value)} vs {_format_value(l_value)})")

    if not reasons:
        return messages.NO_REASON_FALLBACK

    return messages.REASON_SEPARATOR.join(reasons)


def motivation_for(loser: Participant, winner: Participant) -> str:
    """Pick the coaching message for the participant who lost."""
    for predicate, message in _MOTIVATION_RULES:
        if predicate(loser, winner):
            return message
    return messages.GENERIC_ENCOURAGEMENT


def compare_participants(a: Participant, b: Participant) -> ComparisonResult:
    """Compare two participants head to head."""
    metrics = build_metric_table(a, b)

    order = compare_performance(a, b)
    if order == 0:
        logger.debug(f"Complete tie between {a.id} and {b.id}")
        return ComparisonResult(
            winner=None,
            loser=None,
            metrics=metrics,
            explanation=messages.TIE_EXPLANATION,
            motivation=messages.TIE_MOTIVATION,
        )

    winner, loser = (a, b) if order < 0 else (b, a)
    logger.debug(f"Comparison {a.id} vs {b.id}: winner={winner.id}")

    return ComparisonResult(
        winner=winner,
        loser=loser,
        metrics=metrics,
        explanation=explain_win(winner, loser),
        motivation=motivation_for(loser, winner),
    )
