"""Scoring core: final score, ranking, and head-to-head comparison."""

from .calculations import compute_final_score, medal_for_rank, round2
from .models import ComparisonResult, MetricOutcome, Participant
from .ordering import compare_performance, is_retest_required, performance_key
from .ranker import rank_participants, top_n
from .comparator import CLOSE_MATCH_THRESHOLD, compare_participants

__all__ = [
    "compute_final_score",
    "medal_for_rank",
    "round2",
    "ComparisonResult",
    "MetricOutcome",
    "Participant",
    "compare_performance",
    "is_retest_required",
    "performance_key",
    "rank_participants",
    "top_n",
    "CLOSE_MATCH_THRESHOLD",
    "compare_participants",
]
