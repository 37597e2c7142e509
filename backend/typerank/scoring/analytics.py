"""Roster overview and per-batch summaries."""

from typing import Iterable

from pydantic import BaseModel

from typerank.scoring.calculations import round2
from typerank.scoring.models import Participant
from typerank.scoring.ranker import rank_participants


class RosterOverview(BaseModel):
    """Headline numbers for the whole roster."""

    total_participants: int
    total_batches: int
    average_score: float
    top_score: float


class BatchSummary(BaseModel):
    """Aggregates for a single batch."""

    batch: str
    participants: int
    average_wpm: float
    average_accuracy: float
    average_score: float
    top_performer: Participant | None = None


def _mean(values: list[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def summarize_roster(participants: Iterable[Participant], total_batches: int) -> RosterOverview:
    values = list(participants)
    scores = [p.final_score for p in values]
    return RosterOverview(
        total_participants=len(values),
        total_batches=total_batches,
        average_score=round2(_mean(scores)),
        top_score=max(scores, default=0.0),
    )


def summarize_batch(participants: Iterable[Participant], batch: str) -> BatchSummary:
    """Aggregate one batch; the top performer is rank 1 of the batch view."""
    ranked = rank_participants(participants, batch=batch)
    return BatchSummary(
        batch=batch,
        participants=len(ranked),
        average_wpm=round2(_mean([p.wpm for p in ranked])),
        average_accuracy=round2(_mean([p.accuracy for p in ranked])),
        average_score=round2(_mean([p.final_score for p in ranked])),
        top_performer=ranked[0] if ranked else None,
    )
