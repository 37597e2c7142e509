"""Pydantic models for participants and comparison results."""

from datetime import datetime, timezone
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from typerank.scoring.calculations import compute_final_score

MetricWinner = Literal["A", "B", "Tie"]


def generate_participant_id() -> str:
    """Generate a unique participant ID."""
    return f"p_{uuid4().hex[:8]}"


class Participant(BaseModel):
    """A scored competition entry.

    Records are frozen: `final_score` is derived once at creation and can never
    drift from (wpm, accuracy). `rank` is only set on the copies handed out by
    the ranker.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    batch: str
    wpm: float
    accuracy: float
    errors: int
    final_score: float
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    rank: int | None = None

    @classmethod
    def create(
        cls,
        name: str,
        batch: str,
        wpm: float,
        accuracy: float,
        errors: int,
        participant_id: str | None = None,
    ) -> "Participant":
        """Build a new participant, deriving the final score from wpm and accuracy."""
        return cls(
            id=participant_id or generate_participant_id(),
            name=name,
            batch=batch,
            wpm=wpm,
            accuracy=accuracy,
            errors=errors,
            final_score=compute_final_score(wpm, accuracy),
        )


class MetricOutcome(BaseModel):
    """One row of the head-to-head table."""

    metric: str
    value_a: float
    value_b: float
    winner: MetricWinner


class ComparisonResult(BaseModel):
    """Verdict of a pairwise comparison."""

    winner: Participant | None = None
    loser: Participant | None = None
    metrics: list[MetricOutcome] = Field(default_factory=list)
    explanation: str
    motivation: str

    @property
    def is_tie(self) -> bool:
        return self.winner is None
