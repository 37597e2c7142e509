"""Caller-owned competition roster.

The roster holds participants and batches and is passed explicitly to whatever
needs a leaderboard or a comparison. Ranking and comparison never modify it.
"""

import logging
from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field

from typerank.scoring.comparator import compare_participants
from typerank.scoring.models import ComparisonResult, Participant
from typerank.scoring.ranker import rank_participants
from typerank.storage.exceptions import (
    BatchNotFoundError,
    DuplicateBatchError,
    ParticipantNotFoundError,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Pydantic Models
# ============================================================================


class ParticipantEntry(BaseModel):
    """Validated typing-test result, before scoring."""

    name: str = Field(min_length=1)
    batch: str = ""
    wpm: float = Field(ge=0, description="Words per minute")
    accuracy: float = Field(ge=0, le=100, description="Percentage of correct characters")
    errors: int = Field(ge=0)


class Batch(BaseModel):
    """Named cohort of participants."""

    batch_id: str
    batch_name: str
    participant_ids: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class RosterState(BaseModel):
    """Complete roster state - matches data/roster.yaml schema."""

    last_updated: datetime | None = None
    participants: list[Participant] = Field(default_factory=list)
    batches: list[Batch] = Field(default_factory=list)
    active_batch_id: str | None = None


def generate_batch_id() -> str:
    """Generate a unique batch ID."""
    return f"batch_{uuid4().hex[:8]}"


# ============================================================================
# Roster
# ============================================================================


class Roster:
    """Participants and batches with explicit mutation operations."""

    def __init__(self, state: RosterState | None = None):
        self.state = state or RosterState()

    @property
    def participants(self) -> list[Participant]:
        return list(self.state.participants)

    @property
    def batches(self) -> list[Batch]:
        return list(self.state.batches)

    @property
    def active_batch_id(self) -> str | None:
        return self.state.active_batch_id

    # ------------------------------------------------------------------
    # Participants
    # ------------------------------------------------------------------

    def add_participant(self, entry: ParticipantEntry) -> Participant:
        """Score a new entry and add it, recording membership in its batch."""
        participant = Participant.create(
            name=entry.name,
            batch=entry.batch,
            wpm=entry.wpm,
            accuracy=entry.accuracy,
            errors=entry.errors,
        )
        self.state.participants.append(participant)

        for batch in self.state.batches:
            if batch.batch_name == participant.batch:
                batch.participant_ids.append(participant.id)

        logger.info(
            f"Added participant {participant.id} ({participant.name}) "
            f"score={participant.final_score}"
        )
        return participant

    def remove_participant(self, participant_id: str) -> Participant:
        participant = self.get_participant(participant_id)

        self.state.participants = [
            p for p in self.state.participants if p.id != participant_id
        ]
        for batch in self.state.batches:
            batch.participant_ids = [
                pid for pid in batch.participant_ids if pid != participant_id
            ]

        logger.info(f"Removed participant {participant_id}")
        return participant

    def get_participant(self, participant_id: str) -> Participant:
        for participant in self.state.participants:
            if participant.id == participant_id:
                return participant
        raise ParticipantNotFoundError(
            f"Participant not found: {participant_id}", key=participant_id
        )

    def participants_in(self, batch_name: str) -> list[Participant]:
        """Participants whose batch label matches exactly."""
        return [p for p in self.state.participants if p.batch == batch_name]

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------

    def create_batch(self, batch_name: str) -> Batch:
        """Create a batch; the first batch created becomes the active one."""
        if any(b.batch_name == batch_name for b in self.state.batches):
            raise DuplicateBatchError(f"Batch already exists: {batch_name}", key=batch_name)

        batch = Batch(
            batch_id=generate_batch_id(),
            batch_name=batch_name,
            participant_ids=[p.id for p in self.participants_in(batch_name)],
        )
        self.state.batches.append(batch)

        if self.state.active_batch_id is None:
            self.state.active_batch_id = batch.batch_id

        logger.info(f"Created batch {batch.batch_id} ({batch_name})")
        return batch

    def delete_batch(self, batch_id: str) -> Batch:
        """Delete a batch together with every participant labelled with it."""
        batch = self.get_batch(batch_id)

        self.state.batches = [b for b in self.state.batches if b.batch_id != batch_id]
        before = len(self.state.participants)
        self.state.participants = [
            p for p in self.state.participants if p.batch != batch.batch_name
        ]
        if self.state.active_batch_id == batch_id:
            self.state.active_batch_id = None

        logger.info(
            f"Deleted batch {batch_id} ({batch.batch_name}) and "
            f"{before - len(self.state.participants)} participants"
        )
        return batch

    def get_batch(self, batch_id: str) -> Batch:
        for batch in self.state.batches:
            if batch.batch_id == batch_id:
                return batch
        raise BatchNotFoundError(f"Batch not found: {batch_id}", key=batch_id)

    def set_active_batch(self, batch_id: str | None) -> None:
        if batch_id is not None:
            self.get_batch(batch_id)
        self.state.active_batch_id = batch_id

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def ranked(self, batch_id: str | None = None) -> list[Participant]:
        """Ranked leaderboard, scoped to a batch when its ID resolves.

        An unknown batch ID falls back to the whole roster.
        """
        if batch_id is None:
            return rank_participants(self.state.participants)

        try:
            batch = self.get_batch(batch_id)
        except BatchNotFoundError:
            logger.warning(f"Unknown batch {batch_id}, ranking full roster")
            return rank_participants(self.state.participants)

        return rank_participants(self.state.participants, batch=batch.batch_name)

    def compare(self, participant_a_id: str, participant_b_id: str) -> ComparisonResult:
        return compare_participants(
            self.get_participant(participant_a_id),
            self.get_participant(participant_b_id),
        )
