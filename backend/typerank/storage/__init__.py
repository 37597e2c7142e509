"""Storage layer for Typerank - caller-owned roster and file persistence.

This package provides:
- Roster management (participants, batches, ranked views, comparisons)
- State persistence (load/save the roster from data/roster.yaml)

All records are Pydantic models; state writes are atomic.
"""

from .exceptions import (
    BatchNotFoundError,
    DuplicateBatchError,
    ParticipantNotFoundError,
    RosterError,
)
from .roster import (
    Batch,
    ParticipantEntry,
    Roster,
    RosterState,
    generate_batch_id,
)
from .state import get_data_dir, load_roster, save_roster

__all__ = [
    # Exceptions
    "RosterError",
    "ParticipantNotFoundError",
    "BatchNotFoundError",
    "DuplicateBatchError",
    # Roster
    "Batch",
    "ParticipantEntry",
    "Roster",
    "RosterState",
    "generate_batch_id",
    # State persistence
    "get_data_dir",
    "load_roster",
    "save_roster",
]
