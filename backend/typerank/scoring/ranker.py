"""Leaderboard ranking.

On-demand computation of participant rankings.

Functions:
- rank_participants(): Sort by performance, assign dense 1-based ranks
- top_n(): First N entries of a ranked view
"""

import logging
from typing import Iterable

from typerank.scoring.models import Participant
from typerank.scoring.ordering import performance_key

logger = logging.getLogger(__name__)


def rank_participants(
    participants: Iterable[Participant],
    batch: str | None = None,
) -> list[Participant]:
    """Rank participants, optionally scoped to one batch label.

    Returns copies with `rank` set to 1..N in output order. Records that tie on
    every key keep their input order and still get consecutive ranks. The input
    is left untouched.
    """
    pool = list(participants)
    if batch is not None:
        pool = [p for p in pool if p.batch == batch]

    ordered = sorted(pool, key=performance_key)

    ranked = [
        participant.model_copy(update={"rank": rank})
        for rank, participant in enumerate(ordered, 1)
    ]
    logger.debug(f"Ranked {len(ranked)} participants (batch={batch!r})")
    return ranked


def top_n(
    participants: Iterable[Participant],
    n: int,
    batch: str | None = None,
) -> list[Participant]:
    """Return the first `n` entries of the ranked view."""
    if n <= 0:
        return []
    return rank_participants(participants, batch=batch)[:n]
