"""Shared pytest fixtures."""

import pytest

from typerank.config import get_settings
from typerank.scoring.models import Participant


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point settings at a per-test data directory."""
    data_dir = tmp_path / "data"
    monkeypatch.setenv("DATA_DIR", str(data_dir))
    monkeypatch.delenv("LOGFIRE_TOKEN", raising=False)
    get_settings.cache_clear()
    yield data_dir
    get_settings.cache_clear()


@pytest.fixture
def make_participant():
    """Factory for scored participants with stable, readable IDs."""

    def _make(
        name: str,
        wpm: float,
        accuracy: float,
        errors: int,
        batch: str = "Morning",
    ) -> Participant:
        return Participant.create(
            name=name,
            batch=batch,
            wpm=wpm,
            accuracy=accuracy,
            errors=errors,
            participant_id=f"p_{name.lower()}",
        )

    return _make
