"""Roster state persistence with atomic writes to data/roster.yaml."""

import logging
import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import yaml

from typerank.config import get_settings
from typerank.storage.roster import Roster, RosterState

logger = logging.getLogger(__name__)


# ============================================================================
# Helper Functions
# ============================================================================


def get_data_dir() -> Path:
    """Get the data directory path from settings."""
    settings = get_settings()
    data_dir = settings.data_dir

    if not data_dir.exists():
        raise FileNotFoundError(
            f"Data directory not found: {data_dir}. "
            "Run 'python -m typerank init' to create it."
        )

    return data_dir


def _get_roster_path() -> Path:
    """Get the path to roster.yaml."""
    return get_data_dir() / get_settings().storage.roster_file


# ============================================================================
# Public API
# ============================================================================


def load_roster(path: Path | None = None) -> Roster:
    """Load the roster from data/roster.yaml (or `path`)."""
    roster_path = path or _get_roster_path()

    if not roster_path.exists():
        logger.info(f"Roster file not found: {roster_path}. Starting with an empty roster.")
        return Roster()

    try:
        with open(roster_path, "r", encoding="utf-8") as f:
            raw_data = yaml.safe_load(f)

        if not raw_data:
            logger.warning(f"Empty roster file: {roster_path}. Starting with an empty roster.")
            return Roster()

        state = RosterState(**raw_data)
        logger.debug(f"Loaded roster from {roster_path}")
        return Roster(state)

    except yaml.YAMLError as e:
        logger.error(f"Corrupted YAML in roster file: {e}")
        raise
    except Exception as e:
        logger.error(f"Failed to load roster: {e}")
        raise


def save_roster(roster: Roster, path: Path | None = None) -> Path:
    """Atomically save the roster to data/roster.yaml (or `path`).

    Writes to a temp file in the same directory and renames it over the
    target, so a crash mid-write leaves the previous file intact.
    """
    roster_path = path or _get_roster_path()

    roster.state.last_updated = datetime.now(timezone.utc)

    # Ranks are per-view; never persist them
    state_dict = roster.state.model_dump(
        mode="json", exclude={"participants": {"__all__": {"rank"}}}
    )

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=roster_path.parent,
            delete=False,
            suffix=".yaml",
            encoding="utf-8",
        ) as temp_file:
            yaml.dump(
                state_dict,
                temp_file,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )
            temp_path = Path(temp_file.name)

        shutil.move(str(temp_path), str(roster_path))
        logger.debug(f"Saved roster to {roster_path}")
        return roster_path

    except Exception as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        logger.error(f"Failed to save roster: {e}")
        raise
