"""Exceptions raised by roster operations."""


class RosterError(Exception):
    """Base exception for roster operations."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class ParticipantNotFoundError(RosterError):
    """No participant with the given ID."""

    pass


class BatchNotFoundError(RosterError):
    """No batch with the given ID."""

    pass


class DuplicateBatchError(RosterError):
    """A batch with that name already exists."""

    pass
