"""Custom exception hierarchy for the athlete store."""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for all athlete_store errors."""


class PersistenceUnavailable(StoreError):
    """The backing store could not be read or written (I/O failure)."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class RecordFormatError(StoreError):
    """A stored document or record is malformed and was rejected."""
