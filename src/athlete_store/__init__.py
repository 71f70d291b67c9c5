"""Athlete record persistence — all storage I/O lives here."""

from athlete_store.backends import JsonFileStore, MemoryStore, SnapshotStore
from athlete_store.exceptions import (
    PersistenceUnavailable,
    RecordFormatError,
    StoreError,
)
from athlete_store.repository import AthleteRepository

__all__ = [
    "AthleteRepository",
    "JsonFileStore",
    "MemoryStore",
    "PersistenceUnavailable",
    "RecordFormatError",
    "SnapshotStore",
    "StoreError",
]
