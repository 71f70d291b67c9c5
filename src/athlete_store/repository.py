"""Athlete repository — assessment, session and plan persistence.

Reads are forgiving: a failed or malformed load is logged and treated as
empty/absent so the readiness scorer never crashes on bad storage. Writes
are strict: any failure raises PersistenceUnavailable to the caller.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Callable, TypeVar

from fuel_engine.models.assessment import Assessment
from fuel_engine.models.athlete_record import AthleteRecord
from fuel_engine.models.race_plan import RacePlanRecord
from fuel_engine.models.session import TrainingSession
from fuel_engine.serialization.records import (
    assessment_from_dict,
    assessment_to_dict,
    plan_record_from_dict,
    plan_record_to_dict,
    session_from_dict,
    session_to_dict,
)

from athlete_store.backends import JsonFileStore, SnapshotStore
from athlete_store.exceptions import PersistenceUnavailable, RecordFormatError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SNAPSHOT_VERSION = 1
_ASSESSMENT_KEY = "assessment"
_SESSIONS_KEY = "sessions"
_PLANS_KEY = "plans"

# Errors a *_from_dict parser raises on malformed input
_PARSE_ERRORS = (KeyError, ValueError, TypeError)


def empty_snapshot() -> dict[str, Any]:
    return {
        "version": SNAPSHOT_VERSION,
        _ASSESSMENT_KEY: None,
        _SESSIONS_KEY: [],
        _PLANS_KEY: [],
    }


class AthleteRepository:
    """Facade over a SnapshotStore for one athlete's records.

    Usage:
        repo = AthleteRepository.from_path("~/.fuel_engine/athlete.json")
        repo.append_session(session)
        record = repo.load_record()
    """

    def __init__(self, store: SnapshotStore) -> None:
        self._store = store
        self._lock = threading.RLock()

    @classmethod
    def from_path(cls, path: Path | str) -> "AthleteRepository":
        return cls(JsonFileStore(Path(path).expanduser()))

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def load_record(self) -> AthleteRecord:
        """Load assessment, sessions and plans from one consistent snapshot."""
        snapshot = self._read_snapshot()
        return AthleteRecord(
            assessment=self._parse_assessment(snapshot),
            sessions=tuple(self._parse_list(snapshot, _SESSIONS_KEY, session_from_dict)),
            plans=tuple(self._parse_list(snapshot, _PLANS_KEY, plan_record_from_dict)),
        )

    def load_assessment(self) -> Assessment | None:
        return self._parse_assessment(self._read_snapshot())

    def load_sessions(self) -> list[TrainingSession]:
        return self._parse_list(self._read_snapshot(), _SESSIONS_KEY, session_from_dict)

    def load_plans(self) -> list[RacePlanRecord]:
        return self._parse_list(self._read_snapshot(), _PLANS_KEY, plan_record_from_dict)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save_assessment(self, assessment: Assessment) -> None:
        """Create or overwrite the single active assessment."""
        with self._lock:
            snapshot = self._snapshot_for_update()
            snapshot[_ASSESSMENT_KEY] = assessment_to_dict(assessment)
            self._store.replace_snapshot(snapshot)
        logger.info("Saved assessment for %s", assessment.profile.name)

    def delete_assessment(self) -> None:
        with self._lock:
            snapshot = self._snapshot_for_update()
            snapshot[_ASSESSMENT_KEY] = None
            self._store.replace_snapshot(snapshot)
        logger.info("Deleted assessment")

    def append_session(self, session: TrainingSession) -> None:
        with self._lock:
            snapshot = self._snapshot_for_update()
            snapshot[_SESSIONS_KEY].append(session_to_dict(session))
            self._store.replace_snapshot(snapshot)
        logger.info(
            "Logged session %s (%s, %.0f min)",
            session.session_id,
            session.session_date.isoformat(),
            session.duration_min,
        )

    def append_plan(self, record: RacePlanRecord) -> None:
        with self._lock:
            snapshot = self._snapshot_for_update()
            snapshot[_PLANS_KEY].append(plan_record_to_dict(record))
            self._store.replace_snapshot(snapshot)
        logger.info("Saved race plan %r", record.plan.race_name)

    def reset_all(self) -> None:
        """Clear assessment, sessions and plans in a single snapshot write."""
        with self._lock:
            self._store.replace_snapshot(empty_snapshot())
        logger.info("Reset all athlete data")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read_snapshot(self) -> dict[str, Any]:
        """Snapshot for read paths: failures degrade to an empty snapshot."""
        with self._lock:
            try:
                raw = self._store.load_snapshot()
            except PersistenceUnavailable as exc:
                logger.warning("Athlete store unavailable, treating as empty: %s", exc)
                return empty_snapshot()
            except RecordFormatError as exc:
                logger.warning("Rejected malformed athlete store: %s", exc)
                return empty_snapshot()
        return _normalise(raw)

    def _snapshot_for_update(self) -> dict[str, Any]:
        """Snapshot for read-modify-write paths.

        A malformed document is quarantined and replaced; an unreadable one
        raises, since writing would discard data we could not see.
        """
        try:
            raw = self._store.load_snapshot()
        except RecordFormatError as exc:
            logger.warning("Replacing malformed athlete store: %s", exc)
            self._store.quarantine()
            raw = {}
        return _normalise(raw)

    @staticmethod
    def _parse_assessment(snapshot: dict[str, Any]) -> Assessment | None:
        raw = snapshot.get(_ASSESSMENT_KEY)
        if raw is None:
            return None
        try:
            return assessment_from_dict(raw)
        except _PARSE_ERRORS as exc:
            logger.warning("Rejected malformed stored assessment: %s", exc)
            return None

    @staticmethod
    def _parse_list(
        snapshot: dict[str, Any], key: str, parse: Callable[[Any], T]
    ) -> list[T]:
        items: list[T] = []
        for index, raw in enumerate(snapshot.get(key, [])):
            try:
                items.append(parse(raw))
            except _PARSE_ERRORS as exc:
                logger.warning("Dropped malformed %s entry #%d: %s", key, index, exc)
        return items


def _normalise(raw: dict[str, Any]) -> dict[str, Any]:
    """Fill missing keys and coerce non-list collections to empty lists."""
    snapshot = empty_snapshot()
    snapshot.update(raw)
    for key in (_SESSIONS_KEY, _PLANS_KEY):
        if not isinstance(snapshot.get(key), list):
            logger.warning("Stored %s is not a list; ignoring it", key)
            snapshot[key] = []
    return snapshot
