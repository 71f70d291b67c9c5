"""Snapshot backends: load the whole athlete document, replace it whole.

The repository never patches a document in place. Each write replaces the
full snapshot, so readers see either the old or the new state.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from athlete_store.exceptions import PersistenceUnavailable, RecordFormatError

logger = logging.getLogger(__name__)


class SnapshotStore(Protocol):
    """Load-snapshot / replace-snapshot capability the repository needs."""

    def load_snapshot(self) -> dict[str, Any]:
        ...

    def replace_snapshot(self, snapshot: dict[str, Any]) -> None:
        ...

    def quarantine(self) -> None:
        ...


class MemoryStore:
    """In-process store, used by tests and the demo shell."""

    def __init__(self, snapshot: dict[str, Any] | None = None) -> None:
        self._snapshot: dict[str, Any] = copy.deepcopy(snapshot) if snapshot else {}

    def load_snapshot(self) -> dict[str, Any]:
        return copy.deepcopy(self._snapshot)

    def replace_snapshot(self, snapshot: dict[str, Any]) -> None:
        self._snapshot = copy.deepcopy(snapshot)

    def quarantine(self) -> None:
        self._snapshot = {}


class JsonFileStore:
    """One JSON document per athlete on local disk.

    Writes go to a temp file in the same directory and are moved into place
    with ``os.replace``, which is atomic on POSIX and Windows.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load_snapshot(self) -> dict[str, Any]:
        """Read the document. Missing file → empty snapshot.

        Raises:
            PersistenceUnavailable: The file exists but cannot be read.
            RecordFormatError: The file is not a JSON object.
        """
        if not self.path.exists():
            return {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise RecordFormatError(f"{self.path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise PersistenceUnavailable(
                f"Cannot read {self.path}: {exc}", path=str(self.path)
            ) from exc

        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RecordFormatError(f"Malformed JSON in {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise RecordFormatError(
                f"Expected a JSON object in {self.path}, got {type(data).__name__}"
            )
        return data

    def replace_snapshot(self, snapshot: dict[str, Any]) -> None:
        """Atomically replace the document.

        Raises:
            PersistenceUnavailable: The directory or file cannot be written.
        """
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(snapshot, f, indent=2)
            os.replace(tmp_name, self.path)
        except (OSError, TypeError, ValueError) as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceUnavailable(
                f"Cannot write {self.path}: {exc}", path=str(self.path)
            ) from exc
        logger.debug("Wrote snapshot to %s", self.path)

    def quarantine(self) -> None:
        """Move a corrupt document aside to ``<name>.corrupt``."""
        if not self.path.exists():
            return
        target = self.path.with_name(self.path.name + ".corrupt")
        try:
            os.replace(self.path, target)
        except OSError as exc:
            raise PersistenceUnavailable(
                f"Cannot move corrupt {self.path} aside: {exc}", path=str(self.path)
            ) from exc
        logger.warning("Moved corrupt athlete file to %s", target)
