"""Environment-variable-based configuration for the athlete store and app shell."""

from __future__ import annotations

import os
from pathlib import Path

DATA_DIR: Path = Path(os.environ.get("FUEL_DATA_DIR", "~/.fuel_engine")).expanduser()
ATHLETE_FILE: Path = Path(
    os.environ.get("FUEL_ATHLETE_FILE", str(DATA_DIR / "athlete.json"))
).expanduser()
LOG_LEVEL: str = os.environ.get("FUEL_LOG_LEVEL", "INFO").upper()
RECENT_SESSIONS: int = int(os.environ.get("FUEL_RECENT_SESSIONS", "5"))
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
