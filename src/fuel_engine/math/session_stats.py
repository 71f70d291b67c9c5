"""Session-history aggregates: carb rate, symptom burden, consistency.

All functions take a sequence of TrainingSession and return plain floats
or ints. Empty histories yield 0 rather than NaN.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Sequence

import numpy as np

from fuel_engine.models.enums import (
    CONSISTENCY_WINDOW_DAYS,
    SYMPTOM_SEVERITY_MAX,
    SYMPTOM_SEVERITY_MIN,
)
from fuel_engine.models.session import TrainingSession


def average_carb_rate(sessions: Sequence[TrainingSession]) -> float:
    """Mean per-session carbohydrate rate in g/hr (0.0 with no sessions).

    Each session is normalised to g/hr before averaging, so a short
    session counts as much as a long one.
    """
    if not sessions:
        return 0.0
    rates = np.array([s.carb_rate for s in sessions], dtype=np.float64)
    return float(np.mean(rates))


def average_symptom_severity(sessions: Sequence[TrainingSession]) -> float:
    """Mean symptom severity clamped to [0, 10] (0.0 with no sessions)."""
    if not sessions:
        return 0.0
    severities = np.array([s.symptom_severity for s in sessions], dtype=np.float64)
    return float(np.clip(np.mean(severities), SYMPTOM_SEVERITY_MIN, SYMPTOM_SEVERITY_MAX))


def consistency_window(today: date) -> tuple[date, date]:
    """Inclusive (start, end) dates of the trailing consistency window."""
    return today - timedelta(days=CONSISTENCY_WINDOW_DAYS - 1), today


def consistency_pct(sessions: Sequence[TrainingSession], today: date) -> int:
    """Share of the trailing 7 days with at least one logged session.

    Multiple sessions on one date count once; sessions dated in the future
    are ignored. Result is a whole percent capped at 100.
    """
    start, end = consistency_window(today)
    active_days = {s.session_date for s in sessions if start <= s.session_date <= end}
    if not active_days:
        return 0
    pct = len(active_days) / CONSISTENCY_WINDOW_DAYS * 100.0
    return min(100, int(round(pct)))


def carb_gap(target_rate: float, average_rate: float) -> float:
    """Absolute distance between target and achieved carb rate (g/hr)."""
    return abs(target_rate - average_rate)
