"""Dashboard and coach-roster view models."""

from __future__ import annotations

from dataclasses import dataclass, field

from fuel_engine.models.enums import ReadinessStatus
from fuel_engine.models.race_plan import RacePlanRecord
from fuel_engine.models.readiness import ReadinessReport
from fuel_engine.models.session import TrainingSession


@dataclass(frozen=True)
class DashboardSummary:
    """Everything the athlete dashboard shows, computed from one snapshot."""

    readiness: ReadinessReport
    athlete_name: str | None = None
    target_carb_rate: float | None = None
    days_until_event: int | None = None
    recent_sessions: tuple[TrainingSession, ...] = field(default_factory=tuple)
    latest_plan: RacePlanRecord | None = None
    session_count: int = 0


@dataclass(frozen=True)
class RosterEntry:
    """One athlete row in the coach roster."""

    name: str
    status: ReadinessStatus
    avg_carb_rate: float
    consistency_pct: int
    session_count: int
    explanation: str = ""
    target_carb_rate: float | None = None
    days_until_event: int | None = None
