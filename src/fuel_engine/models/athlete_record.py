"""Full athlete snapshot as loaded from the store."""

from __future__ import annotations

from dataclasses import dataclass, field

from fuel_engine.models.assessment import Assessment
from fuel_engine.models.race_plan import RacePlanRecord
from fuel_engine.models.session import TrainingSession


@dataclass(frozen=True)
class AthleteRecord:
    """Assessment, session history and plan history read in one snapshot."""

    assessment: Assessment | None = None
    sessions: tuple[TrainingSession, ...] = field(default_factory=tuple)
    plans: tuple[RacePlanRecord, ...] = field(default_factory=tuple)

    @property
    def display_name(self) -> str:
        if self.assessment is None:
            return "Unassessed athlete"
        return self.assessment.profile.name

    def recent_sessions(self, limit: int) -> tuple[TrainingSession, ...]:
        """Most recent sessions first (by date, then log order)."""
        indexed = sorted(
            enumerate(self.sessions),
            key=lambda pair: (pair[1].session_date, pair[0]),
            reverse=True,
        )
        return tuple(s for _, s in indexed[:limit])

    def latest_plan(self) -> RacePlanRecord | None:
        return self.plans[-1] if self.plans else None
