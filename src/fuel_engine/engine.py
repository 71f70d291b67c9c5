"""FuelEngine — wires the pure calculators to an injected athlete repository."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, Iterable, Protocol

from fuel_engine.advice.recommendations import generate_recommendations
from fuel_engine.exceptions import SaveFailedError
from fuel_engine.math.carb_target import target_carbs
from fuel_engine.models.assessment import Assessment
from fuel_engine.models.athlete_record import AthleteRecord
from fuel_engine.models.dashboard import DashboardSummary
from fuel_engine.models.enums import GISensitivity, Humidity, Intensity, Symptom, Temperature
from fuel_engine.models.profile import AthleteProfile
from fuel_engine.models.race_plan import RacePlan, RacePlanRecord
from fuel_engine.models.readiness import ReadinessReport
from fuel_engine.models.session import TrainingSession
from fuel_engine.planner.race_plan import generate_race_plan
from fuel_engine.readiness import ReadinessScorer

logger = logging.getLogger(__name__)

_DEFAULT_RECENT_SESSIONS = 5


class AthleteRepositoryProtocol(Protocol):
    """Persistence operations the engine relies on."""

    def load_record(self) -> AthleteRecord: ...
    def load_assessment(self) -> Assessment | None: ...
    def save_assessment(self, assessment: Assessment) -> None: ...
    def append_session(self, session: TrainingSession) -> None: ...
    def load_plans(self) -> list[RacePlanRecord]: ...
    def append_plan(self, record: RacePlanRecord) -> None: ...
    def reset_all(self) -> None: ...


def build_assessment(
    profile: AthleteProfile,
    duration_min: float,
    intensity: Intensity,
    gi_sensitivity: GISensitivity,
    symptoms: Iterable[Symptom] = (),
    event_date: date | None = None,
    created_at: datetime | None = None,
) -> Assessment:
    """Run the carb calculator and recommendation generator once.

    The target is rounded to one decimal here, at the point it becomes a
    persisted value. Recommendations use the unrounded target.
    """
    symptom_set = frozenset(symptoms)
    total = target_carbs(profile.weight_kg, duration_min, intensity, gi_sensitivity)
    recommendations = generate_recommendations(total, duration_min, gi_sensitivity, symptom_set)
    return Assessment(
        profile=profile,
        duration_min=duration_min,
        intensity=intensity,
        gi_sensitivity=gi_sensitivity,
        target_carbs_g=round(total, 1),
        symptoms=symptom_set,
        recommendations=tuple(recommendations),
        event_date=event_date,
        created_at=created_at or datetime.now(),
    )


class FuelEngine:
    """Orchestrates assessment, session logging, readiness and race planning.

    Usage:
        engine = FuelEngine(AthleteRepository.from_path(ATHLETE_FILE))
        assessment = engine.complete_assessment(profile, 120, Intensity.MODERATE,
                                                GISensitivity.NONE)
        summary = engine.dashboard()
    """

    def __init__(
        self,
        repository: AthleteRepositoryProtocol,
        scorer: ReadinessScorer | None = None,
        recent_sessions: int = _DEFAULT_RECENT_SESSIONS,
    ) -> None:
        self.repository = repository
        self.scorer = scorer or ReadinessScorer()
        self.recent_sessions = recent_sessions

    # ------------------------------------------------------------------
    # Assessment
    # ------------------------------------------------------------------

    def complete_assessment(
        self,
        profile: AthleteProfile,
        duration_min: float,
        intensity: Intensity,
        gi_sensitivity: GISensitivity,
        symptoms: Iterable[Symptom] = (),
        event_date: date | None = None,
    ) -> Assessment:
        """Compute and persist a new assessment, replacing any previous one.

        Raises:
            InvalidInputError: If duration_min <= 0.
            SaveFailedError: If persisting fails; ``.result`` holds the assessment.
        """
        assessment = build_assessment(
            profile, duration_min, intensity, gi_sensitivity, symptoms, event_date
        )
        logger.info(
            "Assessment for %s: %.1f g over %.0f min (%s)",
            profile.name,
            assessment.target_carbs_g,
            duration_min,
            intensity.label,
        )
        self._persist(self.repository.save_assessment, assessment, "assessment")
        return assessment

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def log_session(self, session: TrainingSession) -> TrainingSession:
        """Append a validated session to the history.

        Raises:
            SaveFailedError: If persisting fails; ``.result`` holds the session.
        """
        self._persist(self.repository.append_session, session, "session")
        return session

    # ------------------------------------------------------------------
    # Readiness / dashboard
    # ------------------------------------------------------------------

    def readiness(self, today: date | None = None) -> ReadinessReport:
        record = self.repository.load_record()
        return self.scorer.score(record.assessment, record.sessions, today)

    def dashboard(self, today: date | None = None) -> DashboardSummary:
        """Score readiness and collect dashboard context from one snapshot."""
        today = today or date.today()
        record = self.repository.load_record()
        report = self.scorer.score(record.assessment, record.sessions, today)
        assessment = record.assessment

        return DashboardSummary(
            readiness=report,
            athlete_name=assessment.profile.name if assessment else None,
            target_carb_rate=report.target_carb_rate,
            days_until_event=assessment.days_until_event(today) if assessment else None,
            recent_sessions=record.recent_sessions(self.recent_sessions),
            latest_plan=record.latest_plan(),
            session_count=len(record.sessions),
        )

    # ------------------------------------------------------------------
    # Race planning
    # ------------------------------------------------------------------

    def plan_race(
        self,
        race_name: str,
        duration_min: float,
        temperature: Temperature = Temperature.NORMAL,
        humidity: Humidity = Humidity.NORMAL,
        intensity: Intensity | None = None,
        aid_station_interval_km: float | None = None,
    ) -> RacePlan:
        """Generate (but do not save) a race plan using the stored assessment."""
        return generate_race_plan(
            race_name=race_name,
            duration_min=duration_min,
            temperature=temperature,
            humidity=humidity,
            intensity=intensity,
            aid_station_interval_km=aid_station_interval_km,
            assessment=self.repository.load_assessment(),
        )

    def save_race_plan(self, plan: RacePlan, now: datetime | None = None) -> RacePlanRecord:
        """Append a generated plan to the plan history.

        Raises:
            SaveFailedError: If persisting fails; ``.result`` holds the record.
        """
        record = RacePlanRecord(plan=plan, created_at=now or datetime.now())
        self._persist(self.repository.append_plan, record, "race plan")
        return record

    def plan_history(self) -> list[RacePlanRecord]:
        return self.repository.load_plans()

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Delete assessment, sessions and plans."""
        self.repository.reset_all()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _persist(save: Callable[[Any], None], item: Any, kind: str) -> None:
        try:
            save(item)
        except Exception as exc:
            logger.error("Failed to save %s: %s", kind, exc)
            raise SaveFailedError(f"Could not save {kind}: {exc}", result=item) from exc
