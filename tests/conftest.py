"""Shared test fixtures: athlete profiles, assessments, session histories."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable

import pytest

from athlete_store import AthleteRepository, MemoryStore
from fuel_engine.engine import FuelEngine, build_assessment
from fuel_engine.models.assessment import Assessment
from fuel_engine.models.enums import (
    ExperienceLevel,
    Gender,
    GISensitivity,
    Intensity,
    Symptom,
)
from fuel_engine.models.profile import AthleteProfile
from fuel_engine.models.session import TrainingSession

TODAY = date(2026, 5, 20)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def runner_profile() -> AthleteProfile:
    """35-year-old intermediate marathoner, 62 kg."""
    return AthleteProfile(
        name="Sarah",
        email="sarah@example.com",
        age=35,
        weight_kg=62.0,
        height_cm=168.0,
        gender=Gender.FEMALE,
        primary_sport="Running",
        experience=ExperienceLevel.INTERMEDIATE,
        target_events=("City Marathon",),
    )


@pytest.fixture
def moderate_assessment(runner_profile: AthleteProfile) -> Assessment:
    """120-min moderate assessment → 120 g total, 60 g/hr target."""
    return build_assessment(
        runner_profile,
        duration_min=120,
        intensity=Intensity.MODERATE,
        gi_sensitivity=GISensitivity.MODERATE,
        symptoms={Symptom.BLOATING},
        event_date=TODAY + timedelta(days=30),
        created_at=datetime(2026, 5, 1, 9, 0),
    )


@pytest.fixture
def make_session() -> Callable[..., TrainingSession]:
    """Factory for sessions; defaults to 60 min at 60 g/hr on TODAY."""

    def _make(
        carbs_g: float = 60.0,
        duration_min: float = 60.0,
        days_ago: int = 0,
        symptom_severity: int = 0,
        **kwargs,
    ) -> TrainingSession:
        return TrainingSession(
            session_date=TODAY - timedelta(days=days_ago),
            sport=kwargs.pop("sport", "Running"),
            duration_min=duration_min,
            carbs_g=carbs_g,
            symptom_severity=symptom_severity,
            **kwargs,
        )

    return _make


@pytest.fixture
def memory_repository() -> AthleteRepository:
    return AthleteRepository(MemoryStore())


@pytest.fixture
def engine(memory_repository: AthleteRepository) -> FuelEngine:
    return FuelEngine(memory_repository)
