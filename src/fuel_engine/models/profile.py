"""Athlete profile — identity and demographics captured by the assessment."""

from __future__ import annotations

from dataclasses import dataclass, field

from fuel_engine.models.enums import ExperienceLevel, Gender


@dataclass(frozen=True)
class AthleteProfile:
    """Immutable athlete identity.

    Only replaced by re-running the assessment. ``weight_kg`` is carried
    into the carb calculator signature even though the current formula
    does not scale by body mass.
    """

    name: str
    email: str = ""
    age: int = 0
    weight_kg: float = 0.0
    height_cm: float = 0.0
    gender: Gender = Gender.UNSPECIFIED
    primary_sport: str = ""
    experience: ExperienceLevel = ExperienceLevel.BEGINNER
    target_events: tuple[str, ...] = field(default_factory=tuple)
