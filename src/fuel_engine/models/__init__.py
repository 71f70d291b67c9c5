"""Data models for the fuel engine."""

from fuel_engine.models.assessment import Assessment
from fuel_engine.models.athlete_record import AthleteRecord
from fuel_engine.models.enums import (
    ExperienceLevel,
    Gender,
    GISensitivity,
    Humidity,
    Intensity,
    Priority,
    ReadinessStatus,
    Symptom,
    Temperature,
)
from fuel_engine.models.profile import AthleteProfile
from fuel_engine.models.race_plan import RacePlan, RacePlanBlock, RacePlanRecord
from fuel_engine.models.readiness import (
    ReadinessContext,
    ReadinessReport,
    ReadinessTrace,
    ReadinessVerdict,
    RuleResult,
    RuleStatus,
)
from fuel_engine.models.session import TrainingSession

__all__ = [
    "Assessment",
    "AthleteProfile",
    "AthleteRecord",
    "ExperienceLevel",
    "GISensitivity",
    "Gender",
    "Humidity",
    "Intensity",
    "Priority",
    "RacePlan",
    "RacePlanBlock",
    "RacePlanRecord",
    "ReadinessContext",
    "ReadinessReport",
    "ReadinessStatus",
    "ReadinessTrace",
    "ReadinessVerdict",
    "RuleResult",
    "RuleStatus",
    "Symptom",
    "Temperature",
    "TrainingSession",
]
