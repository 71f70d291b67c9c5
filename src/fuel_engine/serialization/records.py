"""JSON-compatible dict conversion for persisted records.

Enums are stored by lower-case label, dates and datetimes as ISO-8601
strings. All functions are pure (no I/O). ``*_from_dict`` functions raise
KeyError / ValueError / TypeError on malformed input; callers that read
untrusted storage are expected to catch those.
"""

from __future__ import annotations

import csv
import io
from datetime import date, datetime
from typing import Any

from fuel_engine.models.assessment import Assessment
from fuel_engine.models.enums import (
    ExperienceLevel,
    Gender,
    GISensitivity,
    Humidity,
    Intensity,
    Symptom,
    Temperature,
)
from fuel_engine.models.profile import AthleteProfile
from fuel_engine.models.race_plan import RacePlan, RacePlanBlock, RacePlanRecord
from fuel_engine.models.session import TrainingSession


def _iso(value: date | datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _opt_date(value: Any) -> date | None:
    return date.fromisoformat(value) if value else None


def _opt_datetime(value: Any) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def _require_dict(data: Any, kind: str) -> dict:
    if not isinstance(data, dict):
        raise TypeError(f"{kind} must be a JSON object, got {type(data).__name__}")
    return data


def _whole_number(value: Any, field: str) -> int:
    """int() that refuses to truncate fractional scores such as 7.9."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"{field} must be a number, got {type(value).__name__}")
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"{field} must be a whole number, got {value!r}")
    return int(number)


# ---------------------------------------------------------------------------
# Profile / assessment
# ---------------------------------------------------------------------------


def profile_to_dict(profile: AthleteProfile) -> dict:
    return {
        "name": profile.name,
        "email": profile.email,
        "age": profile.age,
        "weight_kg": profile.weight_kg,
        "height_cm": profile.height_cm,
        "gender": profile.gender.label,
        "primary_sport": profile.primary_sport,
        "experience": profile.experience.label,
        "target_events": list(profile.target_events),
    }


def profile_from_dict(data: Any) -> AthleteProfile:
    data = _require_dict(data, "Profile")
    return AthleteProfile(
        name=str(data["name"]),
        email=str(data.get("email", "")),
        age=int(data.get("age", 0)),
        weight_kg=float(data.get("weight_kg", 0.0)),
        height_cm=float(data.get("height_cm", 0.0)),
        gender=Gender.from_label(data.get("gender", "unspecified")),
        primary_sport=str(data.get("primary_sport", "")),
        experience=ExperienceLevel.from_label(data.get("experience", "beginner")),
        target_events=tuple(str(e) for e in data.get("target_events", [])),
    )


def assessment_to_dict(assessment: Assessment) -> dict:
    return {
        "profile": profile_to_dict(assessment.profile),
        "duration_min": assessment.duration_min,
        "intensity": assessment.intensity.label,
        "gi_sensitivity": assessment.gi_sensitivity.label,
        # Symptom declaration order keeps the stored list stable
        "symptoms": [s.label for s in Symptom if s in assessment.symptoms],
        "target_carbs_g": assessment.target_carbs_g,
        "recommendations": list(assessment.recommendations),
        "event_date": _iso(assessment.event_date),
        "created_at": _iso(assessment.created_at),
    }


def assessment_from_dict(data: Any) -> Assessment:
    data = _require_dict(data, "Assessment")
    return Assessment(
        profile=profile_from_dict(data["profile"]),
        duration_min=float(data["duration_min"]),
        intensity=Intensity.from_label(data["intensity"]),
        gi_sensitivity=GISensitivity.from_label(data["gi_sensitivity"]),
        target_carbs_g=float(data["target_carbs_g"]),
        symptoms=frozenset(Symptom.from_label(s) for s in data.get("symptoms", [])),
        recommendations=tuple(str(r) for r in data.get("recommendations", [])),
        event_date=_opt_date(data.get("event_date")),
        created_at=_opt_datetime(data.get("created_at")),
    )


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------


def session_to_dict(session: TrainingSession) -> dict:
    return {
        "id": session.session_id,
        "date": session.session_date.isoformat(),
        "sport": session.sport,
        "duration_min": session.duration_min,
        "carbs_g": session.carbs_g,
        "fluids_ml": session.fluids_ml,
        "symptom_severity": session.symptom_severity,
        "perceived_exertion": session.perceived_exertion,
        "notes": session.notes,
    }


def session_from_dict(data: Any) -> TrainingSession:
    data = _require_dict(data, "Session")
    return TrainingSession(
        session_id=str(data["id"]),
        session_date=date.fromisoformat(data["date"]),
        sport=str(data.get("sport", "")),
        duration_min=float(data["duration_min"]),
        carbs_g=float(data["carbs_g"]),
        fluids_ml=float(data.get("fluids_ml", 0.0)),
        symptom_severity=_whole_number(data.get("symptom_severity", 0), "symptom_severity"),
        perceived_exertion=_whole_number(
            data.get("perceived_exertion", 5), "perceived_exertion"
        ),
        notes=str(data.get("notes", "")),
    )


# ---------------------------------------------------------------------------
# Race plans
# ---------------------------------------------------------------------------


def race_plan_to_dict(plan: RacePlan) -> dict:
    return {
        "race_name": plan.race_name,
        "duration_min": plan.duration_min,
        "aid_station_interval_km": plan.aid_station_interval_km,
        "intensity": plan.intensity.label,
        "temperature": plan.temperature.label,
        "humidity": plan.humidity.label,
        "hourly_carbs_g": plan.hourly_carbs_g,
        "hourly_fluids_ml": plan.hourly_fluids_ml,
        "gi_sensitivity": plan.gi_sensitivity.label if plan.gi_sensitivity else None,
        "blocks": [
            {"time": b.offset_label, "carbs": b.carbs, "fluids": b.fluids}
            for b in plan.blocks
        ],
    }


def race_plan_from_dict(data: Any) -> RacePlan:
    data = _require_dict(data, "Race plan")
    gi = data.get("gi_sensitivity")
    interval = data.get("aid_station_interval_km")
    return RacePlan(
        race_name=str(data["race_name"]),
        duration_min=float(data["duration_min"]),
        intensity=Intensity.from_label(data["intensity"]),
        temperature=Temperature.from_label(data["temperature"]),
        humidity=Humidity.from_label(data["humidity"]),
        hourly_carbs_g=float(data["hourly_carbs_g"]),
        hourly_fluids_ml=float(data["hourly_fluids_ml"]),
        blocks=tuple(
            RacePlanBlock(
                offset_label=str(b["time"]),
                carbs=str(b["carbs"]),
                fluids=str(b["fluids"]),
            )
            for b in data.get("blocks", [])
        ),
        aid_station_interval_km=float(interval) if interval is not None else None,
        gi_sensitivity=GISensitivity.from_label(gi) if gi else None,
    )


def plan_record_to_dict(record: RacePlanRecord) -> dict:
    payload = race_plan_to_dict(record.plan)
    payload["created_at"] = record.created_at.isoformat()
    return payload


def plan_record_from_dict(data: Any) -> RacePlanRecord:
    data = _require_dict(data, "Race plan record")
    return RacePlanRecord(
        plan=race_plan_from_dict(data),
        created_at=datetime.fromisoformat(data["created_at"]),
    )


def race_plan_to_csv(plan: RacePlan) -> str:
    """Export a plan timeline as CSV text (time, carbs, fluids)."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(["time", "carbs", "fluids"])
    for block in plan.blocks:
        writer.writerow([block.offset_label, block.carbs, block.fluids])
    return buf.getvalue()
