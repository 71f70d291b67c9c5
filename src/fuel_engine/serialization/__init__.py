"""Serialization module — records to/from JSON-compatible dicts, plan export."""

from fuel_engine.serialization.records import (
    assessment_from_dict,
    assessment_to_dict,
    plan_record_from_dict,
    plan_record_to_dict,
    race_plan_to_csv,
    session_from_dict,
    session_to_dict,
)

__all__ = [
    "assessment_from_dict",
    "assessment_to_dict",
    "plan_record_from_dict",
    "plan_record_to_dict",
    "race_plan_to_csv",
    "session_from_dict",
    "session_to_dict",
]
