"""Utility helpers bridging the Streamlit UI and the fuel engine.

Pure functions for formatting, form-dict → model construction, DataFrame
views of history and plans, and locating athlete files for the coach roster.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd

from athlete_store import AthleteRepository
from fuel_engine.models.athlete_record import AthleteRecord
from fuel_engine.models.dashboard import RosterEntry
from fuel_engine.models.enums import (
    ExperienceLevel,
    Gender,
    ReadinessStatus,
    Symptom,
)
from fuel_engine.models.profile import AthleteProfile
from fuel_engine.models.race_plan import RacePlan
from fuel_engine.models.session import TrainingSession

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(minutes: float) -> str:
    """Convert minutes to human string. e.g. 90.0 -> '1h 30m'."""
    if minutes <= 0:
        return "0m"
    h = int(minutes) // 60
    m = int(minutes) % 60
    if h > 0 and m > 0:
        return f"{h}h {m}m"
    if h > 0:
        return f"{h}h"
    return f"{m}m"


def format_rate(g_per_hr: float | None) -> str:
    """Format a carb rate. e.g. 62.5 -> '62.5 g/hr'."""
    if g_per_hr is None:
        return "--"
    return f"{g_per_hr:.1f} g/hr"


def format_days_until(days: int | None) -> str:
    if days is None:
        return "--"
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    return f"{days} days"


def option_label(name: str) -> str:
    """'non_binary' -> 'Non Binary'."""
    return name.replace("_", " ").title()


# ---------------------------------------------------------------------------
# Color maps
# ---------------------------------------------------------------------------

STATUS_COLORS: dict[ReadinessStatus, str] = {
    ReadinessStatus.READY: "#2ECC71",        # green
    ReadinessStatus.IN_PROGRESS: "#F5B041",  # amber
    ReadinessStatus.CAUTION: "#E74C3C",      # red
    ReadinessStatus.NOT_READY: "#D5DBDB",    # grey
}

STATUS_ICONS: dict[ReadinessStatus, str] = {
    ReadinessStatus.READY: "🟢",
    ReadinessStatus.IN_PROGRESS: "🟠",
    ReadinessStatus.CAUTION: "🔴",
    ReadinessStatus.NOT_READY: "⚪",
}


# ---------------------------------------------------------------------------
# Form dict → model construction
# ---------------------------------------------------------------------------


def build_profile(form: dict) -> AthleteProfile:
    """Convert the assessment form dict into an AthleteProfile.

    ``target_events`` may be a list or a comma/newline separated string.
    """
    events = form.get("target_events", ())
    if isinstance(events, str):
        events = [e.strip() for e in events.replace("\n", ",").split(",")]
    return AthleteProfile(
        name=form.get("name", "").strip() or "Athlete",
        email=form.get("email", "").strip(),
        age=int(form.get("age", 0)),
        weight_kg=float(form.get("weight_kg", 0.0)),
        height_cm=float(form.get("height_cm", 0.0)),
        gender=Gender.from_label(form.get("gender", "unspecified")),
        primary_sport=form.get("primary_sport", "").strip(),
        experience=ExperienceLevel.from_label(form.get("experience", "beginner")),
        target_events=tuple(e for e in events if e),
    )


def parse_symptoms(labels: Iterable[str]) -> frozenset[Symptom]:
    return frozenset(Symptom.from_label(label) for label in labels)


def build_session(form: dict) -> TrainingSession:
    """Convert the session logger form dict into a TrainingSession.

    Raises InvalidInputError for a zero duration or out-of-range scores.
    """
    session_date = form.get("date", date.today())
    if isinstance(session_date, str):
        session_date = date.fromisoformat(session_date)
    return TrainingSession(
        session_date=session_date,
        sport=form.get("sport", "").strip(),
        duration_min=float(form.get("duration_min", 0)),
        carbs_g=float(form.get("carbs_g", 0)),
        fluids_ml=float(form.get("fluids_ml", 0)),
        symptom_severity=int(form.get("symptom_severity", 0)),
        perceived_exertion=int(form.get("perceived_exertion", 5)),
        notes=form.get("notes", ""),
    )


# ---------------------------------------------------------------------------
# DataFrame views
# ---------------------------------------------------------------------------

SESSION_COLUMNS = [
    "Date",
    "Sport",
    "Duration (min)",
    "Carbs (g)",
    "Carb rate (g/hr)",
    "Fluids (ml)",
    "Symptoms",
    "RPE",
    "Notes",
]


def sessions_dataframe(sessions: Sequence[TrainingSession]) -> pd.DataFrame:
    """Session history as a DataFrame, oldest first."""
    rows = [
        {
            "Date": s.session_date,
            "Sport": s.sport,
            "Duration (min)": s.duration_min,
            "Carbs (g)": s.carbs_g,
            "Carb rate (g/hr)": round(s.carb_rate, 1),
            "Fluids (ml)": s.fluids_ml,
            "Symptoms": s.symptom_severity,
            "RPE": s.perceived_exertion,
            "Notes": s.notes,
        }
        for s in sessions
    ]
    df = pd.DataFrame(rows, columns=SESSION_COLUMNS)
    if not df.empty:
        df = df.sort_values("Date", kind="stable").reset_index(drop=True)
    return df


def daily_carb_rate_series(sessions: Sequence[TrainingSession]) -> pd.Series:
    """Mean carb rate per calendar date, for the progress chart."""
    df = sessions_dataframe(sessions)
    if df.empty:
        return pd.Series(dtype="float64", name="Carb rate (g/hr)")
    return df.groupby("Date")["Carb rate (g/hr)"].mean()


def plan_dataframe(plan: RacePlan) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Time": b.offset_label, "Carbs": b.carbs, "Fluids": b.fluids} for b in plan.blocks],
        columns=["Time", "Carbs", "Fluids"],
    )


def roster_dataframe(entries: Sequence[RosterEntry]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Athlete": e.name,
                "Status": f"{STATUS_ICONS[e.status]} {e.status.label}",
                "Avg carbs (g/hr)": e.avg_carb_rate,
                "Target (g/hr)": e.target_carb_rate,
                "Consistency (%)": e.consistency_pct,
                "Sessions": e.session_count,
                "Event in": format_days_until(e.days_until_event),
            }
            for e in entries
        ],
        columns=[
            "Athlete",
            "Status",
            "Avg carbs (g/hr)",
            "Target (g/hr)",
            "Consistency (%)",
            "Sessions",
            "Event in",
        ],
    )


# ---------------------------------------------------------------------------
# Coach roster sources
# ---------------------------------------------------------------------------


def list_athlete_files(data_dir: Path) -> list[Path]:
    """All athlete JSON documents in *data_dir*, sorted by filename."""
    if not data_dir.exists():
        return []
    return sorted(data_dir.glob("*.json"))


def load_roster_records(data_dir: Path) -> list[AthleteRecord]:
    return [AthleteRepository.from_path(p).load_record() for p in list_athlete_files(data_dir)]
