"""Coach roster — readiness at a glance across several athletes.

Rows are ordered attention-first (Caution, Not Ready, In Progress, Ready),
then alphabetically by name.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable

from fuel_engine.models.athlete_record import AthleteRecord
from fuel_engine.models.dashboard import RosterEntry
from fuel_engine.readiness import ReadinessScorer


def summarize_roster(
    records: Iterable[AthleteRecord],
    today: date | None = None,
    scorer: ReadinessScorer | None = None,
) -> list[RosterEntry]:
    """Score every athlete record and return sorted roster rows."""
    scorer = scorer or ReadinessScorer()
    today = today or date.today()

    entries: list[RosterEntry] = []
    for record in records:
        report = scorer.score(record.assessment, record.sessions, today)
        days = (
            record.assessment.days_until_event(today)
            if record.assessment is not None
            else None
        )
        entries.append(
            RosterEntry(
                name=record.display_name,
                status=report.status,
                avg_carb_rate=report.avg_carb_rate,
                consistency_pct=report.consistency_pct,
                session_count=len(record.sessions),
                explanation=report.explanation,
                target_carb_rate=report.target_carb_rate,
                days_until_event=days,
            )
        )

    return sorted(entries, key=lambda e: (e.status, e.name.lower()))
