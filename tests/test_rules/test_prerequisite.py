"""Tests for the missing-assessment rule."""

from __future__ import annotations

from fuel_engine.models.enums import Priority, ReadinessStatus
from fuel_engine.models.readiness import ReadinessContext
from fuel_engine.rules.readiness.prerequisite import MissingAssessmentRule


def _context(assessment=None, session_count: int = 0) -> ReadinessContext:
    return ReadinessContext(
        assessment=assessment,
        session_count=session_count,
        avg_carb_rate=0.0,
        avg_symptom_severity=0.0,
        consistency_pct=0,
    )


class TestMissingAssessmentRule:
    def setup_method(self) -> None:
        self.rule = MissingAssessmentRule()

    def test_metadata(self) -> None:
        assert self.rule.rule_id == "missing_assessment"
        assert self.rule.priority == Priority.PREREQUISITE
        assert self.rule.has_required_data(_context())

    def test_fires_without_assessment(self) -> None:
        verdict = self.rule.evaluate(_context(session_count=10))
        assert verdict is not None
        assert verdict.status == ReadinessStatus.NOT_READY
        assert "assessment" in verdict.explanation.lower()

    def test_passes_with_assessment(self, moderate_assessment) -> None:
        assert self.rule.evaluate(_context(moderate_assessment)) is None
