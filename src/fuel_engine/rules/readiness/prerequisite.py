"""PREREQUISITE rule: no readiness without an assessment.

An athlete with no assessment has no carb target to train towards, so the
status is "Not Ready" regardless of logged sessions. This is a defined
classification, not an error.
"""

from __future__ import annotations

from fuel_engine.models.enums import Priority, ReadinessStatus
from fuel_engine.models.readiness import ReadinessContext, ReadinessVerdict
from fuel_engine.rules.base import ReadinessRule


class MissingAssessmentRule(ReadinessRule):
    """Classifies athletes without an assessment as Not Ready."""

    rule_id = "missing_assessment"
    version = "1.0.0"
    priority = Priority.PREREQUISITE
    required_data: list[str] = []

    def evaluate(self, context: ReadinessContext) -> ReadinessVerdict | None:
        if context.assessment is not None:
            return None
        return ReadinessVerdict(
            rule_id=self.rule_id,
            priority=self.priority,
            status=ReadinessStatus.NOT_READY,
            explanation=(
                "No assessment on record. Complete the assessment to set "
                "a carbohydrate target."
            ),
        )
