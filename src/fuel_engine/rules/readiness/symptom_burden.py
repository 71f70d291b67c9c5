"""SYMPTOMS rule: high average GI symptom severity overrides everything else.

With no sessions the average defaults to 0, so this rule needs at least
one logged session to fire.
"""

from __future__ import annotations

from fuel_engine.models.enums import SYMPTOM_CAUTION_THRESHOLD, Priority, ReadinessStatus
from fuel_engine.models.readiness import ReadinessContext, ReadinessVerdict
from fuel_engine.rules.base import ReadinessRule


class SymptomBurdenRule(ReadinessRule):
    """Flags Caution when average symptom severity exceeds 5/10."""

    rule_id = "symptom_burden"
    version = "1.0.0"
    priority = Priority.SYMPTOMS
    required_data: list[str] = []

    def evaluate(self, context: ReadinessContext) -> ReadinessVerdict | None:
        severity = context.avg_symptom_severity
        if severity <= SYMPTOM_CAUTION_THRESHOLD:
            return None
        return ReadinessVerdict(
            rule_id=self.rule_id,
            priority=self.priority,
            status=ReadinessStatus.CAUTION,
            explanation=(
                f"Average symptom severity {severity:.1f}/10 is above "
                f"{SYMPTOM_CAUTION_THRESHOLD:g}. Address GI symptoms before "
                f"increasing intake."
            ),
        )
