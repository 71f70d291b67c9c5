"""CARB GAP rules: distance between achieved and target carb rate.

Two tiers: a gap above 25 g/hr is a Caution, above 15 g/hr keeps the
athlete In Progress. Both need an assessment (for the target rate).
"""

from __future__ import annotations

from fuel_engine.models.enums import (
    CARB_GAP_CAUTION_G_PER_HR,
    CARB_GAP_PROGRESS_G_PER_HR,
    Priority,
    ReadinessStatus,
)
from fuel_engine.models.readiness import ReadinessContext, ReadinessVerdict
from fuel_engine.rules.base import ReadinessRule


def _gap_explanation(context: ReadinessContext, threshold: float) -> str:
    return (
        f"Average intake {context.avg_carb_rate:.1f} g/hr is "
        f"{context.carb_gap:.1f} g/hr away from the "
        f"{context.target_carb_rate:.1f} g/hr target (threshold {threshold:g} g/hr)."
    )


class CarbGapCautionRule(ReadinessRule):
    """Caution when the carb gap exceeds 25 g/hr."""

    rule_id = "carb_gap_caution"
    version = "1.0.0"
    priority = Priority.CARB_GAP_MAJOR
    required_data = ["target_carb_rate", "carb_gap"]

    def evaluate(self, context: ReadinessContext) -> ReadinessVerdict | None:
        if context.carb_gap <= CARB_GAP_CAUTION_G_PER_HR:  # type: ignore[operator]
            return None
        return ReadinessVerdict(
            rule_id=self.rule_id,
            priority=self.priority,
            status=ReadinessStatus.CAUTION,
            explanation=_gap_explanation(context, CARB_GAP_CAUTION_G_PER_HR),
        )


class CarbGapProgressRule(ReadinessRule):
    """In Progress when the carb gap exceeds 15 g/hr."""

    rule_id = "carb_gap_progress"
    version = "1.0.0"
    priority = Priority.CARB_GAP_MINOR
    required_data = ["target_carb_rate", "carb_gap"]

    def evaluate(self, context: ReadinessContext) -> ReadinessVerdict | None:
        if context.carb_gap <= CARB_GAP_PROGRESS_G_PER_HR:  # type: ignore[operator]
            return None
        return ReadinessVerdict(
            rule_id=self.rule_id,
            priority=self.priority,
            status=ReadinessStatus.IN_PROGRESS,
            explanation=_gap_explanation(context, CARB_GAP_PROGRESS_G_PER_HR),
        )
