"""BASELINE rule: everything checks out, the athlete is Ready."""

from __future__ import annotations

from fuel_engine.models.enums import CARB_GAP_PROGRESS_G_PER_HR, Priority, ReadinessStatus
from fuel_engine.models.readiness import ReadinessContext, ReadinessVerdict
from fuel_engine.rules.base import ReadinessRule


class OnTargetRule(ReadinessRule):
    rule_id = "on_target"
    version = "1.0.0"
    priority = Priority.BASELINE
    required_data = ["target_carb_rate", "carb_gap"]

    def evaluate(self, context: ReadinessContext) -> ReadinessVerdict | None:
        return ReadinessVerdict(
            rule_id=self.rule_id,
            priority=self.priority,
            status=ReadinessStatus.READY,
            explanation=(
                f"Average intake {context.avg_carb_rate:.1f} g/hr is within "
                f"{CARB_GAP_PROGRESS_G_PER_HR:g} g/hr of the "
                f"{context.target_carb_rate:.1f} g/hr target with manageable symptoms."
            ),
        )
