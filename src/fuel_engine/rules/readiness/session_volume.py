"""VOLUME rule: too few logged sessions to judge the carb rate."""

from __future__ import annotations

from fuel_engine.models.enums import MIN_SESSIONS_FOR_READINESS, Priority, ReadinessStatus
from fuel_engine.models.readiness import ReadinessContext, ReadinessVerdict
from fuel_engine.rules.base import ReadinessRule


class SessionVolumeRule(ReadinessRule):
    """Keeps the athlete In Progress until 3 sessions are logged."""

    rule_id = "session_volume"
    version = "1.0.0"
    priority = Priority.VOLUME
    required_data: list[str] = []

    def evaluate(self, context: ReadinessContext) -> ReadinessVerdict | None:
        if context.session_count >= MIN_SESSIONS_FOR_READINESS:
            return None
        return ReadinessVerdict(
            rule_id=self.rule_id,
            priority=self.priority,
            status=ReadinessStatus.IN_PROGRESS,
            explanation=(
                f"Only {context.session_count} session(s) logged; at least "
                f"{MIN_SESSIONS_FOR_READINESS} are needed to assess readiness."
            ),
        )
