"""Abstract base class for all readiness rules."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fuel_engine.models.enums import Priority
from fuel_engine.models.readiness import ReadinessContext, ReadinessVerdict


class ReadinessRule(ABC):
    """Base class for one branch of the readiness classification.

    Rules are discovered automatically by the ReadinessRuleRegistry and
    evaluated in Priority order; the first rule that returns a verdict
    decides the athlete's status.

    Subclasses must define:
        rule_id: unique identifier (e.g. "symptom_burden")
        version: semantic version string
        priority: Priority tier, which fixes the evaluation order
        required_data: ReadinessContext field names needed by this rule
        evaluate(): the rule's decision logic
    """

    rule_id: str
    version: str
    priority: Priority
    required_data: list[str] = []

    def has_required_data(self, context: ReadinessContext) -> bool:
        """Check that all required ReadinessContext fields are not None."""
        for field_name in self.required_data:
            if getattr(context, field_name, None) is None:
                return False
        return True

    @abstractmethod
    def evaluate(self, context: ReadinessContext) -> ReadinessVerdict | None:
        """Return a verdict if this rule decides the status, else None."""
        ...
