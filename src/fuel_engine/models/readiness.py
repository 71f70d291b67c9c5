"""Readiness models — scorer inputs, per-rule verdicts and the audit trail."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto

from fuel_engine.models.assessment import Assessment
from fuel_engine.models.enums import Priority, ReadinessStatus


@dataclass(frozen=True)
class ReadinessContext:
    """Aggregated history the readiness rules reason about.

    Built once per scoring call from the assessment and session snapshot.
    ``target_carb_rate`` and ``carb_gap`` are None without an assessment.
    """

    assessment: Assessment | None
    session_count: int
    avg_carb_rate: float
    avg_symptom_severity: float
    consistency_pct: int
    target_carb_rate: float | None = None
    carb_gap: float | None = None


@dataclass(frozen=True)
class ReadinessVerdict:
    """A single rule's classification and the reason for it."""

    rule_id: str
    priority: Priority
    status: ReadinessStatus
    explanation: str = ""


class RuleStatus(IntEnum):
    """Whether a rule decided the outcome, passed, or lacked its data."""

    FIRED = auto()
    SKIPPED = auto()
    NOT_APPLICABLE = auto()


@dataclass(frozen=True)
class RuleResult:
    """Record of a single rule's evaluation during a scoring call."""

    rule_id: str
    status: RuleStatus
    verdict: ReadinessVerdict | None = None
    explanation: str = ""


@dataclass(frozen=True)
class ReadinessTrace:
    """Every rule's outcome, in evaluation order, for tooltips and debugging."""

    rule_results: tuple[RuleResult, ...] = field(default_factory=tuple)

    @property
    def deciding_rule(self) -> RuleResult | None:
        for result in self.rule_results:
            if result.status == RuleStatus.FIRED:
                return result
        return None


@dataclass(frozen=True)
class ReadinessReport:
    """Final readiness outcome shown on the dashboard.

    Averages are rounded to one decimal, consistency to a whole percent.
    """

    status: ReadinessStatus
    avg_carb_rate: float
    avg_symptom_severity: float
    consistency_pct: int
    explanation: str
    decided_by: str
    target_carb_rate: float | None = None
    carb_gap: float | None = None
    trace: ReadinessTrace = field(default_factory=ReadinessTrace)

    @property
    def status_label(self) -> str:
        return self.status.label
