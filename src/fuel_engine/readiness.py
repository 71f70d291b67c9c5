"""Readiness scorer — aggregates session history against the assessment target.

Builds a ReadinessContext from the snapshot, then walks the readiness rules in
priority order. The first rule returning a verdict decides the status; every
rule's outcome is kept in a ReadinessTrace so the dashboard can explain the
decision.
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Sequence

from fuel_engine.math.session_stats import (
    average_carb_rate,
    average_symptom_severity,
    carb_gap,
    consistency_pct,
)
from fuel_engine.models.assessment import Assessment
from fuel_engine.models.readiness import (
    ReadinessContext,
    ReadinessReport,
    ReadinessTrace,
    RuleResult,
    RuleStatus,
)
from fuel_engine.models.session import TrainingSession
from fuel_engine.registry import ReadinessRuleRegistry


@lru_cache(maxsize=1)
def default_registry() -> ReadinessRuleRegistry:
    registry = ReadinessRuleRegistry()
    registry.discover_rules()
    return registry


def build_context(
    assessment: Assessment | None,
    sessions: Sequence[TrainingSession],
    today: date,
) -> ReadinessContext:
    """Compute the unrounded aggregates the readiness rules consume."""
    avg_rate = average_carb_rate(sessions)
    target_rate: float | None = None
    gap: float | None = None
    if assessment is not None:
        target_rate = assessment.target_carb_rate
        gap = carb_gap(target_rate, avg_rate)

    return ReadinessContext(
        assessment=assessment,
        session_count=len(sessions),
        avg_carb_rate=avg_rate,
        avg_symptom_severity=average_symptom_severity(sessions),
        consistency_pct=consistency_pct(sessions, today),
        target_carb_rate=target_rate,
        carb_gap=gap,
    )


class ReadinessScorer:
    """Evaluates readiness rules against an athlete snapshot.

    Usage:
        scorer = ReadinessScorer()
        report = scorer.score(assessment, sessions, today=date.today())
    """

    def __init__(self, registry: ReadinessRuleRegistry | None = None) -> None:
        self.registry = registry or default_registry()

    def score(
        self,
        assessment: Assessment | None,
        sessions: Sequence[TrainingSession],
        today: date | None = None,
    ) -> ReadinessReport:
        """Classify readiness for the given assessment and session history.

        Args:
            assessment: The active assessment, or None if never completed.
            sessions: Full session history (may be empty).
            today: Reference date for the consistency window.

        Returns:
            A ReadinessReport with rounded aggregates and the deciding rule.
        """
        context = build_context(assessment, sessions, today or date.today())

        rule_results: list[RuleResult] = []
        decided = None
        for rule in self.registry.get_all_rules():
            if decided is not None:
                rule_results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.SKIPPED,
                        explanation=f"Not evaluated: decided by {decided.rule_id}.",
                    )
                )
                continue

            if not rule.has_required_data(context):
                rule_results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.NOT_APPLICABLE,
                        explanation=f"Missing required data: {rule.required_data}",
                    )
                )
                continue

            verdict = rule.evaluate(context)
            if verdict is None:
                rule_results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.SKIPPED,
                        explanation="Rule returned no verdict.",
                    )
                )
                continue

            decided = verdict
            rule_results.append(
                RuleResult(
                    rule_id=rule.rule_id,
                    status=RuleStatus.FIRED,
                    verdict=verdict,
                    explanation=verdict.explanation,
                )
            )

        if decided is None:
            raise RuntimeError("No readiness rule produced a verdict")

        return ReadinessReport(
            status=decided.status,
            avg_carb_rate=round(context.avg_carb_rate, 1),
            avg_symptom_severity=round(context.avg_symptom_severity, 1),
            consistency_pct=context.consistency_pct,
            explanation=decided.explanation,
            decided_by=decided.rule_id,
            target_carb_rate=_round_opt(context.target_carb_rate),
            carb_gap=_round_opt(context.carb_gap),
            trace=ReadinessTrace(rule_results=tuple(rule_results)),
        )


def score_readiness(
    assessment: Assessment | None,
    sessions: Sequence[TrainingSession],
    today: date | None = None,
) -> ReadinessReport:
    """Score readiness with the auto-discovered rule set."""
    return ReadinessScorer().score(assessment, sessions, today)


def _round_opt(value: float | None) -> float | None:
    return None if value is None else round(value, 1)
