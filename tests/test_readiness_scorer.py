"""Tests for ReadinessScorer: first-match classification and the trace."""

from __future__ import annotations

import pytest

from fuel_engine.models.enums import ReadinessStatus
from fuel_engine.models.readiness import RuleStatus
from fuel_engine.readiness import ReadinessScorer, build_context, score_readiness


@pytest.fixture
def scorer() -> ReadinessScorer:
    return ReadinessScorer()


class TestClassification:
    def test_no_assessment_is_not_ready(self, scorer, make_session, today) -> None:
        sessions = [make_session(days_ago=d) for d in range(5)]
        report = scorer.score(None, sessions, today)
        assert report.status == ReadinessStatus.NOT_READY
        assert report.decided_by == "missing_assessment"
        assert report.target_carb_rate is None
        assert report.carb_gap is None

    def test_no_assessment_no_sessions(self, scorer, today) -> None:
        report = scorer.score(None, [], today)
        assert report.status == ReadinessStatus.NOT_READY
        assert report.avg_carb_rate == 0.0
        assert report.consistency_pct == 0

    def test_assessment_without_sessions_in_progress(
        self, scorer, moderate_assessment, today
    ) -> None:
        report = scorer.score(moderate_assessment, [], today)
        assert report.status == ReadinessStatus.IN_PROGRESS
        assert report.decided_by == "session_volume"

    def test_symptoms_override_volume(self, scorer, moderate_assessment, make_session, today) -> None:
        # One session with severity 8 already trips the symptom rule.
        report = scorer.score(moderate_assessment, [make_session(symptom_severity=8)], today)
        assert report.status == ReadinessStatus.CAUTION
        assert report.decided_by == "symptom_burden"

    def test_symptoms_override_on_target_intake(
        self, scorer, moderate_assessment, make_session, today
    ) -> None:
        sessions = [make_session(carbs_g=60, days_ago=d, symptom_severity=6) for d in range(5)]
        report = scorer.score(moderate_assessment, sessions, today)
        assert report.status == ReadinessStatus.CAUTION
        assert report.avg_symptom_severity == 6.0

    @pytest.mark.parametrize(
        "avg_carbs, expected, rule_id",
        [
            (30.0, ReadinessStatus.CAUTION, "carb_gap_caution"),
            (40.0, ReadinessStatus.IN_PROGRESS, "carb_gap_progress"),
            (55.0, ReadinessStatus.READY, "on_target"),
            (60.0, ReadinessStatus.READY, "on_target"),
            (90.0, ReadinessStatus.CAUTION, "carb_gap_caution"),
        ],
    )
    def test_carb_gap_tiers(
        self, scorer, moderate_assessment, make_session, today, avg_carbs, expected, rule_id
    ) -> None:
        sessions = [make_session(carbs_g=avg_carbs, days_ago=d) for d in range(3)]
        report = scorer.score(moderate_assessment, sessions, today)
        assert report.status == expected
        assert report.decided_by == rule_id

    def test_gap_exactly_25_is_in_progress(
        self, scorer, moderate_assessment, make_session, today
    ) -> None:
        sessions = [make_session(carbs_g=35.0, days_ago=d) for d in range(3)]
        assert scorer.score(moderate_assessment, sessions, today).status == ReadinessStatus.IN_PROGRESS

    def test_gap_exactly_15_is_ready(self, scorer, moderate_assessment, make_session, today) -> None:
        sessions = [make_session(carbs_g=45.0, days_ago=d) for d in range(3)]
        assert scorer.score(moderate_assessment, sessions, today).status == ReadinessStatus.READY


class TestReportValues:
    def test_rounding(self, scorer, moderate_assessment, make_session, today) -> None:
        sessions = [
            make_session(carbs_g=50, duration_min=45, days_ago=0),
            make_session(carbs_g=70, duration_min=70, days_ago=1),
            make_session(carbs_g=55, duration_min=55, days_ago=2, symptom_severity=1),
        ]
        report = scorer.score(moderate_assessment, sessions, today)
        # (66.67 + 60 + 60) / 3 = 62.22
        assert report.avg_carb_rate == 62.2
        assert report.avg_symptom_severity == 0.3
        assert report.consistency_pct == 43
        assert report.target_carb_rate == 60.0
        assert report.carb_gap == 2.2

    def test_explanation_matches_deciding_rule(
        self, scorer, moderate_assessment, make_session, today
    ) -> None:
        sessions = [make_session(carbs_g=40.0, days_ago=d) for d in range(3)]
        report = scorer.score(moderate_assessment, sessions, today)
        deciding = report.trace.deciding_rule
        assert deciding is not None
        assert deciding.rule_id == report.decided_by
        assert deciding.explanation == report.explanation
        assert report.status_label == "In Progress"


class TestTrace:
    def test_every_rule_recorded_in_order(self, scorer, moderate_assessment, today) -> None:
        report = scorer.score(moderate_assessment, [], today)
        assert [r.rule_id for r in report.trace.rule_results] == [
            "missing_assessment",
            "symptom_burden",
            "session_volume",
            "carb_gap_caution",
            "carb_gap_progress",
            "on_target",
        ]

    def test_rules_after_decision_are_skipped(self, scorer, today) -> None:
        report = scorer.score(None, [], today)
        results = report.trace.rule_results
        assert results[0].status == RuleStatus.FIRED
        assert all(r.status == RuleStatus.SKIPPED for r in results[1:])
        assert "missing_assessment" in results[1].explanation

    def test_exactly_one_rule_fires(self, scorer, moderate_assessment, make_session, today) -> None:
        sessions = [make_session(carbs_g=58.0, days_ago=d) for d in range(4)]
        report = scorer.score(moderate_assessment, sessions, today)
        fired = [r for r in report.trace.rule_results if r.status == RuleStatus.FIRED]
        assert len(fired) == 1
        assert fired[0].rule_id == "on_target"


class TestHelpers:
    def test_build_context_without_assessment(self, make_session, today) -> None:
        context = build_context(None, [make_session()], today)
        assert context.target_carb_rate is None
        assert context.carb_gap is None
        assert context.session_count == 1

    def test_score_readiness_function(self, moderate_assessment, today) -> None:
        report = score_readiness(moderate_assessment, [], today)
        assert report.status == ReadinessStatus.IN_PROGRESS
