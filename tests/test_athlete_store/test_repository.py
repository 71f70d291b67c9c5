"""Tests for AthleteRepository read/write semantics."""

from __future__ import annotations

import json
from datetime import datetime
from unittest.mock import patch

import pytest

from athlete_store import AthleteRepository, MemoryStore, PersistenceUnavailable
from athlete_store.repository import empty_snapshot
from fuel_engine.engine import FuelEngine
from fuel_engine.models.enums import ReadinessStatus
from fuel_engine.models.race_plan import RacePlanRecord
from fuel_engine.planner import generate_race_plan
from fuel_engine.serialization import session_to_dict


@pytest.fixture
def file_repository(tmp_path) -> AthleteRepository:
    return AthleteRepository.from_path(tmp_path / "athlete.json")


class TestAssessmentStorage:
    def test_empty_store(self, memory_repository) -> None:
        assert memory_repository.load_assessment() is None
        record = memory_repository.load_record()
        assert record.sessions == ()
        assert record.plans == ()

    def test_save_and_load(self, file_repository, moderate_assessment) -> None:
        file_repository.save_assessment(moderate_assessment)
        assert file_repository.load_assessment() == moderate_assessment

    def test_save_overwrites(self, memory_repository, moderate_assessment, runner_profile) -> None:
        from fuel_engine.engine import build_assessment
        from fuel_engine.models.enums import GISensitivity, Intensity

        memory_repository.save_assessment(moderate_assessment)
        replacement = build_assessment(runner_profile, 90, Intensity.HIGH, GISensitivity.NONE)
        memory_repository.save_assessment(replacement)
        assert memory_repository.load_assessment() == replacement

    def test_delete(self, memory_repository, moderate_assessment) -> None:
        memory_repository.save_assessment(moderate_assessment)
        memory_repository.delete_assessment()
        assert memory_repository.load_assessment() is None


class TestSessionStorage:
    def test_append_keeps_order(self, file_repository, make_session) -> None:
        sessions = [make_session(days_ago=d) for d in (2, 0, 1)]
        for s in sessions:
            file_repository.append_session(s)
        assert file_repository.load_sessions() == sessions

    def test_append_does_not_touch_assessment(
        self, memory_repository, moderate_assessment, make_session
    ) -> None:
        memory_repository.save_assessment(moderate_assessment)
        memory_repository.append_session(make_session())
        assert memory_repository.load_assessment() == moderate_assessment

    def test_malformed_entry_dropped(self, make_session) -> None:
        good = make_session()
        bad = session_to_dict(make_session())
        bad["duration_min"] = 0
        store = MemoryStore({"sessions": [session_to_dict(good), bad, "junk"]})
        assert AthleteRepository(store).load_sessions() == [good]

    def test_non_list_sessions_ignored(self) -> None:
        repo = AthleteRepository(MemoryStore({"sessions": {"oops": 1}}))
        assert repo.load_sessions() == []


class TestPlanStorage:
    def test_append_and_history(self, memory_repository) -> None:
        plan = generate_race_plan("Marathon", 200)
        record = RacePlanRecord(plan=plan, created_at=datetime(2026, 5, 20, 8, 0))
        memory_repository.append_plan(record)
        assert memory_repository.load_plans() == [record]
        assert memory_repository.load_record().latest_plan() == record


class TestReset:
    def test_reset_clears_everything(
        self, file_repository, moderate_assessment, make_session
    ) -> None:
        file_repository.save_assessment(moderate_assessment)
        file_repository.append_session(make_session())
        file_repository.append_plan(
            RacePlanRecord(generate_race_plan("R", 60), datetime(2026, 5, 20))
        )
        file_repository.reset_all()
        record = file_repository.load_record()
        assert record.assessment is None
        assert record.sessions == ()
        assert record.plans == ()

    def test_failed_reset_leaves_data(self, file_repository, moderate_assessment) -> None:
        file_repository.save_assessment(moderate_assessment)
        with patch("athlete_store.backends.os.replace", side_effect=OSError("read-only")):
            with pytest.raises(PersistenceUnavailable):
                file_repository.reset_all()
        assert file_repository.load_assessment() == moderate_assessment


class TestCorruptStorage:
    def test_corrupt_file_reads_as_empty(self, tmp_path) -> None:
        path = tmp_path / "athlete.json"
        path.write_text("{truncated", encoding="utf-8")
        repo = AthleteRepository.from_path(path)
        assert repo.load_assessment() is None
        assert repo.load_sessions() == []

    def test_corrupt_file_quarantined_on_write(self, tmp_path, make_session) -> None:
        path = tmp_path / "athlete.json"
        path.write_text("{truncated", encoding="utf-8")
        repo = AthleteRepository.from_path(path)
        session = make_session()
        repo.append_session(session)
        assert (tmp_path / "athlete.json.corrupt").exists()
        assert repo.load_sessions() == [session]

    def test_malformed_assessment_treated_as_absent(self, tmp_path) -> None:
        path = tmp_path / "athlete.json"
        snapshot = empty_snapshot()
        snapshot["assessment"] = {"profile": {"name": "X"}, "duration_min": -1}
        path.write_text(json.dumps(snapshot), encoding="utf-8")
        assert AthleteRepository.from_path(path).load_assessment() is None

    def test_unreadable_store_reads_empty_but_write_raises(self, tmp_path, make_session) -> None:
        repo = AthleteRepository.from_path(tmp_path / "athlete.json")
        with patch.object(
            repo._store, "load_snapshot", side_effect=PersistenceUnavailable("denied")
        ):
            assert repo.load_record().sessions == ()
            with pytest.raises(PersistenceUnavailable):
                repo.append_session(make_session())

    def test_undecodable_file_reads_as_empty(self, tmp_path, today) -> None:
        path = tmp_path / "athlete.json"
        path.write_bytes(b'{"sessions": ["\xff\xfe"]}')
        engine = FuelEngine(AthleteRepository.from_path(path))
        report = engine.readiness(today)
        assert report.status == ReadinessStatus.NOT_READY
        assert engine.dashboard(today).session_count == 0

    def test_undecodable_file_quarantined_on_write(self, tmp_path, make_session) -> None:
        path = tmp_path / "athlete.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        repo = AthleteRepository.from_path(path)
        session = make_session()
        repo.append_session(session)
        assert (tmp_path / "athlete.json.corrupt").read_bytes() == b"\xff\xfe\x00garbage"
        assert repo.load_sessions() == [session]

    def test_nan_values_dropped_on_load(
        self, tmp_path, moderate_assessment, make_session, today
    ) -> None:
        repo = AthleteRepository.from_path(tmp_path / "athlete.json")
        repo.save_assessment(moderate_assessment)
        for d in range(3):
            repo.append_session(make_session(carbs_g=58.0, days_ago=d))
        path = tmp_path / "athlete.json"
        snapshot = json.loads(path.read_text(encoding="utf-8"))
        snapshot["sessions"][0]["carbs_g"] = float("nan")
        snapshot["sessions"][1]["duration_min"] = float("inf")
        path.write_text(json.dumps(snapshot), encoding="utf-8")
        assert "NaN" in path.read_text(encoding="utf-8")

        sessions = repo.load_sessions()
        assert len(sessions) == 1
        report = FuelEngine(repo).readiness(today)
        assert report.status == ReadinessStatus.IN_PROGRESS
        assert report.avg_carb_rate == 58.0

    def test_nan_assessment_target_treated_as_absent(self, tmp_path, moderate_assessment) -> None:
        repo = AthleteRepository.from_path(tmp_path / "athlete.json")
        repo.save_assessment(moderate_assessment)
        path = tmp_path / "athlete.json"
        snapshot = json.loads(path.read_text(encoding="utf-8"))
        snapshot["assessment"]["target_carbs_g"] = float("nan")
        path.write_text(json.dumps(snapshot), encoding="utf-8")
        assert repo.load_assessment() is None
