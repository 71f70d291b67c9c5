"""Tests for carbohydrate target math."""

from __future__ import annotations

import pytest

from fuel_engine.exceptions import InvalidInputError
from fuel_engine.math.carb_target import (
    base_carb_rate,
    duration_factor,
    hourly_carb_target,
    target_carbs,
)
from fuel_engine.models.enums import GISensitivity, Intensity


class TestBaseCarbRate:
    def test_high(self) -> None:
        assert base_carb_rate(Intensity.HIGH) == 75.0

    def test_moderate(self) -> None:
        assert base_carb_rate(Intensity.MODERATE) == 60.0

    def test_low(self) -> None:
        assert base_carb_rate(Intensity.LOW) == 40.0

    def test_accepts_labels(self) -> None:
        assert base_carb_rate("high") == 75.0

    def test_unrecognised_label_falls_back_to_low(self) -> None:
        assert base_carb_rate("extreme") == 40.0


class TestDurationFactor:
    def test_short_session_no_bump(self) -> None:
        assert duration_factor(149) == 1.0

    def test_boundary_150_gets_bump(self) -> None:
        assert duration_factor(150) == 1.10

    def test_long_session_bump(self) -> None:
        assert duration_factor(300) == 1.10


class TestTargetCarbs:
    def test_two_hours_moderate(self) -> None:
        """60 g/hr × 2 h, no duration bump."""
        assert target_carbs(70.0, 120, Intensity.MODERATE) == pytest.approx(120.0)

    def test_150_min_moderate_gets_bump(self) -> None:
        """60 × 1.1 × 2.5 h."""
        assert target_carbs(70.0, 150, Intensity.MODERATE) == pytest.approx(165.0)

    def test_90_min_high(self) -> None:
        """75 × 1.0 × 1.5 h."""
        assert target_carbs(70.0, 90, Intensity.HIGH) == pytest.approx(112.5)

    def test_unrecognised_intensity_uses_low_rate(self) -> None:
        assert target_carbs(70.0, 60, "unknown") == pytest.approx(40.0)

    @pytest.mark.parametrize("intensity", list(Intensity))
    @pytest.mark.parametrize("duration", [45, 120, 150, 240])
    def test_gi_sensitivity_never_changes_target(self, intensity, duration) -> None:
        targets = {
            target_carbs(62.0, duration, intensity, gi) for gi in GISensitivity
        }
        targets.add(target_carbs(62.0, duration, intensity, None))
        assert len(targets) == 1

    def test_weight_does_not_change_target(self) -> None:
        assert target_carbs(50.0, 120, Intensity.HIGH) == target_carbs(
            95.0, 120, Intensity.HIGH
        )

    def test_result_is_unrounded(self) -> None:
        # 40 g/hr × 50/60 h = 33.333...
        assert target_carbs(70.0, 50, Intensity.LOW) == pytest.approx(100.0 / 3.0)

    @pytest.mark.parametrize("duration", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_duration_rejected(self, duration) -> None:
        with pytest.raises(InvalidInputError):
            target_carbs(70.0, duration, Intensity.MODERATE)

    @pytest.mark.parametrize("duration", [0, -30])
    def test_non_positive_duration_rejected(self, duration) -> None:
        with pytest.raises(InvalidInputError):
            target_carbs(70.0, duration, Intensity.MODERATE)


class TestHourlyCarbTarget:
    def test_long_high_intensity(self) -> None:
        assert hourly_carb_target(180, Intensity.HIGH) == pytest.approx(82.5)

    def test_invalid_duration(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            hourly_carb_target(0, Intensity.LOW)
        assert exc_info.value.field == "duration_min"
