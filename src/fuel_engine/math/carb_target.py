"""Carbohydrate target calculation: base rate by intensity, long-effort bump.

Pure functions. The GI sensitivity tier is accepted by ``target_carbs`` so
callers can pass the whole assessment input set, but it never scales the
physiological target; GI tolerance only changes the qualitative advice.

Reference:
    Jeukendrup (2014). A step towards personalized sports nutrition:
    carbohydrate intake during exercise. Sports Med 44(Suppl 1):S25-S33.
"""

from __future__ import annotations

import math

from fuel_engine.exceptions import InvalidInputError
from fuel_engine.models.enums import (
    BASE_CARB_RATE_BY_INTENSITY,
    CARB_RATE_LOW,
    LONG_DURATION_FACTOR,
    LONG_DURATION_THRESHOLD_MIN,
    GISensitivity,
    Intensity,
)


def require_positive_duration(duration_min: float, field: str = "duration_min") -> None:
    """Raise InvalidInputError unless *duration_min* is a finite number > 0."""
    if duration_min is None or not math.isfinite(duration_min) or duration_min <= 0:
        raise InvalidInputError(
            f"Duration must be > 0 minutes, got {duration_min}", field=field
        )


def base_carb_rate(intensity: Intensity | str) -> float:
    """Base hourly carbohydrate rate (g/hr) for an intensity tier.

    Unrecognised intensities fall back to the low-intensity rate.
    """
    if isinstance(intensity, str):
        try:
            intensity = Intensity.from_label(intensity)
        except ValueError:
            return CARB_RATE_LOW
    return BASE_CARB_RATE_BY_INTENSITY.get(intensity, CARB_RATE_LOW)


def duration_factor(duration_min: float) -> float:
    """1.10 for efforts of 150 min or longer, else 1.00."""
    if duration_min >= LONG_DURATION_THRESHOLD_MIN:
        return LONG_DURATION_FACTOR
    return 1.0


def hourly_carb_target(duration_min: float, intensity: Intensity | str) -> float:
    """Hourly carbohydrate target in g/hr.

    Shared by the assessment calculator and the race planner.
    """
    require_positive_duration(duration_min)
    return base_carb_rate(intensity) * duration_factor(duration_min)


def target_carbs(
    weight_kg: float,
    duration_min: float,
    intensity: Intensity | str,
    gi_sensitivity: GISensitivity | str | None = None,
) -> float:
    """Total carbohydrate target for a session, in grams.

    Total = base_rate(intensity) × duration_factor × duration / 60.

    Args:
        weight_kg: Athlete body mass. Not used by the current formula.
        duration_min: Session duration in minutes, must be > 0.
        intensity: Session intensity tier.
        gi_sensitivity: Reported GI tolerance. Never changes the result.

    Returns:
        Unrounded total grams. Round at the point of persistence.

    Raises:
        InvalidInputError: If duration_min <= 0.
    """
    return hourly_carb_target(duration_min, intensity) * (duration_min / 60.0)
