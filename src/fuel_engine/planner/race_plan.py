"""Race-day fueling timeline.

Produces one block per started hour of the race. Every block carries the same
hourly carb and fluid figures. The plan is flat-rate, not cumulative and not
tapered. Carbs follow the assessment calculator's base-rate rule; fluids are
driven by expected temperature and humidity.
"""

from __future__ import annotations

import math

from fuel_engine.exceptions import InvalidInputError
from fuel_engine.math.carb_target import hourly_carb_target
from fuel_engine.math.fluids import hourly_fluid_target
from fuel_engine.models.assessment import Assessment
from fuel_engine.models.enums import (
    DEFAULT_RACE_INTENSITY,
    RACE_PLAN_BLOCK_MIN,
    RACE_PLAN_MIN_DURATION_MIN,
    Humidity,
    Intensity,
    Temperature,
)
from fuel_engine.models.race_plan import RacePlan, RacePlanBlock


def format_offset(minutes: int) -> str:
    """Zero-padded HH:MM offset from race start. e.g. 120 -> '02:00'."""
    hours, mins = divmod(int(minutes), 60)
    return f"{hours:02d}:{mins:02d}"


def format_grams(value: float) -> str:
    """'82.5g', '66g': one decimal at most, trailing zero dropped."""
    return f"{round(value, 1):g}g"


def format_millilitres(value: float) -> str:
    return f"{round(value):d}ml"


def resolve_intensity(
    intensity: Intensity | None, assessment: Assessment | None
) -> Intensity:
    """Explicit intensity, else the assessment's, else moderate."""
    if intensity is not None:
        return intensity
    if assessment is not None:
        return assessment.intensity
    return DEFAULT_RACE_INTENSITY


def block_count(duration_min: float) -> int:
    """Number of hourly blocks: ceil(duration / 60)."""
    return math.ceil(duration_min / RACE_PLAN_BLOCK_MIN)


def generate_race_plan(
    race_name: str,
    duration_min: float,
    temperature: Temperature = Temperature.NORMAL,
    humidity: Humidity = Humidity.NORMAL,
    intensity: Intensity | None = None,
    aid_station_interval_km: float | None = None,
    assessment: Assessment | None = None,
) -> RacePlan:
    """Generate a flat-rate fueling timeline for a race.

    Args:
        race_name: Display name of the event.
        duration_min: Expected race duration in minutes, must be >= 30.
        temperature: Expected temperature band.
        humidity: Expected humidity band.
        intensity: Race intensity. Defaults to the assessment's intensity,
            or moderate when there is no assessment.
        aid_station_interval_km: Carried for display only.
        assessment: The athlete's assessment, read for the default
            intensity and the GI sensitivity tag. Never modified.

    Returns:
        A RacePlan with ceil(duration/60) identical blocks. Not persisted.

    Raises:
        InvalidInputError: If duration_min < 30.
    """
    if (
        duration_min is None
        or not math.isfinite(duration_min)
        or duration_min < RACE_PLAN_MIN_DURATION_MIN
    ):
        raise InvalidInputError(
            f"Race duration must be >= {RACE_PLAN_MIN_DURATION_MIN} minutes, "
            f"got {duration_min}",
            field="duration_min",
        )

    race_intensity = resolve_intensity(intensity, assessment)
    carbs = hourly_carb_target(duration_min, race_intensity)
    fluids = hourly_fluid_target(temperature, humidity)

    carbs_label = format_grams(carbs)
    fluids_label = format_millilitres(fluids)
    blocks = tuple(
        RacePlanBlock(
            offset_label=format_offset(hour * RACE_PLAN_BLOCK_MIN),
            carbs=carbs_label,
            fluids=fluids_label,
        )
        for hour in range(block_count(duration_min))
    )

    return RacePlan(
        race_name=race_name,
        duration_min=duration_min,
        intensity=race_intensity,
        temperature=temperature,
        humidity=humidity,
        hourly_carbs_g=carbs,
        hourly_fluids_ml=fluids,
        blocks=blocks,
        aid_station_interval_km=aid_station_interval_km,
        gi_sensitivity=assessment.gi_sensitivity if assessment is not None else None,
    )
