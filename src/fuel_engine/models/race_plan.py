"""Race-day fueling plan models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from fuel_engine.models.enums import GISensitivity, Humidity, Intensity, Temperature


@dataclass(frozen=True)
class RacePlanBlock:
    """One hourly entry in the fueling timeline.

    Amounts are display strings with units, e.g. ``"66g"`` / ``"800ml"``.
    """

    offset_label: str  # "HH:MM" from race start
    carbs: str
    fluids: str


@dataclass(frozen=True)
class RacePlan:
    """Generated fueling plan for one event.

    ``aid_station_interval_km`` is carried for display only; the timeline
    is purely time-based.
    """

    race_name: str
    duration_min: float
    intensity: Intensity
    temperature: Temperature
    humidity: Humidity
    hourly_carbs_g: float
    hourly_fluids_ml: float
    blocks: tuple[RacePlanBlock, ...] = field(default_factory=tuple)
    aid_station_interval_km: float | None = None
    gi_sensitivity: GISensitivity | None = None

    @property
    def total_carbs_g(self) -> float:
        """Carbohydrate total across the whole race at the flat hourly rate."""
        return self.hourly_carbs_g * self.duration_min / 60.0

    @property
    def total_fluids_ml(self) -> float:
        return self.hourly_fluids_ml * self.duration_min / 60.0


@dataclass(frozen=True)
class RacePlanRecord:
    """A saved plan in the append-only plan history."""

    plan: RacePlan
    created_at: datetime
