"""Assessment — the single active nutrition assessment for an athlete."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime

from fuel_engine.exceptions import InvalidInputError
from fuel_engine.models.enums import GISensitivity, Intensity, Symptom
from fuel_engine.models.profile import AthleteProfile


@dataclass(frozen=True)
class Assessment:
    """Frozen assessment record: profile, carb-rate inputs and computed results.

    At most one is active per athlete. Submitting the assessment form
    overwrites it; an explicit reset deletes it.
    """

    profile: AthleteProfile
    duration_min: float
    intensity: Intensity
    gi_sensitivity: GISensitivity
    target_carbs_g: float
    symptoms: frozenset[Symptom] = field(default_factory=frozenset)
    recommendations: tuple[str, ...] = field(default_factory=tuple)
    event_date: date | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        # Every derived rate divides by duration / 60
        if not math.isfinite(self.duration_min) or self.duration_min <= 0:
            raise InvalidInputError(
                f"Assessment duration must be > 0 minutes, got {self.duration_min}",
                field="duration_min",
            )
        if not math.isfinite(self.target_carbs_g) or self.target_carbs_g < 0:
            raise InvalidInputError(
                f"Target carbs must be >= 0 g, got {self.target_carbs_g}",
                field="target_carbs_g",
            )

    @property
    def target_carb_rate(self) -> float:
        """Target intake normalised to grams per hour."""
        return self.target_carbs_g / (self.duration_min / 60.0)

    def days_until_event(self, as_of: date) -> int | None:
        """Days from *as_of* to the event date, or None if unset or past."""
        if self.event_date is None:
            return None
        days = (self.event_date - as_of).days
        return days if days >= 0 else None
