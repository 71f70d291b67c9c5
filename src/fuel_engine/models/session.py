"""Logged training session — one entry in the append-only history."""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import date

from fuel_engine.exceptions import InvalidInputError
from fuel_engine.models.enums import (
    PERCEIVED_EXERTION_MAX,
    PERCEIVED_EXERTION_MIN,
    SYMPTOM_SEVERITY_MAX,
    SYMPTOM_SEVERITY_MIN,
)


def new_session_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class TrainingSession:
    """A single logged training session.

    Never mutated after creation. Validation happens here so that every
    session reaching the readiness scorer has a usable duration.
    """

    session_date: date
    sport: str
    duration_min: float
    carbs_g: float
    fluids_ml: float = 0.0
    symptom_severity: int = 0
    perceived_exertion: int = 5
    notes: str = ""
    session_id: str = field(default_factory=new_session_id)

    def __post_init__(self) -> None:
        if not math.isfinite(self.duration_min) or self.duration_min <= 0:
            raise InvalidInputError(
                f"Session duration must be > 0 minutes, got {self.duration_min}",
                field="duration_min",
            )
        if not math.isfinite(self.carbs_g) or self.carbs_g < 0:
            raise InvalidInputError(
                f"Carbs consumed must be >= 0 g, got {self.carbs_g}",
                field="carbs_g",
            )
        if not math.isfinite(self.fluids_ml) or self.fluids_ml < 0:
            raise InvalidInputError(
                f"Fluids consumed must be >= 0 ml, got {self.fluids_ml}",
                field="fluids_ml",
            )
        if not SYMPTOM_SEVERITY_MIN <= self.symptom_severity <= SYMPTOM_SEVERITY_MAX:
            raise InvalidInputError(
                f"Symptom severity must be {SYMPTOM_SEVERITY_MIN}-{SYMPTOM_SEVERITY_MAX}, "
                f"got {self.symptom_severity}",
                field="symptom_severity",
            )
        if not PERCEIVED_EXERTION_MIN <= self.perceived_exertion <= PERCEIVED_EXERTION_MAX:
            raise InvalidInputError(
                f"Perceived exertion must be {PERCEIVED_EXERTION_MIN}-{PERCEIVED_EXERTION_MAX}, "
                f"got {self.perceived_exertion}",
                field="perceived_exertion",
            )

    @property
    def carb_rate(self) -> float:
        """Carbohydrate intake in g/hr for this session."""
        return self.carbs_g / (self.duration_min / 60.0)
