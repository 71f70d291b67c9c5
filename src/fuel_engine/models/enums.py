"""Enumerations and nutrition constants for the fuel engine.

Carbohydrate and fluid figures follow the fixed rule set used across the
app; citations are given where a published guideline backs the number.
"""

from __future__ import annotations

from enum import IntEnum, auto


class _LabelledEnum(IntEnum):
    """IntEnum that round-trips through lower-case labels ("non_binary")."""

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_label(cls, value: str):
        """Look up a member by its lower-case label. Raises ValueError."""
        if not isinstance(value, str):
            raise ValueError(f"{cls.__name__} label must be a string, got {value!r}")
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown {cls.__name__} label: {value!r}") from None


class Priority(IntEnum):
    """Readiness rule tiers. Lower value is evaluated first; first match wins."""

    PREREQUISITE = 0
    SYMPTOMS = 1
    VOLUME = 2
    CARB_GAP_MAJOR = 3
    CARB_GAP_MINOR = 4
    BASELINE = 5


class Intensity(_LabelledEnum):
    """Session / race intensity tier."""

    LOW = auto()
    MODERATE = auto()
    HIGH = auto()


class GISensitivity(_LabelledEnum):
    """Athlete-reported gastrointestinal tolerance tier."""

    NONE = auto()
    MODERATE = auto()
    HIGH = auto()


class Symptom(_LabelledEnum):
    """Canonical GI symptoms reported in the assessment.

    Declaration order is the order symptom advice is emitted in.
    """

    BLOATING = auto()
    NAUSEA = auto()
    CRAMPING = auto()
    DIARRHEA = auto()
    REFLUX = auto()
    VOMITING = auto()


class Gender(_LabelledEnum):
    FEMALE = auto()
    MALE = auto()
    NON_BINARY = auto()
    UNSPECIFIED = auto()


class ExperienceLevel(_LabelledEnum):
    BEGINNER = auto()
    INTERMEDIATE = auto()
    ADVANCED = auto()
    ELITE = auto()


class Temperature(_LabelledEnum):
    """Expected race-day temperature band."""

    COLD = auto()
    NORMAL = auto()
    HOT = auto()


class Humidity(_LabelledEnum):
    NORMAL = auto()
    HIGH = auto()


class ReadinessStatus(IntEnum):
    """Qualitative readiness for the target event.

    Values order statuses by how much coach attention they need.
    """

    CAUTION = 1
    NOT_READY = 2
    IN_PROGRESS = 3
    READY = 4

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    ReadinessStatus.CAUTION: "Caution",
    ReadinessStatus.NOT_READY: "Not Ready",
    ReadinessStatus.IN_PROGRESS: "In Progress",
    ReadinessStatus.READY: "Ready",
}


# ---------------------------------------------------------------------------
# Carbohydrate targets — Jeukendrup (2014), Sports Med 44(Suppl 1):S25-S33
# ---------------------------------------------------------------------------
CARB_RATE_LOW = 40.0        # g/hr
CARB_RATE_MODERATE = 60.0   # g/hr
CARB_RATE_HIGH = 75.0       # g/hr

BASE_CARB_RATE_BY_INTENSITY = {
    Intensity.LOW: CARB_RATE_LOW,
    Intensity.MODERATE: CARB_RATE_MODERATE,
    Intensity.HIGH: CARB_RATE_HIGH,
}

# Efforts of 2.5 h or more get a 10% bump (multiple transportable carbs)
LONG_DURATION_THRESHOLD_MIN = 150
LONG_DURATION_FACTOR = 1.10

# ---------------------------------------------------------------------------
# Fluids — ACSM position stand, Sawka et al. (2007), Med Sci Sports Exerc
# ---------------------------------------------------------------------------
FLUID_RATE_BASE_ML = 650.0
FLUID_RATE_BY_TEMPERATURE = {
    Temperature.COLD: 450.0,
    Temperature.NORMAL: FLUID_RATE_BASE_ML,
    Temperature.HOT: 900.0,
}
HIGH_HUMIDITY_FLUID_BONUS_ML = 150.0

# ---------------------------------------------------------------------------
# Race plan
# ---------------------------------------------------------------------------
RACE_PLAN_MIN_DURATION_MIN = 30
RACE_PLAN_BLOCK_MIN = 60
DEFAULT_RACE_INTENSITY = Intensity.MODERATE

# ---------------------------------------------------------------------------
# Readiness thresholds
# ---------------------------------------------------------------------------
SYMPTOM_SEVERITY_MIN = 0
SYMPTOM_SEVERITY_MAX = 10
SYMPTOM_CAUTION_THRESHOLD = 5.0      # avg severity above this → Caution
MIN_SESSIONS_FOR_READINESS = 3
CARB_GAP_CAUTION_G_PER_HR = 25.0
CARB_GAP_PROGRESS_G_PER_HR = 15.0
CONSISTENCY_WINDOW_DAYS = 7

PERCEIVED_EXERTION_MIN = 1
PERCEIVED_EXERTION_MAX = 10
