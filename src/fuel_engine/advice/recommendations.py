"""Recommendation text for a completed assessment.

Order matters, the most load-bearing advice comes first:

1. The hourly carbohydrate target for the assessed session length.
2. One block of GI-tolerance advice (3 items for high sensitivity, 2 otherwise).
3. Symptom-specific items, in Symptom declaration order.
4. Two training-reinforcement items.
"""

from __future__ import annotations

from typing import Iterable

from fuel_engine.math.carb_target import require_positive_duration
from fuel_engine.models.enums import GISensitivity, Symptom

# ---------------------------------------------------------------------------
# GI tolerance blocks, exactly one is used per assessment
# ---------------------------------------------------------------------------

_GI_ADVICE: dict[GISensitivity, tuple[str, ...]] = {
    GISensitivity.HIGH: (
        "Prioritise easily digestible carbohydrate sources such as sports "
        "drinks, gels and chews.",
        "Avoid high-fiber foods in the 3-4 hours before and during training "
        "and racing.",
        "Use multiple transportable carbohydrates (glucose + fructose, roughly "
        "2:1) to raise absorption without overloading a single gut transporter.",
    ),
    GISensitivity.MODERATE: (
        "Mix carbohydrate sources (drinks, gels, chews) to spread the load on "
        "your gut.",
        "Test any new fueling product in training before using it on race day.",
    ),
    GISensitivity.NONE: (
        "Your gut tolerance is good: you can draw on a broad range of "
        "carbohydrate sources, including real food.",
        "Use that tolerance to practise higher intakes on your longest "
        "sessions.",
    ),
}

# ---------------------------------------------------------------------------
# Symptom-specific advice, not mutually exclusive
# ---------------------------------------------------------------------------

_SYMPTOM_ADVICE: dict[Symptom, tuple[str, ...]] = {
    Symptom.BLOATING: (
        "For bloating, limit fructose-heavy products and favour a "
        "glucose-dominant mix.",
    ),
    Symptom.NAUSEA: (
        "For nausea, take smaller amounts more frequently (every 15-20 "
        "minutes) instead of large single doses.",
    ),
    Symptom.CRAMPING: (
        "For cramping, add sodium to your fluids (around 300-600 mg per hour).",
    ),
    Symptom.DIARRHEA: (
        "For diarrhea, avoid high-fiber and high-fat foods before and during "
        "exercise.",
        "Consider a low-FODMAP diet in the 24-48 hours before key sessions "
        "and races.",
    ),
}

_TRAINING_ADVICE: tuple[str, ...] = (
    "Train your gut: practise your target intake in at least two sessions "
    "per week and build up gradually.",
    "Rehearse your exact race-day fueling plan, products and timing during "
    "long training sessions.",
)


def _format_number(value: float) -> str:
    return f"{value:g}" if float(value).is_integer() else f"{value:.1f}"


def hourly_target_statement(target_carbs_g: float, duration_min: float) -> str:
    """The lead recommendation: hourly target to one decimal + session length."""
    hourly = target_carbs_g / (duration_min / 60.0)
    return (
        f"Aim for {hourly:.1f}g of carbohydrate per hour during your "
        f"{_format_number(duration_min)}-minute sessions."
    )


def gi_advice(gi_sensitivity: GISensitivity | None) -> tuple[str, ...]:
    """GI tolerance block; anything but HIGH/MODERATE gets the broad-tolerance block."""
    return _GI_ADVICE.get(gi_sensitivity, _GI_ADVICE[GISensitivity.NONE])  # type: ignore[arg-type]


def symptom_advice(symptoms: Iterable[Symptom]) -> list[str]:
    """Items for each reported symptom, in fixed Symptom order."""
    reported = set(symptoms)
    items: list[str] = []
    for symptom in Symptom:
        if symptom in reported:
            items.extend(_SYMPTOM_ADVICE.get(symptom, ()))
    return items


def generate_recommendations(
    target_carbs_g: float,
    duration_min: float,
    gi_sensitivity: GISensitivity | None,
    symptoms: Iterable[Symptom] = (),
) -> list[str]:
    """Build the ordered recommendation list for an assessment.

    Args:
        target_carbs_g: Total session carb target from the calculator.
        duration_min: Session duration in minutes, must be > 0.
        gi_sensitivity: Reported GI tolerance tier.
        symptoms: Reported GI symptoms (reflux and vomiting add no item).

    Returns:
        Recommendation strings, most load-bearing first.

    Raises:
        InvalidInputError: If duration_min <= 0.
    """
    require_positive_duration(duration_min)

    recommendations = [hourly_target_statement(target_carbs_g, duration_min)]
    recommendations.extend(gi_advice(gi_sensitivity))
    recommendations.extend(symptom_advice(symptoms))
    recommendations.extend(_TRAINING_ADVICE)
    return recommendations
