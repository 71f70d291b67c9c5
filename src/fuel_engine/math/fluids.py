"""Hourly fluid targets from expected race-day conditions.

Reference:
    Sawka et al. (2007). American College of Sports Medicine position stand.
    Exercise and fluid replacement. Med Sci Sports Exerc 39(2):377-390.
"""

from __future__ import annotations

from fuel_engine.models.enums import (
    FLUID_RATE_BASE_ML,
    FLUID_RATE_BY_TEMPERATURE,
    HIGH_HUMIDITY_FLUID_BONUS_ML,
    Humidity,
    Temperature,
)


def hourly_fluid_target(temperature: Temperature, humidity: Humidity) -> float:
    """Fluid target in ml/hr.

    Temperature selects the base (cold 450, normal 650, hot 900); high
    humidity then adds 150 ml on top of whichever base was selected.
    """
    fluids = FLUID_RATE_BY_TEMPERATURE.get(temperature, FLUID_RATE_BASE_ML)
    if humidity == Humidity.HIGH:
        fluids += HIGH_HUMIDITY_FLUID_BONUS_ML
    return fluids
