"""Custom exception hierarchy for the fuel engine."""

from __future__ import annotations


class FuelEngineError(Exception):
    """Base exception for all fuel_engine errors."""


class InvalidInputError(FuelEngineError, ValueError):
    """A calculator or model received a value outside its contract.

    Raised for non-positive durations, out-of-range session fields and
    race durations below the planner minimum.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class SaveFailedError(FuelEngineError):
    """A computed result could not be persisted.

    The computed object is attached as ``result`` so callers can still show
    it; the underlying storage error is chained as ``__cause__``.
    """

    def __init__(self, message: str, result: object = None) -> None:
        super().__init__(message)
        self.result = result
