"""Fuel engine: carbohydrate targets, readiness scoring and race fueling plans."""

__version__ = "0.1.0"
