"""Planner module — race-day fueling timelines."""

from fuel_engine.planner.race_plan import generate_race_plan

__all__ = ["generate_race_plan"]
