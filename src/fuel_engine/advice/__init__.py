"""Advice module — ordered recommendation text for an assessment."""

from fuel_engine.advice.recommendations import generate_recommendations

__all__ = ["generate_recommendations"]
