"""Readiness rules and their base class."""
