"""Readiness classification rules, one module per branch."""
