"""Pure nutrition math: carb targets, fluid targets, session aggregates."""
