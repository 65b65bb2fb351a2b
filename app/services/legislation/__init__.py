"""Legislation services."""

from app.services.legislation.outcome import STATUS_RULES, OutcomeAggregator, categorize

__all__ = ["OutcomeAggregator", "STATUS_RULES", "categorize"]
