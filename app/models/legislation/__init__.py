"""Legislation domain models - initiatives and outcome statistics."""

from app.models.legislation.entities import (
    AuthorEfficiency,
    AuthorStats,
    DashboardStats,
    OutcomeBreakdown,
    OutcomeCategory,
)
from app.models.legislation.initiative import (
    Deputy,
    Initiative,
    VoteBreakdown,
    VoteResult,
    VoteTotals,
    Voting,
    parse_initiatives,
)

__all__ = [
    "Initiative",
    "Voting",
    "VoteResult",
    "VoteTotals",
    "VoteBreakdown",
    "Deputy",
    "parse_initiatives",
    "OutcomeCategory",
    "AuthorStats",
    "AuthorEfficiency",
    "OutcomeBreakdown",
    "DashboardStats",
]
