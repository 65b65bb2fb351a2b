"""Legislation domain entities - outcome statistics."""

from enum import StrEnum

from app.models.common import BaseEntity


class OutcomeCategory(StrEnum):
    """Final outcome of an initiative."""

    SUCCESS = "success"
    FAILURE = "failure"
    NEUTRAL = "neutral"


class AuthorStats(BaseEntity):
    """Finalized initiatives of one author bucket."""

    total: int = 0
    success: int = 0
    rate: int = 0


class AuthorEfficiency(BaseEntity):
    gobierno: AuthorStats
    groups: AuthorStats


class OutcomeBreakdown(BaseEntity):
    success: int = 0
    failure: int = 0
    neutral: int = 0


class DashboardStats(BaseEntity):
    """Success rates overall and per author bucket."""

    global_success_rate: int
    breakdown: OutcomeBreakdown
    author_efficiency: AuthorEfficiency

    @property
    def finalized_count(self) -> int:
        return self.breakdown.success + self.breakdown.failure + self.breakdown.neutral
