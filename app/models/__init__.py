"""Models package - input records and computed entities for all domains."""

from app.models.common import BaseEntity, BaseRecord
from app.models.legislation import (
    AuthorEfficiency,
    AuthorStats,
    DashboardStats,
    Deputy,
    Initiative,
    OutcomeBreakdown,
    OutcomeCategory,
    VoteBreakdown,
    VoteResult,
    VoteTotals,
    Voting,
    parse_initiatives,
)
from app.models.voting import (
    BrokenBlock,
    ConsensusColor,
    ConsensusLabel,
    ConsensusMetric,
    ConsensusRankings,
    CriticalAbsence,
    DeputyAbsence,
    ParticipationStats,
    PartyAbsence,
    RankedInitiative,
)

__all__ = [
    # Common
    "BaseEntity",
    "BaseRecord",
    # Legislation
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
    # Voting
    "ConsensusLabel",
    "ConsensusColor",
    "ConsensusMetric",
    "RankedInitiative",
    "ConsensusRankings",
    "PartyAbsence",
    "CriticalAbsence",
    "BrokenBlock",
    "DeputyAbsence",
    "ParticipationStats",
]
