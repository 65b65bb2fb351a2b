"""Voting domain models - consensus and participation entities."""

from app.models.voting.entities import (
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
