"""Voting domain entities - computed analytics results."""

from enum import StrEnum

from app.models.common import BaseEntity
from app.models.legislation.initiative import Initiative


class ConsensusLabel(StrEnum):
    UNANIMOUS = "Unanimous"
    STRONG_AGREEMENT = "Strong Agreement"
    CLOSE_SPLIT = "Close Split"
    DIVISION = "Division"
    NO_VOTE = "No Vote"


class ConsensusColor(StrEnum):
    NEUTRAL = "#e5e7eb"
    UNANIMOUS = "#10B981"
    STRONG_AGREEMENT = "#34D399"
    CLOSE_SPLIT = "#F59E0B"
    CLOSE_SPLIT_RISK = "#EF4444"
    DIVISION = "#FBBF24"


class ConsensusMetric(BaseEntity):
    """Agreement score of a single initiative."""

    consensus_index: int
    label: ConsensusLabel
    color: str


class RankedInitiative(ConsensusMetric):
    """Initiative with its consensus metric attached."""

    initiative: Initiative


class ConsensusRankings(BaseEntity):
    top_consensus: list[RankedInitiative]
    top_divisive: list[RankedInitiative]


class PartyAbsence(BaseEntity):
    party: str
    count: int


class CriticalAbsence(BaseEntity):
    """Vote where the absent members could have reversed the result."""

    initiative: Initiative
    margin: int
    missing: int


class BrokenBlock(BaseEntity):
    """Party that split despite a dominant position."""

    initiative: Initiative
    party: str
    details: str


class DeputyAbsence(BaseEntity):
    name: str
    party: str
    count: int
    avatar: str | None = None


class ParticipationStats(BaseEntity):
    """Attendance, abstention and absenteeism report."""

    global_commitment: int
    total_voted: int
    total_possible_votes: int
    total_abstentions: int
    total_no_votes: int
    absenteeism_ranking: list[PartyAbsence]
    critical_absences: list[CriticalAbsence]
    broken_blocks: list[BrokenBlock]
    deputy_ranking: list[DeputyAbsence]
