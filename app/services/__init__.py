"""Services package - service class exports."""

from app.services.dashboard.service import DashboardService
from app.services.legislation.outcome import OutcomeAggregator
from app.services.voting.consensus import AffinityScorer, ConsensusClassifier
from app.services.voting.participation import ParticipationAnalyzer

__all__ = [
    "AffinityScorer",
    "ConsensusClassifier",
    "DashboardService",
    "OutcomeAggregator",
    "ParticipationAnalyzer",
]
