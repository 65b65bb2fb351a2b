"""Voting services."""

from app.services.voting.consensus import AffinityScorer, ConsensusClassifier
from app.services.voting.participation import ParticipationAnalyzer

__all__ = ["AffinityScorer", "ConsensusClassifier", "ParticipationAnalyzer"]
