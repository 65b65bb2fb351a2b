"""Dashboard service."""

from collections.abc import Iterable, Sequence
from typing import Any

from loguru import logger

from app.models.legislation import Initiative, parse_initiatives
from app.services.legislation.outcome import OutcomeAggregator
from app.services.voting.consensus import AffinityScorer, ConsensusClassifier
from app.services.voting.participation import ParticipationAnalyzer


class DashboardService:
    """Dashboard business logic - runs every analysis over one dataset."""

    def __init__(
        self,
        classifier: ConsensusClassifier,
        affinity: AffinityScorer,
        outcomes: OutcomeAggregator,
        participation: ParticipationAnalyzer,
    ):
        self._classifier = classifier
        self._affinity = affinity
        self._outcomes = outcomes
        self._participation = participation

    def get_overview(
        self,
        records: Iterable[Initiative | dict[str, Any]],
        affinity_codes: Sequence[str] | None = None,
    ) -> dict:
        """All dashboard reports, as presentation-ready dicts."""
        initiatives = parse_initiatives(records)
        logger.info("Building dashboard for {} initiatives", len(initiatives))

        overview = {
            "initiatives": len(initiatives),
            "outcomes": self._outcomes.aggregate(initiatives).to_dict(),
            "rankings": self._classifier.rank(initiatives).to_dict(),
            "participation": self._participation.analyze(initiatives).to_dict(),
        }

        if affinity_codes:
            overview["affinity"] = self._affinity.matrix(initiatives, affinity_codes)

        return overview
