"""Consensus classification, rankings and actor affinity."""

from collections.abc import Callable, Sequence

from loguru import logger

from app.errors import require
from app.models.legislation import Initiative, VoteBreakdown
from app.models.voting import (
    ConsensusColor,
    ConsensusLabel,
    ConsensusMetric,
    ConsensusRankings,
    RankedInitiative,
)
from helpers import formulas
from settings import DEFAULT_REFERENCE_CODE, TOP_CONSENSUS

NO_VOTE = ConsensusMetric(consensus_index=0, label=ConsensusLabel.NO_VOTE, color=ConsensusColor.NEUTRAL)

# (matches(index, no), label, color) - first match wins, anything left is Division.
# Below 45 is still a close split, but shown in the risk color.
LABEL_RULES: tuple[tuple[Callable[[int, int], bool], ConsensusLabel, ConsensusColor], ...] = (
    (lambda index, no: index == 100 and no == 0, ConsensusLabel.UNANIMOUS, ConsensusColor.UNANIMOUS),
    (lambda index, no: index >= 80, ConsensusLabel.STRONG_AGREEMENT, ConsensusColor.STRONG_AGREEMENT),
    (lambda index, no: 45 <= index <= 55, ConsensusLabel.CLOSE_SPLIT, ConsensusColor.CLOSE_SPLIT),
    (lambda index, no: index < 45, ConsensusLabel.CLOSE_SPLIT, ConsensusColor.CLOSE_SPLIT_RISK),
)

# Checked in order, the first category holding the actor is its position.
POSITIONS = ("yes", "no", "abstention")


class ConsensusClassifier:
    """Per-initiative agreement scoring and cross-initiative rankings."""

    def __init__(self, top_n: int = TOP_CONSENSUS):
        require(top_n >= 0, f"Invalid top_n: {top_n}. Must be >= 0")
        self.top_n = top_n
        logger.debug("ConsensusClassifier initialized")

    def classify(self, initiative: Initiative) -> ConsensusMetric:
        """Consensus index (Yes share of Yes+No), label and color."""
        if not initiative.voted:
            return NO_VOTE

        yes, no = initiative.voting.yes, initiative.voting.no
        if not yes + no:
            return NO_VOTE

        index = formulas.yes_ratio(yes, no)
        for matches, label, color in LABEL_RULES:
            if matches(index, no):
                return ConsensusMetric(consensus_index=index, label=label, color=color)

        return ConsensusMetric(consensus_index=index, label=ConsensusLabel.DIVISION, color=ConsensusColor.DIVISION)

    def rank(self, initiatives: Sequence[Initiative]) -> ConsensusRankings:
        """Most consensual and most divisive (closest to 50%) voted initiatives."""
        ranked = [self._ranked(i) for i in initiatives if i.voted]

        top_consensus = sorted(ranked, key=lambda r: r.consensus_index, reverse=True)[: self.top_n]
        top_divisive = sorted(ranked, key=lambda r: formulas.distance_to_tie(r.consensus_index))[: self.top_n]

        logger.info("Ranked {} voted initiatives", len(ranked))
        return ConsensusRankings(top_consensus=top_consensus, top_divisive=top_divisive)

    def _ranked(self, initiative: Initiative) -> RankedInitiative:
        metric = self.classify(initiative)
        return RankedInitiative(
            consensus_index=metric.consensus_index,
            label=metric.label,
            color=metric.color,
            initiative=initiative,
        )


def vote_position(desglose: VoteBreakdown, code: str) -> str | None:
    """Category whose party codes contain code, None if the actor is not found."""
    for category in POSITIONS:
        if any(code in party for party in desglose.category(category)):
            return category
    return None


class AffinityScorer:
    """How often an actor votes like a reference actor."""

    def __init__(self, reference_code: str = DEFAULT_REFERENCE_CODE):
        self.reference_code = reference_code
        logger.debug("AffinityScorer initialized (reference {})", reference_code)

    def affinity(
        self,
        initiatives: Sequence[Initiative],
        target_code: str,
        reference_code: str | None = None,
    ) -> int:
        """Share (0-100) of comparable votes where target and reference agreed.

        Codes match by substring, raw party codes may carry prefixes or suffixes.
        """
        if reference_code is None:
            reference_code = self.reference_code

        pairs = []
        for initiative in initiatives:
            if not initiative.voted or initiative.voting.desglose is None:
                continue

            desglose = initiative.voting.desglose
            ref_vote = vote_position(desglose, reference_code)
            target_vote = vote_position(desglose, target_code)
            if ref_vote and target_vote:
                pairs.append((ref_vote, target_vote))

        result = formulas.agreement_rate(pairs)
        logger.debug("Affinity {} vs {}: {}% over {} votings", target_code, reference_code, result, len(pairs))
        return result

    def matrix(self, initiatives: Sequence[Initiative], codes: Sequence[str]) -> dict[str, dict[str, int]]:
        """Pairwise affinity between actor codes, result[target][reference].

        The diagonal goes through affinity() as well, so a code absent from every
        voting scores 0 against itself.
        """
        result = {
            target: {reference: self.affinity(initiatives, target, reference) for reference in codes}
            for target in codes
        }

        logger.info("Computed affinity matrix {}x{}", len(codes), len(codes))
        return result
