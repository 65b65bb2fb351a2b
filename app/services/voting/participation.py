"""Chamber participation, absenteeism and dissidence analytics."""

from collections import Counter, defaultdict
from collections.abc import Iterator, Sequence

from loguru import logger

from app.errors import require
from app.models.legislation import Deputy, Initiative, VoteBreakdown
from app.models.voting import (
    BrokenBlock,
    CriticalAbsence,
    DeputyAbsence,
    ParticipationStats,
    PartyAbsence,
)
from helpers import formulas
from settings import (
    BLOCK_DOMINANCE,
    BLOCK_MIN_VOTES,
    CHAMBER_SIZE,
    DEPUTY_LIST_FIELDS,
    MIXED_GROUP_KEYWORD,
    MIXED_GROUP_LABEL,
    TOP_ANOMALIES,
    TOP_DEPUTIES,
    TOP_PARTY_ABSENTEEISM,
)

# Desglose category -> label used in broken block details
CATEGORY_LABELS = {"yes": "Yes", "no": "No", "abstention": "Abs", "no_vote": "No Vote"}


class ParticipationAnalyzer:
    """Attendance, abstentions, absenteeism rankings and vote anomalies."""

    def __init__(
        self,
        chamber_size: int = CHAMBER_SIZE,
        top_parties: int = TOP_PARTY_ABSENTEEISM,
        top_anomalies: int = TOP_ANOMALIES,
        top_deputies: int = TOP_DEPUTIES,
        block_min_votes: int = BLOCK_MIN_VOTES,
        block_dominance: float = BLOCK_DOMINANCE,
        deputy_list_fields: Sequence[str] = DEPUTY_LIST_FIELDS,
        mixed_group_keyword: str = MIXED_GROUP_KEYWORD,
        mixed_group_label: str = MIXED_GROUP_LABEL,
    ):
        require(chamber_size > 0, f"Invalid chamber_size: {chamber_size}. Must be > 0")
        require(
            min(top_parties, top_anomalies, top_deputies) >= 0,
            f"Invalid ranking windows: {top_parties}, {top_anomalies}, {top_deputies}. Must be >= 0",
        )
        require(block_min_votes >= 0, f"Invalid block_min_votes: {block_min_votes}. Must be >= 0")
        require(0 < block_dominance < 1, f"Invalid block_dominance: {block_dominance}. Must be between 0 and 1")

        self.chamber_size = chamber_size
        self.top_parties = top_parties
        self.top_anomalies = top_anomalies
        self.top_deputies = top_deputies
        self.block_min_votes = block_min_votes
        self.block_dominance = block_dominance
        self.deputy_list_fields = tuple(deputy_list_fields)
        self.mixed_group_keyword = mixed_group_keyword.lower()
        self.mixed_group_label = mixed_group_label
        logger.debug("ParticipationAnalyzer initialized (chamber of {})", chamber_size)

    def analyze(self, initiatives: Sequence[Initiative]) -> ParticipationStats:
        """Full participation report for a dataset."""
        total_voted = 0
        total_present = 0
        total_abstentions = 0
        no_votes_by_party: Counter[str] = Counter()
        critical_absences: list[CriticalAbsence] = []
        broken_blocks: list[BrokenBlock] = []
        qualifying = 0

        for initiative in initiatives:
            voting = initiative.voting
            if not initiative.voted or voting.totals is None or voting.desglose is None:
                continue

            qualifying += 1
            totals, desglose = voting.totals, voting.desglose

            total_voted += totals.cast
            total_present += totals.present or self.chamber_size
            total_abstentions += totals.abstain
            no_votes_by_party.update(desglose.category("no_vote"))

            margin = formulas.vote_margin(totals.favor, totals.against)
            if formulas.could_flip(totals.no_vote_count, margin):
                critical_absences.append(
                    CriticalAbsence(initiative=initiative, margin=margin, missing=totals.no_vote_count)
                )

            broken_blocks.extend(self.broken_blocks(initiative, desglose))

        possible = len(initiatives) * self.chamber_size
        absenteeism = sorted(no_votes_by_party.items(), key=lambda kv: kv[1], reverse=True)

        # TODO: expose present members once the dashboard has a panel for them
        logger.debug("Present members across {} votings: {}", qualifying, total_present)
        logger.info(
            "Participation: {} of {} initiatives qualified, {} critical absences, {} broken blocks",
            qualifying,
            len(initiatives),
            len(critical_absences),
            len(broken_blocks),
        )

        return ParticipationStats(
            global_commitment=formulas.commitment(total_voted, len(initiatives), self.chamber_size),
            total_voted=total_voted,
            total_possible_votes=possible,
            total_abstentions=total_abstentions,
            total_no_votes=possible - total_voted,
            absenteeism_ranking=[PartyAbsence(party=p, count=c) for p, c in absenteeism[: self.top_parties]],
            critical_absences=critical_absences[: self.top_anomalies],
            broken_blocks=broken_blocks[: self.top_anomalies],
            deputy_ranking=self.deputy_ranking(initiatives),
        )

    def broken_blocks(self, initiative: Initiative, desglose: VoteBreakdown) -> Iterator[BrokenBlock]:
        """Parties with a dominant position (strictly between threshold and 100%) and dissenters."""
        tallies: dict[str, Counter[str]] = defaultdict(Counter)
        for category in CATEGORY_LABELS:
            for party, count in desglose.category(category).items():
                tallies[party][category] += count

        for party, votes in tallies.items():
            yes, no, abstain, no_vote = (votes[c] for c in CATEGORY_LABELS)
            if yes + no + abstain + no_vote < self.block_min_votes:
                continue

            if not self.block_dominance < formulas.dominance(yes, no, abstain, no_vote) < 1:
                continue

            top = max(yes, no, abstain)
            minors = [f"{votes[c]} {label}" for c, label in CATEGORY_LABELS.items() if votes[c] and votes[c] != top]
            if not minors:
                continue

            majority = "Yes" if yes == top else "No" if no == top else "Abs"
            yield BrokenBlock(
                initiative=initiative,
                party=party,
                details=f"Majority voted {majority}, but there were: {', '.join(minors)}",
            )

    def deputy_ranking(self, initiatives: Sequence[Initiative]) -> list[DeputyAbsence]:
        """Deputies who missed the most votes."""
        counts: Counter[str] = Counter()
        first_seen: dict[str, Deputy] = {}

        for initiative in initiatives:
            for deputy in self.absent_deputies(initiative):
                first_seen.setdefault(deputy.key, deputy)
                counts[deputy.key] += 1

        ranking = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[: self.top_deputies]
        return [
            DeputyAbsence(
                name=first_seen[key].name,
                party=self.display_party(first_seen[key]),
                count=count,
                avatar=first_seen[key].avatar,
            )
            for key, count in ranking
        ]

    def absent_deputies(self, initiative: Initiative) -> list[Deputy]:
        """Individual no-vote list, trying each configured field in order."""
        if initiative.voting is None:
            return []

        for field in self.deputy_list_fields:
            deputies = getattr(initiative.voting, field, None)
            if deputies is not None:
                return deputies
        return []

    def display_party(self, deputy: Deputy) -> str:
        if self.mixed_group_keyword in deputy.group.lower():
            return self.mixed_group_label
        return deputy.formation or deputy.group
