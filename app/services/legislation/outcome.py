"""Initiative outcome aggregation."""

from collections import Counter
from collections.abc import Callable, Sequence

from loguru import logger

from app.models.legislation import (
    AuthorEfficiency,
    AuthorStats,
    DashboardStats,
    Initiative,
    OutcomeBreakdown,
    OutcomeCategory,
)
from helpers import formulas
from settings import FAILURE_KEYWORDS, GOVERNMENT_KEYWORD, NEUTRAL_KEYWORDS, SUCCESS_KEYWORDS

StatusRule = tuple[Callable[[str], bool], OutcomeCategory]


def contains_any(*keywords: str) -> Callable[[str], bool]:
    """Case-sensitive substring predicate."""
    return lambda status: any(k in status for k in keywords)


# First match wins; statuses matching nothing are still in progress.
STATUS_RULES: tuple[StatusRule, ...] = (
    (contains_any(*SUCCESS_KEYWORDS), OutcomeCategory.SUCCESS),
    (contains_any(*FAILURE_KEYWORDS), OutcomeCategory.FAILURE),
    (contains_any(*NEUTRAL_KEYWORDS), OutcomeCategory.NEUTRAL),
)


def categorize(status: str, rules: Sequence[StatusRule] = STATUS_RULES) -> OutcomeCategory | None:
    """Outcome category of a free-text status, None if not finalized."""
    for matches, category in rules:
        if matches(status):
            return category
    return None


class OutcomeAggregator:
    """Success rates overall and split by author (government vs groups)."""

    def __init__(
        self,
        government_keyword: str = GOVERNMENT_KEYWORD,
        rules: Sequence[StatusRule] = STATUS_RULES,
    ):
        self.government_keyword = government_keyword.lower()
        self.rules = tuple(rules)
        logger.debug("OutcomeAggregator initialized")

    def is_government(self, initiative: Initiative) -> bool:
        return self.government_keyword in initiative.author.lower()

    def aggregate(self, initiatives: Sequence[Initiative]) -> DashboardStats:
        """Breakdown and success rates of finalized initiatives."""
        counts: Counter[OutcomeCategory] = Counter()
        authors = {"gobierno": Counter(), "groups": Counter()}

        for initiative in initiatives:
            category = categorize(initiative.status, self.rules)
            if category is None:
                continue

            counts[category] += 1
            bucket = authors["gobierno" if self.is_government(initiative) else "groups"]
            bucket["total"] += 1
            if category is OutcomeCategory.SUCCESS:
                bucket["success"] += 1

        finalized = sum(counts.values())
        logger.info("Aggregated {} finalized of {} initiatives", finalized, len(initiatives))

        return DashboardStats(
            global_success_rate=formulas.percentage(counts[OutcomeCategory.SUCCESS], finalized),
            breakdown=OutcomeBreakdown(
                success=counts[OutcomeCategory.SUCCESS],
                failure=counts[OutcomeCategory.FAILURE],
                neutral=counts[OutcomeCategory.NEUTRAL],
            ),
            author_efficiency=AuthorEfficiency(
                gobierno=_author_stats(authors["gobierno"]),
                groups=_author_stats(authors["groups"]),
            ),
        )


def _author_stats(bucket: Counter) -> AuthorStats:
    return AuthorStats(
        total=bucket["total"],
        success=bucket["success"],
        rate=formulas.percentage(bucket["success"], bucket["total"]),
    )
