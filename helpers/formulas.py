"""Pure math formulas - no dependencies, easily testable."""
from math import floor


def round_half_up(value: float) -> int:
    """Round to nearest integer, .5 always goes up (dashboard rounding)."""
    return floor(value + 0.5)


def percentage(part: float, whole: float) -> int:
    """Integer percentage of part in whole, 0 for an empty whole."""
    return round_half_up(part / whole * 100) if whole else 0


def yes_ratio(yes: int, no: int) -> int:
    """Share of Yes among Yes+No votes (0-100). Abstentions don't count."""
    return percentage(yes, yes + no)


def vote_margin(favor: int, against: int) -> int:
    """Absolute distance between Yes and No."""
    return abs(favor - against)


def could_flip(missing: int, margin: int) -> bool:
    """Whether the missing votes cover the margin of a result."""
    return missing > 0 and missing >= margin


def dominance(yes: int, no: int, abstain: int, no_vote: int = 0) -> float:
    """Share of the largest cast option over every member of a block."""
    total = yes + no + abstain + no_vote
    return max(yes, no, abstain) / total if total else 0.0


def distance_to_tie(index: int) -> int:
    """How far a consensus index is from a 50/50 split."""
    return abs(index - 50)


def agreement_rate(pairs: list[tuple[str, str]]) -> int:
    """How often two actors vote the same (0-100%)."""
    return percentage(sum(a == b for a, b in pairs), len(pairs))


def commitment(voted: int, initiatives: int, chamber_size: int) -> int:
    """Cast votes over every seat of every initiative (0-100%)."""
    return percentage(voted, initiatives * chamber_size)
