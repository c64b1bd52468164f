"""Pure voting formulas - weights and pass rules, no I/O."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from app.models.core import OwnedApartment, Role
from app.models.voting import TallySummary, VoteChoice, VotingMethod

ZERO = Decimal(0)
ONE = Decimal(1)

# Methods decided by a strict yes-over-no majority of weight.
MAJORITY_METHODS = frozenset(
    {
        VotingMethod.SIMPLE_MAJORITY,
        VotingMethod.WEIGHTED_AREA,
        VotingMethod.PER_SEAT,
    }
)


def owned_area(apartments: Iterable[OwnedApartment]) -> Decimal:
    """Exact floor-area sum; apartments without a known area count as zero."""
    return sum((a.size_sq_m for a in apartments if a.size_sq_m is not None), ZERO)


def vote_weight(method: VotingMethod, apartments: Iterable[OwnedApartment]) -> Decimal:
    """Weight of one voter's vote under ``method``."""
    if method is VotingMethod.WEIGHTED_AREA:
        return owned_area(apartments)
    if method in (VotingMethod.SIMPLE_MAJORITY, VotingMethod.PER_SEAT, VotingMethod.CONSENSUS):
        return ONE
    raise ValueError(f"Unhandled voting method: {method}")


def summarize(weights: Mapping[VoteChoice, Decimal]) -> TallySummary:
    """Per-choice sums with missing choices as zero."""
    return TallySummary(
        yes_weight=weights.get(VoteChoice.YES, ZERO),
        no_weight=weights.get(VoteChoice.NO, ZERO),
        abstain_weight=weights.get(VoteChoice.ABSTAIN, ZERO),
    )


def passes(method: VotingMethod, summary: TallySummary) -> bool:
    """Pass/fail rule.

    Majority methods need strictly more yes than no weight: a tie fails and
    abstentions count for neither side. Consensus passes unless some weight
    voted no, so a proposal with no votes at all passes.
    """
    if method in MAJORITY_METHODS:
        return summary.yes_weight > summary.no_weight
    if method is VotingMethod.CONSENSUS:
        return summary.no_weight == ZERO
    raise ValueError(f"Unhandled voting method: {method}")


def is_eligible(roles: Iterable[Role], eligible_roles: Iterable[Role]) -> bool:
    """A voter is eligible when any of their roles is an eligible role."""
    return not set(roles).isdisjoint(eligible_roles)
