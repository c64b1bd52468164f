"""Voting domain entities - proposals, votes and tally results."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from app.errors import InvalidInputError
from app.models.common import BaseEntity
from app.models.core.entities import Role


class VotingMethod(str, Enum):
    """Rule-set governing weighting and the pass/fail decision."""

    SIMPLE_MAJORITY = "SimpleMajority"
    WEIGHTED_AREA = "WeightedArea"
    PER_SEAT = "PerSeat"
    CONSENSUS = "Consensus"

    @classmethod
    def parse(cls, value: "str | VotingMethod") -> "VotingMethod":
        try:
            return cls(value)
        except ValueError:
            raise InvalidInputError(f"Invalid voting method: {value!r}") from None


class VoteChoice(str, Enum):
    YES = "Yes"
    NO = "No"
    ABSTAIN = "Abstain"

    @classmethod
    def parse(cls, value: "str | VoteChoice") -> "VoteChoice":
        try:
            return cls(value)
        except ValueError:
            raise InvalidInputError(f"Invalid choice: {value!r}. Must be Yes, No or Abstain") from None


class ProposalStatus(str, Enum):
    SCHEDULED = "Scheduled"
    OPEN = "Open"
    CLOSED = "Closed"
    TALLIED = "Tallied"

    @classmethod
    def at(cls, start_time: datetime, end_time: datetime, now: datetime) -> "ProposalStatus":
        """Status of the half-open window [start_time, end_time) at ``now``."""
        if start_time > now:
            return cls.SCHEDULED
        if end_time <= now:
            return cls.CLOSED
        return cls.OPEN


def encode_roles(roles: frozenset[Role]) -> str:
    """Roles to the stored CSV form, in declaration order."""
    return ",".join(r.value for r in Role if r in roles)


def decode_roles(value: str) -> frozenset[Role]:
    return Role.from_names(value.split(","))


@dataclass(frozen=True)
class Proposal(BaseEntity):
    """A single question put to a defined electorate."""

    id: int
    title: str
    description: str
    created_by: int
    building_id: int | None
    start_time: datetime
    end_time: datetime
    voting_method: VotingMethod
    eligible_roles: frozenset[Role]
    status: ProposalStatus
    created_at: datetime


@dataclass(frozen=True)
class Vote(BaseEntity):
    """One voter's weighted choice on one proposal."""

    proposal_id: int
    voter_id: int
    choice: VoteChoice
    weight: Decimal
    cast_at: datetime


@dataclass(frozen=True)
class CastReceipt(BaseEntity):
    """What the voter gets back after casting."""

    accepted: bool
    weight: Decimal
    choice: VoteChoice


@dataclass(frozen=True)
class TallySummary(BaseEntity):
    """Per-choice weight sums."""

    yes_weight: Decimal
    no_weight: Decimal
    abstain_weight: Decimal

    @property
    def total_weight(self) -> Decimal:
        return self.yes_weight + self.no_weight + self.abstain_weight


@dataclass(frozen=True)
class ProposalResult(BaseEntity):
    """Persisted outcome of tallying a proposal."""

    proposal_id: int
    passed: bool
    yes_weight: Decimal
    no_weight: Decimal
    abstain_weight: Decimal
    total_weight: Decimal
    tallied_at: datetime
    method_applied_version: str


@dataclass(frozen=True)
class VoteCounts(BaseEntity):
    """Number of votes per choice (not weights)."""

    yes: int = 0
    no: int = 0
    abstain: int = 0

    @property
    def total(self) -> int:
        return self.yes + self.no + self.abstain


@dataclass(frozen=True)
class ProposalDetail(BaseEntity):
    """A proposal as seen by one caller."""

    proposal: Proposal
    counts: VoteCounts
    user_vote: VoteChoice | None
    user_eligible: bool
    result: ProposalResult | None
