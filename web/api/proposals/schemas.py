"""Proposal API request and response schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class CreateProposalRequest(BaseModel):
    """Create a new proposal (Admin/Manager only)."""

    title: str
    description: str
    building_id: int | None = None  # None means global
    start_time: datetime
    end_time: datetime
    voting_method: str = Field(examples=["SimpleMajority"])
    eligible_roles: list[str]


class CastVoteRequest(BaseModel):
    """Cast a vote on a proposal."""

    choice: str = Field(examples=["Yes"])


class ProposalItem(BaseModel):
    """A proposal."""

    id: int
    title: str
    description: str
    created_by: int
    building_id: int | None
    start_time: datetime
    end_time: datetime
    voting_method: str
    eligible_roles: list[str]
    status: str
    created_at: datetime


class ProposalsResponse(BaseModel):
    """Proposals visible to the caller."""

    items: list[ProposalItem]
    total: int


class ResultItem(BaseModel):
    """Stored tally result."""

    passed: bool
    yes_weight: Decimal
    no_weight: Decimal
    abstain_weight: Decimal
    total_weight: Decimal
    tallied_at: datetime
    method_applied_version: str


class ProposalDetailResponse(BaseModel):
    """A proposal with vote counts."""

    proposal: ProposalItem
    yes_count: int
    no_count: int
    abstain_count: int
    total_votes: int
    user_vote: str | None
    user_eligible: bool
    result: ResultItem | None


class CastVoteResponse(BaseModel):
    """Vote acceptance."""

    accepted: bool
    weight: Decimal
    choice: str


class TallyResponse(BaseModel):
    """Tally outcome."""

    proposal_id: int
    passed: bool
    yes_weight: Decimal
    no_weight: Decimal
    abstain_weight: Decimal
    total_weight: Decimal
