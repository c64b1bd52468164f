"""Proposal API views - thin layer over services."""

from app.container import container
from app.models.voting import Proposal, ProposalResult
from web.api.errors import validate_id

from .schemas import (
    CastVoteRequest,
    CastVoteResponse,
    CreateProposalRequest,
    ProposalDetailResponse,
    ProposalItem,
    ProposalsResponse,
    ResultItem,
    TallyResponse,
)


def _proposal_item(p: Proposal) -> ProposalItem:
    return ProposalItem(**p.to_dict())


def _result_item(r: ProposalResult) -> ResultItem:
    return ResultItem(
        passed=r.passed,
        yes_weight=r.yes_weight,
        no_weight=r.no_weight,
        abstain_weight=r.abstain_weight,
        total_weight=r.total_weight,
        tallied_at=r.tallied_at,
        method_applied_version=r.method_applied_version,
    )


def create_proposal(user_id: int, payload: CreateProposalRequest) -> ProposalItem:
    """Create a proposal."""
    if payload.building_id is not None:
        validate_id(payload.building_id, "building_id")
    caller = container.registry.get_caller(user_id)
    proposal = container.proposals.create(
        caller,
        title=payload.title,
        description=payload.description,
        building_id=payload.building_id,
        start_time=payload.start_time,
        end_time=payload.end_time,
        voting_method=payload.voting_method,
        eligible_roles=payload.eligible_roles,
    )
    return _proposal_item(proposal)


def list_proposals(user_id: int, building_id: int | None = None) -> ProposalsResponse:
    """List proposals visible to the caller."""
    if building_id is not None:
        validate_id(building_id, "building_id")
    caller = container.registry.get_caller(user_id)
    items = [_proposal_item(p) for p in container.proposals.list_visible(caller, building_id)]
    return ProposalsResponse(items=items, total=len(items))


def get_proposal(user_id: int, proposal_id: int) -> ProposalDetailResponse:
    """Get a proposal with vote counts, the caller's vote and the result."""
    validate_id(proposal_id, "proposal_id")
    caller = container.registry.get_caller(user_id)
    detail = container.proposals.detail(proposal_id, caller)

    return ProposalDetailResponse(
        proposal=_proposal_item(detail.proposal),
        yes_count=detail.counts.yes,
        no_count=detail.counts.no,
        abstain_count=detail.counts.abstain,
        total_votes=detail.counts.total,
        user_vote=detail.user_vote.value if detail.user_vote else None,
        user_eligible=detail.user_eligible,
        result=_result_item(detail.result) if detail.result else None,
    )


def cast_vote(user_id: int, proposal_id: int, payload: CastVoteRequest) -> CastVoteResponse:
    """Cast or change the caller's vote."""
    validate_id(proposal_id, "proposal_id")
    caller = container.registry.get_caller(user_id)
    receipt = container.casting.cast(proposal_id, caller, payload.choice)
    return CastVoteResponse(accepted=receipt.accepted, weight=receipt.weight, choice=receipt.choice.value)


def tally_proposal(user_id: int, proposal_id: int) -> TallyResponse:
    """Tally a proposal (Admin/Manager only)."""
    validate_id(proposal_id, "proposal_id")
    caller = container.registry.get_caller(user_id)
    result = container.tally.tally(proposal_id, caller)

    return TallyResponse(
        proposal_id=result.proposal_id,
        passed=result.passed,
        yes_weight=result.yes_weight,
        no_weight=result.no_weight,
        abstain_weight=result.abstain_weight,
        total_weight=result.total_weight,
    )
