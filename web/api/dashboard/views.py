"""Dashboard API views - thin layer over services."""

from app.container import container

from .schemas import VotingOverviewResponse


def get_voting_overview(user_id: int) -> VotingOverviewResponse:
    """Open proposals visible to the caller and pending votes."""
    caller = container.registry.get_caller(user_id)
    data = container.dashboard.get_voting_overview(caller)

    return VotingOverviewResponse(
        user_id=data["user_id"],
        active_proposals_count=data["active_proposals_count"],
        pending_votes_count=data["pending_votes_count"],
    )
