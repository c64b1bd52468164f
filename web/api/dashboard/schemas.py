"""Dashboard API response schemas."""

from pydantic import BaseModel


class VotingOverviewResponse(BaseModel):
    """Voting overview for the caller."""

    user_id: int
    active_proposals_count: int
    pending_votes_count: int
