"""Dashboard service."""

from app.models.core import Caller
from app.models.voting import ProposalStatus
from app.repositories.core import RegistryRepository
from app.repositories.db import transaction
from app.repositories.voting import ProposalRepository, VoteRepository
from app.services.voting.formulas import is_eligible


class DashboardService:
    """Per-caller voting overview."""

    def __init__(
        self,
        registry_repo: RegistryRepository,
        proposal_repo: ProposalRepository,
        vote_repo: VoteRepository,
    ):
        self._registry = registry_repo
        self._proposals = proposal_repo
        self._votes = vote_repo

    def get_voting_overview(self, caller: Caller) -> dict:
        """Open proposals visible to the caller and how many still await their vote."""
        with transaction():
            accessible = self._registry.accessible_building_ids(caller)
            active = self._proposals.list_visible(accessible, status=ProposalStatus.OPEN)

            # Pending means eligible and not yet voted
            eligible_ids = [p.id for p in active if is_eligible(caller.roles, p.eligible_roles)]
            voted = self._votes.voted_proposal_ids(caller.user_id, eligible_ids)

        return {
            "user_id": caller.user_id,
            "active_proposals_count": len(active),
            "pending_votes_count": len(eligible_ids) - len(voted),
        }
