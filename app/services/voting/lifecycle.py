"""Proposal lifecycle - creation and read access.

Status is computed once, at creation, from the voting window. Nothing moves a
proposal from Scheduled to Open to Closed as time passes; only tallying
changes it afterwards (see TallyEngine).
"""

from collections.abc import Callable, Iterable
from datetime import datetime

from loguru import logger

from app.errors import ForbiddenError, InvalidInputError, NotFoundError
from app.models.common import to_naive_utc, utcnow
from app.models.core import Caller, Role
from app.models.voting import Proposal, ProposalDetail, ProposalStatus, VotingMethod
from app.repositories.core import RegistryRepository
from app.repositories.db import transaction
from app.repositories.voting import ProposalRepository, ResultRepository, VoteRepository
from app.services.voting.formulas import is_eligible
from settings import PROPOSAL_CREATOR_ROLES


def parse_eligible_roles(names: Iterable[str | Role]) -> frozenset[Role]:
    try:
        roles = Role.from_names(names)
    except ValueError as e:
        raise InvalidInputError(f"Invalid eligible role: {e}") from None
    if not roles:
        raise InvalidInputError("eligible_roles must not be empty")
    return roles


class ProposalLifecycle:
    """Creates proposals and serves them to callers."""

    def __init__(
        self,
        proposal_repo: ProposalRepository,
        vote_repo: VoteRepository,
        result_repo: ResultRepository,
        registry_repo: RegistryRepository,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._proposals = proposal_repo
        self._votes = vote_repo
        self._results = result_repo
        self._registry = registry_repo
        self._clock = clock
        logger.debug("ProposalLifecycle initialized")

    def create(
        self,
        caller: Caller,
        *,
        title: str,
        description: str,
        start_time: datetime,
        end_time: datetime,
        voting_method: str | VotingMethod,
        eligible_roles: Iterable[str | Role],
        building_id: int | None = None,
    ) -> Proposal:
        """Create a proposal; building-scoped when ``building_id`` is given."""
        if not caller.has_any_role(PROPOSAL_CREATOR_ROLES):
            logger.warning("User {} may not create proposals", caller.user_id)
            raise ForbiddenError("Only Admin or Manager can create proposals")

        title, description = (title or "").strip(), (description or "").strip()
        if not title:
            raise InvalidInputError("title must not be empty")
        if not description:
            raise InvalidInputError("description must not be empty")

        start_time, end_time = to_naive_utc(start_time), to_naive_utc(end_time)
        if start_time >= end_time:
            raise InvalidInputError("start_time must be before end_time")

        method = VotingMethod.parse(voting_method)
        roles = parse_eligible_roles(eligible_roles)

        if building_id is not None:
            if not self._registry.building_exists(building_id):
                raise InvalidInputError(f"Unknown building: {building_id}")
            if not self._registry.can_access_building(caller, building_id):
                logger.warning("User {} has no access to building {}", caller.user_id, building_id)
                raise ForbiddenError(f"No access to building {building_id}")

        now = self._clock()
        proposal = self._proposals.insert(
            title=title,
            description=description,
            created_by=caller.user_id,
            building_id=building_id,
            start_time=start_time,
            end_time=end_time,
            voting_method=method,
            eligible_roles=roles,
            status=ProposalStatus.at(start_time, end_time, now),
            created_at=now,
        )
        logger.info(
            "Proposal {} created by {}: method={}, status={}",
            proposal.id,
            caller.user_id,
            method.value,
            proposal.status.value,
        )
        return proposal

    def get(self, proposal_id: int) -> Proposal:
        proposal = self._proposals.get(proposal_id)
        if proposal is None:
            raise NotFoundError(f"Proposal {proposal_id} not found")
        return proposal

    def list_visible(self, caller: Caller, building_id: int | None = None) -> list[Proposal]:
        """Global proposals plus those scoped to buildings the caller can access."""
        accessible = self._registry.accessible_building_ids(caller)
        return self._proposals.list_visible(accessible, building_filter=building_id)

    def detail(self, proposal_id: int, caller: Caller) -> ProposalDetail:
        """Proposal with vote counts, the caller's own vote and eligibility, and the result.

        All reads share one snapshot, so a concurrent tally shows up either
        completely (Tallied with its result) or not at all.
        """
        with transaction():
            proposal = self.get(proposal_id)
            own = self._votes.get(proposal_id, caller.user_id)
            counts = self._votes.counts_by_choice(proposal_id)
            result = self._results.get(proposal_id)

        return ProposalDetail(
            proposal=proposal,
            counts=counts,
            user_vote=own.choice if own else None,
            user_eligible=is_eligible(caller.roles, proposal.eligible_roles),
            result=result,
        )
