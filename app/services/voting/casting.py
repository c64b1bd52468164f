"""Vote casting - eligibility, weight and the idempotent upsert."""

from collections.abc import Callable
from datetime import datetime

from loguru import logger

from app.errors import ForbiddenError, InvalidStateError, NotFoundError
from app.models.common import utcnow
from app.models.core import Caller
from app.models.voting import CastReceipt, ProposalStatus, VoteChoice
from app.repositories.core import RegistryRepository
from app.repositories.voting import ProposalRepository, VoteRepository
from app.services.voting.formulas import is_eligible, vote_weight


class VoteCasting:
    """Casts and recasts votes while a proposal is Open."""

    def __init__(
        self,
        proposal_repo: ProposalRepository,
        vote_repo: VoteRepository,
        registry_repo: RegistryRepository,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._proposals = proposal_repo
        self._votes = vote_repo
        self._registry = registry_repo
        self._clock = clock
        logger.debug("VoteCasting initialized")

    def cast(self, proposal_id: int, voter: Caller, choice: str | VoteChoice) -> CastReceipt:
        """Record the voter's choice; a later cast replaces an earlier one.

        Checks run in a fixed order and the first failure wins: existence,
        Open status, choice, eligibility. The weight is recomputed from the
        voter's current ownership on every cast.
        """
        proposal = self._proposals.get(proposal_id)
        if proposal is None:
            raise NotFoundError(f"Proposal {proposal_id} not found")

        if proposal.status is not ProposalStatus.OPEN:
            raise InvalidStateError(f"Proposal {proposal_id} is not open for voting ({proposal.status.value})")

        choice = VoteChoice.parse(choice)

        if not is_eligible(voter.roles, proposal.eligible_roles):
            logger.warning("User {} not eligible for proposal {}", voter.user_id, proposal_id)
            raise ForbiddenError("Not eligible to vote on this proposal")

        weight = vote_weight(proposal.voting_method, self._registry.ownership_snapshot(voter.user_id))
        self._votes.upsert(proposal_id, voter.user_id, choice, weight, self._clock())

        logger.info("Vote cast: proposal={}, voter={}, choice={}, weight={}", proposal_id, voter.user_id, choice.value, weight)
        return CastReceipt(accepted=True, weight=weight, choice=choice)
