"""Tally engine - aggregate votes, decide, persist, finalize.

The tally is a point-in-time snapshot of the votes. A cast that commits
while a tally is running is either included or not, depending on which
commits first; no lock is taken against casting. Re-tallying picks up any
vote that landed afterwards.
"""

from collections.abc import Callable
from datetime import datetime

from loguru import logger

from app.errors import ForbiddenError, NotFoundError
from app.models.common import utcnow
from app.models.core import Caller
from app.models.voting import ProposalResult, ProposalStatus
from app.repositories.db import transaction
from app.repositories.voting import ProposalRepository, ResultRepository, VoteRepository
from app.services.voting.formulas import passes, summarize
from settings import TALLY_ROLES, TALLY_RULESET_VERSION


class TallyEngine:
    """Turns a proposal's votes into its stored result."""

    def __init__(
        self,
        proposal_repo: ProposalRepository,
        vote_repo: VoteRepository,
        result_repo: ResultRepository,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._proposals = proposal_repo
        self._votes = vote_repo
        self._results = result_repo
        self._clock = clock
        logger.debug("TallyEngine initialized")

    def tally(self, proposal_id: int, caller: Caller) -> ProposalResult:
        """Tally a proposal in any status; running it again overwrites the result.

        The result upsert and the move to Tallied commit together or not at all.
        """
        if not caller.has_any_role(TALLY_ROLES):
            logger.warning("User {} may not tally proposals", caller.user_id)
            raise ForbiddenError("Only Admin or Manager can tally results")

        with transaction():
            proposal = self._proposals.get(proposal_id)
            if proposal is None:
                raise NotFoundError(f"Proposal {proposal_id} not found")

            summary = summarize(self._votes.weights_by_choice(proposal_id))
            result = ProposalResult(
                proposal_id=proposal_id,
                passed=passes(proposal.voting_method, summary),
                yes_weight=summary.yes_weight,
                no_weight=summary.no_weight,
                abstain_weight=summary.abstain_weight,
                total_weight=summary.total_weight,
                tallied_at=self._clock(),
                method_applied_version=TALLY_RULESET_VERSION,
            )
            self._results.upsert(result)
            self._proposals.set_status(proposal_id, ProposalStatus.TALLIED)

        logger.info(
            "Proposal {} tallied by {}: passed={}, yes={}, no={}, abstain={}",
            proposal_id,
            caller.user_id,
            result.passed,
            result.yes_weight,
            result.no_weight,
            result.abstain_weight,
        )
        return result
