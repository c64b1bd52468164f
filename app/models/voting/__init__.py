"""Voting domain models - proposals, votes, results."""

from app.models.voting.entities import (
    CastReceipt,
    Proposal,
    ProposalDetail,
    ProposalResult,
    ProposalStatus,
    TallySummary,
    Vote,
    VoteChoice,
    VoteCounts,
    VotingMethod,
    decode_roles,
    encode_roles,
)
from app.models.voting.proposal import PROPOSAL_DDL, PROPOSAL_INDEXES, PROPOSAL_SEQUENCE_DDL
from app.models.voting.result import PROPOSAL_RESULT_DDL
from app.models.voting.vote import VOTE_DDL

__all__ = [
    "PROPOSAL_SEQUENCE_DDL",
    "PROPOSAL_DDL",
    "PROPOSAL_INDEXES",
    "VOTE_DDL",
    "PROPOSAL_RESULT_DDL",
    "CastReceipt",
    "Proposal",
    "ProposalDetail",
    "ProposalResult",
    "ProposalStatus",
    "TallySummary",
    "Vote",
    "VoteChoice",
    "VoteCounts",
    "VotingMethod",
    "decode_roles",
    "encode_roles",
]
