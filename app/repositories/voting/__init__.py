"""Voting repositories - proposals, votes, results."""

from app.repositories.voting.proposal import ProposalRepository
from app.repositories.voting.result import ResultRepository
from app.repositories.voting.vote import VoteRepository

__all__ = [
    "ProposalRepository",
    "ResultRepository",
    "VoteRepository",
]
