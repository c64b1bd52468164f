"""Voting services - lifecycle, casting, tallying."""

from app.services.voting.casting import VoteCasting
from app.services.voting.lifecycle import ProposalLifecycle
from app.services.voting.tally import TallyEngine

__all__ = [
    "ProposalLifecycle",
    "TallyEngine",
    "VoteCasting",
]
