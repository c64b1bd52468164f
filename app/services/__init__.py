"""Services package - service class exports."""

from app.services.dashboard.service import DashboardService
from app.services.voting.casting import VoteCasting
from app.services.voting.lifecycle import ProposalLifecycle
from app.services.voting.tally import TallyEngine

__all__ = [
    "DashboardService",
    "ProposalLifecycle",
    "TallyEngine",
    "VoteCasting",
]
