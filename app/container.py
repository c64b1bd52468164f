"""Dependency Injection container - initialized at app startup."""

from app.repositories.core import RegistryRepository
from app.repositories.voting import ProposalRepository, ResultRepository, VoteRepository
from app.services.dashboard.service import DashboardService
from app.services.voting.casting import VoteCasting
from app.services.voting.lifecycle import ProposalLifecycle
from app.services.voting.tally import TallyEngine


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons, connection looked up per thread)
        self.registry = RegistryRepository()
        self._proposal_repo = ProposalRepository()
        self._vote_repo = VoteRepository()
        self._result_repo = ResultRepository()

        # Services (with injected repos)
        self.proposals = ProposalLifecycle(
            proposal_repo=self._proposal_repo,
            vote_repo=self._vote_repo,
            result_repo=self._result_repo,
            registry_repo=self.registry,
        )

        self.casting = VoteCasting(
            proposal_repo=self._proposal_repo,
            vote_repo=self._vote_repo,
            registry_repo=self.registry,
        )

        self.tally = TallyEngine(
            proposal_repo=self._proposal_repo,
            vote_repo=self._vote_repo,
            result_repo=self._result_repo,
        )

        self.dashboard = DashboardService(
            registry_repo=self.registry,
            proposal_repo=self._proposal_repo,
            vote_repo=self._vote_repo,
        )

        self._initialized = True


# Global container instance
container = Container()
