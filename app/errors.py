"""Domain errors raised by voting services.

Every error carries a human readable ``message``. None of them is retried
internally; callers decide what to do.
"""


class VotingError(Exception):
    """Base class for voting engine errors."""

    default_message = "Voting error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(VotingError):
    """Referenced proposal does not exist."""

    default_message = "Resource not found"


class InvalidInputError(VotingError):
    """Malformed choice, voting method, role list or time window."""

    default_message = "Invalid input"


class InvalidStateError(VotingError):
    """Action not permitted in the proposal's current status."""

    default_message = "Invalid state"


class ForbiddenError(VotingError):
    """Caller lacks the role or building access required for the action."""

    default_message = "Forbidden"


class PersistenceError(VotingError):
    """Underlying store failed; the operation had no effect."""

    default_message = "Persistence failure"
