"""API errors and validation helpers."""

from app.errors import (
    ForbiddenError,
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
    PersistenceError,
    VotingError,
)

# HTTP status an integrating transport should answer with
STATUS_CODES = {
    NotFoundError: 404,
    InvalidInputError: 400,
    InvalidStateError: 409,
    ForbiddenError: 403,
    PersistenceError: 500,
}


def status_code(error: VotingError) -> int:
    """HTTP status for a voting error."""
    for cls in type(error).__mro__:
        if cls in STATUS_CODES:
            return STATUS_CODES[cls]
    return 500


def validate_id(value: int, name: str = "id") -> None:
    """Validate an identifier is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidInputError(f"Invalid {name}: {value!r}. Must be a positive integer")


__all__ = [
    "ForbiddenError",
    "InvalidInputError",
    "InvalidStateError",
    "NotFoundError",
    "PersistenceError",
    "VotingError",
    "STATUS_CODES",
    "status_code",
    "validate_id",
]
