"""Models package - DDL and entities for all domains."""

from app.models.common import BaseEntity
from app.models.core import (
    APARTMENT_DDL,
    APARTMENT_INDEXES,
    APARTMENT_OWNER_DDL,
    APARTMENT_RENTER_DDL,
    BUILDING_DDL,
    BUILDING_MANAGER_DDL,
    USER_ROLE_DDL,
    Caller,
    OwnedApartment,
    Role,
)
from app.models.voting import (
    PROPOSAL_DDL,
    PROPOSAL_INDEXES,
    PROPOSAL_RESULT_DDL,
    PROPOSAL_SEQUENCE_DDL,
    VOTE_DDL,
    Proposal,
    ProposalResult,
    ProposalStatus,
    Vote,
    VoteChoice,
    VotingMethod,
)

ALL_DDL = [
    # Core (registry, owned by the surrounding platform)
    USER_ROLE_DDL,
    BUILDING_DDL,
    BUILDING_MANAGER_DDL,
    APARTMENT_DDL,
    APARTMENT_OWNER_DDL,
    APARTMENT_RENTER_DDL,
    # Voting
    PROPOSAL_SEQUENCE_DDL,
    PROPOSAL_DDL,
    VOTE_DDL,
    PROPOSAL_RESULT_DDL,
]

ALL_INDEXES = APARTMENT_INDEXES + PROPOSAL_INDEXES

__all__ = [
    # Common
    "BaseEntity",
    # Core
    "USER_ROLE_DDL",
    "BUILDING_DDL",
    "BUILDING_MANAGER_DDL",
    "APARTMENT_DDL",
    "APARTMENT_OWNER_DDL",
    "APARTMENT_RENTER_DDL",
    "Caller",
    "OwnedApartment",
    "Role",
    # Voting
    "PROPOSAL_SEQUENCE_DDL",
    "PROPOSAL_DDL",
    "VOTE_DDL",
    "PROPOSAL_RESULT_DDL",
    "Proposal",
    "ProposalResult",
    "ProposalStatus",
    "Vote",
    "VoteChoice",
    "VotingMethod",
    # All DDL
    "ALL_DDL",
    "ALL_INDEXES",
]
