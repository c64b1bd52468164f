"""Core domain entities - callers, roles and ownership."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from app.models.common import BaseEntity


class Role(str, Enum):
    """Platform roles a caller may hold."""

    ADMIN = "Admin"
    MANAGER = "Manager"
    HOMEOWNER = "Homeowner"
    RENTER = "Renter"
    HOA_MEMBER = "HOAMember"

    @classmethod
    def from_names(cls, names) -> frozenset["Role"]:
        """Parse role names; raises ValueError on an unknown name."""
        return frozenset(cls(n.strip()) for n in names if n and n.strip())


@dataclass(frozen=True)
class Caller(BaseEntity):
    """Authenticated caller as seen by the voting engine."""

    user_id: int
    roles: frozenset[Role] = field(default_factory=frozenset)

    def has_any_role(self, wanted) -> bool:
        """True if the caller holds one of ``wanted``; an empty ``wanted`` allows everyone."""
        wanted = {Role(w) for w in wanted}
        if not wanted:
            return True
        return bool(self.roles & wanted)


@dataclass(frozen=True)
class OwnedApartment(BaseEntity):
    """One row of an ownership snapshot."""

    apartment_id: int
    building_id: int
    size_sq_m: Decimal | None
