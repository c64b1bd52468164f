"""Core domain models - users, buildings, apartments."""

from app.models.core.apartment import (
    APARTMENT_DDL,
    APARTMENT_INDEXES,
    APARTMENT_OWNER_DDL,
    APARTMENT_RENTER_DDL,
)
from app.models.core.building import BUILDING_DDL, BUILDING_MANAGER_DDL
from app.models.core.entities import Caller, OwnedApartment, Role
from app.models.core.user import USER_ROLE_DDL

__all__ = [
    "USER_ROLE_DDL",
    "BUILDING_DDL",
    "BUILDING_MANAGER_DDL",
    "APARTMENT_DDL",
    "APARTMENT_OWNER_DDL",
    "APARTMENT_RENTER_DDL",
    "APARTMENT_INDEXES",
    "Caller",
    "OwnedApartment",
    "Role",
]
