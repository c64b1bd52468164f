"""Registry repository - roles, building access and apartment ownership.

These tables belong to the surrounding platform; the voting engine only
reads them.
"""

from loguru import logger

from app.models.core import Caller, OwnedApartment, Role
from app.repositories.base import BaseRepository
from settings import UNRESTRICTED_ROLES


class RegistryRepository(BaseRepository):
    """Read access to the platform registry."""

    def get_roles(self, user_id: int) -> frozenset[Role]:
        """Roles held by a user; unknown stored names are skipped."""
        rows = self.fetchall("SELECT role FROM user_role WHERE user_id = ?", [user_id])
        roles = set()
        for (name,) in rows:
            try:
                roles.add(Role(name))
            except ValueError:
                logger.warning("Ignoring unknown role {!r} for user {}", name, user_id)
        return frozenset(roles)

    def get_caller(self, user_id: int) -> Caller:
        """Resolve a user id into a caller with its current roles."""
        return Caller(user_id=user_id, roles=self.get_roles(user_id))

    def accessible_building_ids(self, caller: Caller) -> set[int] | None:
        """Buildings the caller can see. ``None`` means no restriction."""
        if caller.has_any_role(UNRESTRICTED_ROLES):
            return None

        rows = self.fetchall(
            """
            SELECT a.building_id
            FROM apartment_owner ao
            JOIN apartment a ON a.id = ao.apartment_id
            WHERE ao.user_id = ? AND NOT a.is_deleted
            UNION
            SELECT a.building_id
            FROM apartment_renter ar
            JOIN apartment a ON a.id = ar.apartment_id
            WHERE ar.user_id = ? AND ar.is_active AND NOT a.is_deleted
            UNION
            SELECT building_id FROM building_manager WHERE user_id = ?
            """,
            [caller.user_id, caller.user_id, caller.user_id],
        )
        result = {r[0] for r in rows}
        logger.debug("accessible_building_ids({}): {} buildings", caller.user_id, len(result))
        return result

    def can_access_building(self, caller: Caller, building_id: int) -> bool:
        accessible = self.accessible_building_ids(caller)
        return accessible is None or building_id in accessible

    def building_exists(self, building_id: int) -> bool:
        row = self.fetchone("SELECT COUNT(*) FROM building WHERE id = ?", [building_id])
        return row[0] > 0

    def ownership_snapshot(self, user_id: int) -> list[OwnedApartment]:
        """Apartments the user owns right now, with their floor area."""
        rows = self.fetchall(
            """
            SELECT a.id, a.building_id, a.size_sq_m
            FROM apartment_owner ao
            JOIN apartment a ON a.id = ao.apartment_id
            WHERE ao.user_id = ? AND NOT a.is_deleted
            ORDER BY a.id
            """,
            [user_id],
        )
        return [OwnedApartment(apartment_id=r[0], building_id=r[1], size_sq_m=r[2]) for r in rows]
