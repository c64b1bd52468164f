"""Proposal repository - proposals and their status."""

from datetime import datetime

from loguru import logger

from app.models.core import Role
from app.models.voting import Proposal, ProposalStatus, VotingMethod, decode_roles, encode_roles
from app.repositories.base import BaseRepository

_COLUMNS = """
    id, title, description, created_by, building_id, start_time, end_time,
    voting_method, eligible_roles, status, created_at
"""


def _to_proposal(row: tuple) -> Proposal:
    return Proposal(
        id=row[0],
        title=row[1],
        description=row[2],
        created_by=row[3],
        building_id=row[4],
        start_time=row[5],
        end_time=row[6],
        voting_method=VotingMethod(row[7]),
        eligible_roles=decode_roles(row[8]),
        status=ProposalStatus(row[9]),
        created_at=row[10],
    )


class ProposalRepository(BaseRepository):
    """Repository for proposal data access."""

    def insert(
        self,
        *,
        title: str,
        description: str,
        created_by: int,
        building_id: int | None,
        start_time: datetime,
        end_time: datetime,
        voting_method: VotingMethod,
        eligible_roles: frozenset[Role],
        status: ProposalStatus,
        created_at: datetime,
    ) -> Proposal:
        """Insert a proposal and return it with its assigned id."""
        row = self.fetchone(
            f"""
            INSERT INTO proposal (
                title, description, created_by, building_id, start_time, end_time,
                voting_method, eligible_roles, status, created_at
            )
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            RETURNING {_COLUMNS}
            """,
            [
                title,
                description,
                created_by,
                building_id,
                start_time,
                end_time,
                voting_method.value,
                encode_roles(eligible_roles),
                status.value,
                created_at,
            ],
        )
        proposal = _to_proposal(row)
        logger.debug("Proposal {} inserted", proposal.id)
        return proposal

    def get(self, proposal_id: int) -> Proposal | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM proposal WHERE id = ?", [proposal_id])
        return _to_proposal(row) if row else None

    def list_visible(
        self,
        building_ids: set[int] | None,
        building_filter: int | None = None,
        status: ProposalStatus | None = None,
    ) -> list[Proposal]:
        """Proposals that are global or scoped to one of ``building_ids``, newest first.

        ``building_ids=None`` means every building is visible. ``building_filter``
        narrows scoped proposals to that one building; global ones stay listed.
        """
        where, params = [], []

        if building_ids is None and building_filter is None:
            pass
        elif building_ids is None:
            where.append("(building_id = ? OR building_id IS NULL)")
            params.append(building_filter)
        else:
            ids = building_ids if building_filter is None else building_ids & {building_filter}
            if ids:
                placeholders = ", ".join("?" for _ in ids)
                where.append(f"(building_id IN ({placeholders}) OR building_id IS NULL)")
                params.extend(sorted(ids))
            else:
                where.append("building_id IS NULL")

        if status is not None:
            where.append("status = ?")
            params.append(status.value)

        clause = f"WHERE {' AND '.join(where)}" if where else ""
        rows = self.fetchall(
            f"""
            SELECT {_COLUMNS} FROM proposal
            {clause}
            ORDER BY created_at DESC, id DESC
            """,
            params,
        )
        logger.debug("list_visible: {} proposals", len(rows))
        return [_to_proposal(r) for r in rows]

    def set_status(self, proposal_id: int, status: ProposalStatus) -> None:
        self.execute("UPDATE proposal SET status = ? WHERE id = ?", [status.value, proposal_id])
        logger.debug("Proposal {} status -> {}", proposal_id, status.value)
