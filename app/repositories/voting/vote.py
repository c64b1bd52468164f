"""Vote repository - one row per (proposal, voter)."""

from datetime import datetime
from decimal import Decimal

from loguru import logger

from app.models.voting import Vote, VoteChoice, VoteCounts
from app.repositories.base import BaseRepository


class VoteRepository(BaseRepository):
    """Repository for vote data access."""

    def upsert(
        self,
        proposal_id: int,
        voter_id: int,
        choice: VoteChoice,
        weight: Decimal,
        cast_at: datetime,
    ) -> None:
        """Insert the voter's vote or overwrite the existing one.

        A single conditional write against the (proposal_id, voter_id) key;
        two concurrent casts by the same voter can never leave two rows.
        """
        self.execute(
            """
            INSERT INTO vote (proposal_id, voter_id, choice, weight, cast_at)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT (proposal_id, voter_id) DO UPDATE SET
                choice = EXCLUDED.choice,
                weight = EXCLUDED.weight,
                cast_at = EXCLUDED.cast_at
            """,
            [proposal_id, voter_id, choice.value, weight, cast_at],
        )
        logger.debug("Vote upserted: proposal={}, voter={}, choice={}", proposal_id, voter_id, choice.value)

    def get(self, proposal_id: int, voter_id: int) -> Vote | None:
        row = self.fetchone(
            """
            SELECT proposal_id, voter_id, choice, weight, cast_at
            FROM vote WHERE proposal_id = ? AND voter_id = ?
            """,
            [proposal_id, voter_id],
        )
        if not row:
            return None
        return Vote(
            proposal_id=row[0],
            voter_id=row[1],
            choice=VoteChoice(row[2]),
            weight=row[3],
            cast_at=row[4],
        )

    def count(self, proposal_id: int, voter_id: int | None = None) -> int:
        if voter_id is None:
            row = self.fetchone("SELECT COUNT(*) FROM vote WHERE proposal_id = ?", [proposal_id])
        else:
            row = self.fetchone(
                "SELECT COUNT(*) FROM vote WHERE proposal_id = ? AND voter_id = ?",
                [proposal_id, voter_id],
            )
        return int(row[0])

    def counts_by_choice(self, proposal_id: int) -> VoteCounts:
        """Number of votes per choice."""
        rows = self.fetchall(
            "SELECT choice, COUNT(*) FROM vote WHERE proposal_id = ? GROUP BY choice",
            [proposal_id],
        )
        counts = {VoteChoice(r[0]): int(r[1]) for r in rows}
        return VoteCounts(
            yes=counts.get(VoteChoice.YES, 0),
            no=counts.get(VoteChoice.NO, 0),
            abstain=counts.get(VoteChoice.ABSTAIN, 0),
        )

    def weights_by_choice(self, proposal_id: int) -> dict[VoteChoice, Decimal]:
        """Exact weight sum per choice; choices without votes are absent."""
        rows = self.fetchall(
            "SELECT choice, SUM(weight) FROM vote WHERE proposal_id = ? GROUP BY choice",
            [proposal_id],
        )
        return {VoteChoice(r[0]): Decimal(r[1]) for r in rows}

    def voted_proposal_ids(self, voter_id: int, proposal_ids: list[int]) -> set[int]:
        """Which of ``proposal_ids`` the voter has already voted on."""
        if not proposal_ids:
            return set()
        placeholders = ", ".join("?" for _ in proposal_ids)
        rows = self.fetchall(
            f"SELECT proposal_id FROM vote WHERE voter_id = ? AND proposal_id IN ({placeholders})",
            [voter_id, *proposal_ids],
        )
        return {r[0] for r in rows}
