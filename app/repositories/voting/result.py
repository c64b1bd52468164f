"""Proposal result repository - at most one result per proposal."""

from loguru import logger

from app.models.voting import ProposalResult
from app.repositories.base import BaseRepository


class ResultRepository(BaseRepository):
    """Repository for tally results."""

    def upsert(self, result: ProposalResult) -> None:
        """Write the result, overwriting any earlier tally of the same proposal."""
        self.execute(
            """
            INSERT INTO proposal_result (
                proposal_id, passed, yes_weight, no_weight, abstain_weight,
                total_weight, tallied_at, method_applied_version
            )
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT (proposal_id) DO UPDATE SET
                passed = EXCLUDED.passed,
                yes_weight = EXCLUDED.yes_weight,
                no_weight = EXCLUDED.no_weight,
                abstain_weight = EXCLUDED.abstain_weight,
                total_weight = EXCLUDED.total_weight,
                tallied_at = EXCLUDED.tallied_at,
                method_applied_version = EXCLUDED.method_applied_version
            """,
            [
                result.proposal_id,
                result.passed,
                result.yes_weight,
                result.no_weight,
                result.abstain_weight,
                result.total_weight,
                result.tallied_at,
                result.method_applied_version,
            ],
        )
        logger.debug("Result upserted: proposal={}, passed={}", result.proposal_id, result.passed)

    def get(self, proposal_id: int) -> ProposalResult | None:
        row = self.fetchone(
            """
            SELECT proposal_id, passed, yes_weight, no_weight, abstain_weight,
                   total_weight, tallied_at, method_applied_version
            FROM proposal_result WHERE proposal_id = ?
            """,
            [proposal_id],
        )
        if not row:
            return None
        return ProposalResult(
            proposal_id=row[0],
            passed=row[1],
            yes_weight=row[2],
            no_weight=row[3],
            abstain_weight=row[4],
            total_weight=row[5],
            tallied_at=row[6],
            method_applied_version=row[7],
        )

    def count(self, proposal_id: int) -> int:
        row = self.fetchone("SELECT COUNT(*) FROM proposal_result WHERE proposal_id = ?", [proposal_id])
        return int(row[0])
