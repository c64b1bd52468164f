"""Data validation functions."""

import duckdb


def validate_voting(conn: duckdb.DuckDBPyConnection) -> dict:
    """Validate voting data integrity."""
    issues = []
    stats = {}

    stats["proposals"] = conn.execute("SELECT COUNT(*) FROM proposal").fetchone()[0]
    stats["votes"] = conn.execute("SELECT COUNT(*) FROM vote").fetchone()[0]
    stats["results"] = conn.execute("SELECT COUNT(*) FROM proposal_result").fetchone()[0]

    by_status = conn.execute("SELECT status, COUNT(*) FROM proposal GROUP BY status ORDER BY status").fetchall()
    stats["by_status"] = {r[0]: r[1] for r in by_status}

    duplicate_votes = conn.execute(
        """
        SELECT COUNT(*) FROM (
            SELECT proposal_id, voter_id FROM vote
            GROUP BY proposal_id, voter_id HAVING COUNT(*) > 1
        )
        """
    ).fetchone()[0]
    if duplicate_votes > 0:
        issues.append(f"{duplicate_votes} voters have more than one vote on a proposal")

    negative = conn.execute("SELECT COUNT(*) FROM vote WHERE weight < 0").fetchone()[0]
    if negative > 0:
        issues.append(f"{negative} votes have negative weight")

    orphan_votes = conn.execute(
        """
        SELECT COUNT(*) FROM vote v
        LEFT JOIN proposal p ON p.id = v.proposal_id
        WHERE p.id IS NULL
        """
    ).fetchone()[0]
    if orphan_votes > 0:
        issues.append(f"{orphan_votes} votes reference a missing proposal")

    tallied_without_result = conn.execute(
        """
        SELECT COUNT(*) FROM proposal p
        LEFT JOIN proposal_result r ON r.proposal_id = p.id
        WHERE p.status = 'Tallied' AND r.proposal_id IS NULL
        """
    ).fetchone()[0]
    if tallied_without_result > 0:
        issues.append(f"{tallied_without_result} tallied proposals have no result")

    result_not_tallied = conn.execute(
        """
        SELECT COUNT(*) FROM proposal_result r
        JOIN proposal p ON p.id = r.proposal_id
        WHERE p.status <> 'Tallied'
        """
    ).fetchone()[0]
    if result_not_tallied > 0:
        issues.append(f"{result_not_tallied} results belong to proposals that are not Tallied")

    bad_totals = conn.execute(
        """
        SELECT COUNT(*) FROM proposal_result
        WHERE total_weight <> yes_weight + no_weight + abstain_weight
        """
    ).fetchone()[0]
    if bad_totals > 0:
        issues.append(f"{bad_totals} results have a total that is not the sum of its parts")

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
