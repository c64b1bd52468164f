"""Proposal result (tally outcome) model."""

PROPOSAL_RESULT_DDL = """
CREATE TABLE IF NOT EXISTS proposal_result (
    proposal_id BIGINT PRIMARY KEY,
    passed BOOLEAN NOT NULL,
    yes_weight DECIMAL(18, 6) NOT NULL,
    no_weight DECIMAL(18, 6) NOT NULL,
    abstain_weight DECIMAL(18, 6) NOT NULL,
    total_weight DECIMAL(18, 6) NOT NULL,
    tallied_at TIMESTAMP NOT NULL,
    method_applied_version VARCHAR NOT NULL
)
"""
