"""Vote (one voter's choice on one proposal) model."""

# The composite primary key is what makes casting an atomic upsert.
VOTE_DDL = """
CREATE TABLE IF NOT EXISTS vote (
    proposal_id BIGINT NOT NULL,
    voter_id BIGINT NOT NULL,
    choice VARCHAR NOT NULL,
    weight DECIMAL(18, 6) NOT NULL,
    cast_at TIMESTAMP NOT NULL,
    PRIMARY KEY (proposal_id, voter_id),
    CHECK (weight >= 0)
)
"""
