"""Proposal model."""

PROPOSAL_SEQUENCE_DDL = "CREATE SEQUENCE IF NOT EXISTS proposal_id_seq START 1"

PROPOSAL_DDL = """
CREATE TABLE IF NOT EXISTS proposal (
    id BIGINT PRIMARY KEY DEFAULT nextval('proposal_id_seq'),
    title VARCHAR NOT NULL,
    description VARCHAR NOT NULL,
    created_by BIGINT NOT NULL,
    building_id BIGINT,
    start_time TIMESTAMP NOT NULL,
    end_time TIMESTAMP NOT NULL,
    voting_method VARCHAR NOT NULL,
    eligible_roles VARCHAR NOT NULL,
    status VARCHAR NOT NULL,
    created_at TIMESTAMP NOT NULL,
    CHECK (start_time < end_time),
    CHECK (eligible_roles <> '')
)
"""

# No index on status: it is the only column updated in place.
PROPOSAL_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_proposal_building ON proposal(building_id)",
]
