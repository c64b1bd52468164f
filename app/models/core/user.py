"""User role membership model."""

USER_ROLE_DDL = """
CREATE TABLE IF NOT EXISTS user_role (
    user_id BIGINT NOT NULL,
    role VARCHAR NOT NULL,
    PRIMARY KEY (user_id, role)
)
"""
