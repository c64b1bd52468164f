"""Building and building manager models."""

BUILDING_DDL = """
CREATE TABLE IF NOT EXISTS building (
    id BIGINT PRIMARY KEY,
    address VARCHAR NOT NULL,
    construction_year INTEGER
)
"""

BUILDING_MANAGER_DDL = """
CREATE TABLE IF NOT EXISTS building_manager (
    building_id BIGINT NOT NULL,
    user_id BIGINT NOT NULL,
    PRIMARY KEY (building_id, user_id)
)
"""
