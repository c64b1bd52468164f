"""Apartment, owner and renter models."""

APARTMENT_DDL = """
CREATE TABLE IF NOT EXISTS apartment (
    id BIGINT PRIMARY KEY,
    building_id BIGINT NOT NULL,
    number VARCHAR NOT NULL,
    size_sq_m DECIMAL(18, 6),
    is_deleted BOOLEAN NOT NULL DEFAULT FALSE
)
"""

APARTMENT_OWNER_DDL = """
CREATE TABLE IF NOT EXISTS apartment_owner (
    apartment_id BIGINT NOT NULL,
    user_id BIGINT NOT NULL,
    PRIMARY KEY (apartment_id, user_id)
)
"""

APARTMENT_RENTER_DDL = """
CREATE TABLE IF NOT EXISTS apartment_renter (
    apartment_id BIGINT NOT NULL,
    user_id BIGINT NOT NULL,
    is_active BOOLEAN NOT NULL DEFAULT TRUE,
    PRIMARY KEY (apartment_id, user_id)
)
"""

APARTMENT_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_apartment_building ON apartment(building_id)",
    "CREATE INDEX IF NOT EXISTS idx_apartment_owner_user ON apartment_owner(user_id)",
    "CREATE INDEX IF NOT EXISTS idx_apartment_renter_user ON apartment_renter(user_id)",
]
