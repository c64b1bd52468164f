"""Registry ETL - bulk load users, buildings and apartments.

Input is the JSON export of the platform registry:

    {
      "users": [{"id": 1, "roles": ["Admin"]}],
      "buildings": [{"id": 1, "address": "Main St 1", "construction_year": 1998}],
      "apartments": [{"id": 10, "building_id": 1, "number": "1A", "size_sq_m": "40.5"}],
      "owners": [{"apartment_id": 10, "user_id": 1}],
      "renters": [{"apartment_id": 10, "user_id": 2, "is_active": true}],
      "managers": [{"building_id": 1, "user_id": 3}]
    }

Every load replaces the registry tables as a whole.
"""

import json
from decimal import Decimal
from pathlib import Path

import duckdb
import polars as pl
from loguru import logger

# table -> (frame schema, insert statement reading from the registered frame)
_TABLES = {
    "user_role": (
        {"user_id": pl.Int64, "role": pl.Utf8},
        "INSERT INTO user_role (user_id, role) SELECT user_id, role FROM {df}",
    ),
    "building": (
        {"id": pl.Int64, "address": pl.Utf8, "construction_year": pl.Int32},
        "INSERT INTO building (id, address, construction_year) SELECT id, address, construction_year FROM {df}",
    ),
    "apartment": (
        {"id": pl.Int64, "building_id": pl.Int64, "number": pl.Utf8, "size_sq_m": pl.Utf8, "is_deleted": pl.Boolean},
        """
        INSERT INTO apartment (id, building_id, number, size_sq_m, is_deleted)
        SELECT id, building_id, number, CAST(size_sq_m AS DECIMAL(18, 6)), is_deleted FROM {df}
        """,
    ),
    "apartment_owner": (
        {"apartment_id": pl.Int64, "user_id": pl.Int64},
        "INSERT INTO apartment_owner (apartment_id, user_id) SELECT apartment_id, user_id FROM {df}",
    ),
    "apartment_renter": (
        {"apartment_id": pl.Int64, "user_id": pl.Int64, "is_active": pl.Boolean},
        "INSERT INTO apartment_renter (apartment_id, user_id, is_active) SELECT apartment_id, user_id, is_active FROM {df}",
    ),
    "building_manager": (
        {"building_id": pl.Int64, "user_id": pl.Int64},
        "INSERT INTO building_manager (building_id, user_id) SELECT building_id, user_id FROM {df}",
    ),
}


def _area(value) -> str | None:
    """Areas travel as decimal strings so no float ever touches them."""
    if value is None or value == "":
        return None
    return str(Decimal(str(value)))


def registry_frames(data: dict) -> dict[str, pl.DataFrame]:
    """Normalize a registry export into one frame per table."""
    rows = {
        "user_role": [
            {"user_id": u["id"], "role": role}
            for u in data.get("users", [])
            for role in u.get("roles", [])
        ],
        "building": [
            {"id": b["id"], "address": b.get("address", ""), "construction_year": b.get("construction_year")}
            for b in data.get("buildings", [])
        ],
        "apartment": [
            {
                "id": a["id"],
                "building_id": a["building_id"],
                "number": str(a.get("number", "")),
                "size_sq_m": _area(a.get("size_sq_m")),
                "is_deleted": bool(a.get("is_deleted", False)),
            }
            for a in data.get("apartments", [])
        ],
        "apartment_owner": [
            {"apartment_id": o["apartment_id"], "user_id": o["user_id"]} for o in data.get("owners", [])
        ],
        "apartment_renter": [
            {"apartment_id": r["apartment_id"], "user_id": r["user_id"], "is_active": bool(r.get("is_active", True))}
            for r in data.get("renters", [])
        ],
        "building_manager": [
            {"building_id": m["building_id"], "user_id": m["user_id"]} for m in data.get("managers", [])
        ],
    }
    return {table: pl.DataFrame(rows[table], schema=schema) for table, (schema, _) in _TABLES.items()}


def load_registry(conn: duckdb.DuckDBPyConnection, data: dict) -> dict[str, int]:
    """Replace the registry tables with ``data`` in one transaction."""
    frames = registry_frames(data)

    conn.execute("BEGIN TRANSACTION")
    try:
        for table, (_, insert) in _TABLES.items():
            df_name = f"{table}_df"
            conn.execute(f"DELETE FROM {table}")
            conn.register(df_name, frames[table])
            conn.execute(insert.format(df=df_name))
            conn.unregister(df_name)
        conn.execute("COMMIT")
    except Exception:
        conn.execute("ROLLBACK")
        raise

    counts = {table: frames[table].height for table in _TABLES}
    logger.info("Registry loaded: {}", counts)
    return counts


def load_registry_file(conn: duckdb.DuckDBPyConnection, path: str | Path) -> dict[str, int]:
    """Load a registry JSON export from disk."""
    data = json.loads(Path(path).read_text(encoding="utf-8"), parse_float=Decimal)
    return load_registry(conn, data)
