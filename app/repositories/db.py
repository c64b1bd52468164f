"""DuckDB connection management.

One database instance per process; every thread works through its own
cursor onto it, so each thread has an independent transaction context.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import duckdb
from loguru import logger

from app.errors import PersistenceError
from app.models import ALL_DDL, ALL_INDEXES
from settings import DB_PATH

_local = threading.local()
_lock = threading.Lock()

_db_path = DB_PATH
_root: duckdb.DuckDBPyConnection | None = None
_generation = 0


def db_exists() -> bool:
    """Check if database file exists."""
    return Path(_db_path).exists()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables and indexes (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    for index in ALL_INDEXES:
        conn.execute(index)
    logger.info("DB tables initialized")


def set_db_path(path: str | Path) -> None:
    """Point the process at another database file, dropping open connections."""
    global _db_path
    shutdown_db()
    _db_path = str(path)
    logger.debug("DB path set: {}", _db_path)


def _get_root() -> duckdb.DuckDBPyConnection:
    global _root
    with _lock:
        if _root is None:
            if not db_exists():
                logger.warning("DB not found: {}. Creating empty DB.", _db_path)
            _root = duckdb.connect(_db_path)
            init_tables(_root)
            logger.debug("DB opened: {}", _db_path)
        return _root


def get_db() -> duckdb.DuckDBPyConnection:
    """Get thread-local connection."""
    conn = getattr(_local, "conn", None)
    if conn is None or getattr(_local, "generation", None) != _generation:
        conn = _get_root().cursor()
        _local.conn = conn
        _local.generation = _generation
        logger.debug("DB cursor opened for thread {}", threading.get_ident())
    return conn


def close_db() -> None:
    """Close thread-local connection."""
    conn = getattr(_local, "conn", None)
    if conn is not None:
        conn.close()
        _local.conn = None
        logger.debug("DB connection closed")


def shutdown_db() -> None:
    """Close the database instance; every thread reconnects on next use."""
    global _root, _generation
    close_db()
    with _lock:
        if _root is not None:
            _root.close()
            _root = None
        _generation += 1


@contextmanager
def transaction() -> Iterator[duckdb.DuckDBPyConnection]:
    """Run the block in one transaction on this thread's connection.

    Commits on success; rolls back and re-raises on any exception. Store
    errors surface as PersistenceError.
    """
    conn = get_db()
    try:
        conn.execute("BEGIN TRANSACTION")
    except duckdb.Error as e:
        raise PersistenceError(f"Cannot begin transaction: {e}") from e

    try:
        yield conn
    except Exception:
        conn.execute("ROLLBACK")
        logger.warning("Transaction rolled back")
        raise

    try:
        conn.execute("COMMIT")
    except duckdb.Error as e:
        logger.warning("Commit failed: {}", e)
        # A failed commit leaves DuckDB's transaction aborted
        try:
            conn.execute("ROLLBACK")
        except duckdb.Error:
            logger.debug("Nothing to roll back after failed commit")
        raise PersistenceError(f"Commit failed: {e}") from e
