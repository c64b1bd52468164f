"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.errors import PersistenceError
from app.repositories.db import get_db


class BaseRepository:
    """Base repository with common functionality.

    The connection is looked up per call, so one repository instance can be
    shared between threads.
    """

    def __init__(self):
        logger.debug("{} initialized", self.__class__.__name__)

    @property
    def _db(self) -> duckdb.DuckDBPyConnection:
        return get_db()

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        try:
            if params:
                return self._db.execute(query, params)
            return self._db.execute(query)
        except duckdb.Error as e:
            logger.error("{} query failed: {}", self.__class__.__name__, e)
            raise PersistenceError(str(e)) from e

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()
