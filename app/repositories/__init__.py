"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.core import RegistryRepository
from app.repositories.db import (
    close_db,
    get_db,
    init_tables,
    set_db_path,
    shutdown_db,
    transaction,
)
from app.repositories.voting import ProposalRepository, ResultRepository, VoteRepository

__all__ = [
    # DB
    "get_db",
    "close_db",
    "shutdown_db",
    "set_db_path",
    "init_tables",
    "transaction",
    # Base
    "BaseRepository",
    # Core
    "RegistryRepository",
    # Voting
    "ProposalRepository",
    "ResultRepository",
    "VoteRepository",
]
