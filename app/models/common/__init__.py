"""Common models - base classes and shared helpers."""

from app.models.common.base import BaseEntity
from app.models.common.time import to_naive_utc, utcnow

__all__ = [
    "BaseEntity",
    "to_naive_utc",
    "utcnow",
]
