"""Core repositories - platform registry."""

from app.repositories.core.registry import RegistryRepository

__all__ = ["RegistryRepository"]
