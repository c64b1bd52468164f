"""ETL package - registry loading and data validation."""

from etl.registry import load_registry, load_registry_file
from etl.validation import validate_voting

__all__ = [
    "load_registry",
    "load_registry_file",
    "validate_voting",
]
