"""Public exception types for the aliasmap package."""

from .exceptions import (
    AliasCollisionError,
    AliasMapError,
    EntryNotFoundError,
    InvalidArgumentError,
)

__all__ = [
    "AliasMapError",
    "InvalidArgumentError",
    "AliasCollisionError",
    "EntryNotFoundError",
]
