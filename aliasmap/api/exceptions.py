"""AliasMap exceptions"""

from typing import Iterable


class AliasMapError(Exception):
    """Base exception for the aliasmap package"""
    pass


class InvalidArgumentError(AliasMapError, TypeError):
    """Argument has the wrong type or shape"""
    pass


class AliasCollisionError(AliasMapError, ValueError):
    """Name is already owned by another entry"""

    def __init__(self, names: Iterable[str], message: str = ""):
        self.names = tuple(names)
        super().__init__(message or f"Names already registered to another entry: {list(self.names)}")


class EntryNotFoundError(AliasMapError, KeyError):
    """Requested name or alias not found"""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0]) if self.args else ""
