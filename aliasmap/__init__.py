"""
aliasmap - named values with alias lookup

An insertion-ordered map whose values can be looked up by a primary name or
by any registered alias, plus a decorator registry built on top of it.
"""

from .api.exceptions import (
    AliasCollisionError,
    AliasMapError,
    EntryNotFoundError,
    InvalidArgumentError,
)
from .core import (
    AliasEntry,
    AliasMap,
    AliasMapSettings,
    ComponentRegistry,
    LoggingSettings,
    Named,
    NamedItem,
    create_registry,
    is_alias_map,
    load_settings,
    setup_logging,
)

__version__ = "0.1.0"
__all__ = [
    "AliasMap",
    "AliasEntry",
    "is_alias_map",
    "Named",
    "NamedItem",
    "ComponentRegistry",
    "create_registry",
    "AliasMapSettings",
    "LoggingSettings",
    "load_settings",
    "setup_logging",
    "AliasMapError",
    "InvalidArgumentError",
    "AliasCollisionError",
    "EntryNotFoundError",
]
