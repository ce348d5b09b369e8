"""Core container, key types, registry and settings."""

from .alias_map import AliasEntry, AliasMap, is_alias_map
from .config import AliasMapSettings, LoggingSettings, load_settings
from .logger_setup import setup_logging
from .named import Named, NamedItem
from .registry import ComponentRegistry, create_registry

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
]
