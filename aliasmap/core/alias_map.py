"""Ordered map of named values that can also be looked up by alias.

Features
- Look up a value by its primary name or by any of its aliases.
- Iteration follows insertion order of primary names.
- ``len()`` counts primary names only; aliases are not separate entries.

Notes
- Keys are objects exposing ``name`` (str) and ``aliases`` (sequence of str),
  or mappings with those two items. The map snapshots both at insertion
  time, so later changes to the key object do not corrupt the map and
  ``delete`` never depends on the caller resupplying the same aliases.
- Every name string (primary or alias) belongs to exactly one entry. What
  happens when a new entry claims a name owned by another entry is decided
  by the ``on_collision`` policy:

  ``"overwrite"`` (default)
      Last writer wins. A taken alias moves to the new entry. A taken
      primary name evicts the old entry together with its aliases.
  ``"error"``
      ``AliasCollisionError`` is raised and the map is left unchanged.
"""

from __future__ import annotations

import logging
from abc import ABCMeta
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from ..api.exceptions import AliasCollisionError, EntryNotFoundError, InvalidArgumentError

logger = logging.getLogger(__name__)

COLLISION_POLICIES = ("overwrite", "error")

_MISSING = object()


@dataclass(frozen=True)
class AliasEntry:
    """Snapshot of one stored value and the names it is reachable by."""

    name: str
    aliases: Tuple[str, ...]
    value: Any

    @property
    def names(self) -> Tuple[str, ...]:
        return (self.name,) + self.aliases


def _check_name(name: Any, label: str = "name_or_alias") -> None:
    if not isinstance(name, str):
        raise InvalidArgumentError(f"{label} must be a string, got {type(name).__name__}")


def _read_key(key: Any) -> Tuple[str, Tuple[str, ...]]:
    """Validate a key object and return its name and de-duplicated aliases."""
    if key is None:
        raise InvalidArgumentError("key must not be None")

    if isinstance(key, Mapping):
        name = key.get("name")
        aliases = key.get("aliases")
    else:
        name = getattr(key, "name", None)
        aliases = getattr(key, "aliases", None)

    _check_name(name, "key.name")
    if not isinstance(aliases, Sequence) or isinstance(aliases, (str, bytes)):
        raise InvalidArgumentError(
            f"key.aliases must be a list of strings, got {type(aliases).__name__}"
        )
    for alias in aliases:
        _check_name(alias, "key.aliases item")

    return name, tuple(alias for alias in dict.fromkeys(aliases) if alias != name)


class AliasMap(metaclass=ABCMeta):
    """A map of values keyed by a primary name and any number of aliases.

    Example
        colors = AliasMap()
        colors.set(NamedItem(name="red", aliases=["r", "crimson"]))
        colors.set({"name": "blue", "aliases": []}, 42)

        assert len(colors) == 2
        assert colors.get("crimson").name == "red"
        assert list(colors.keys()) == ["red", "blue"]
    """

    # Identity token shared by every copy of this class. ``isinstance`` accepts
    # any class carrying it, even one loaded from a separate copy of the package.
    CLASS_ID = "5b3c8170006ec3821d6a99cae4d62be499ac967288cfef08f65de866292e5dab"

    def __init__(self, items: Optional[Iterable[Any]] = None, *, on_collision: str = "overwrite") -> None:
        if on_collision not in COLLISION_POLICIES:
            raise ValueError(
                f"on_collision must be one of {COLLISION_POLICIES}, got {on_collision!r}"
            )
        self.on_collision = on_collision
        # every name (primary or alias) -> owning primary name
        self._lookup: Dict[str, str] = {}
        # primary name -> entry, in insertion order
        self._entries: Dict[str, AliasEntry] = {}
        if items is not None:
            self.update(items)

    @classmethod
    def from_settings(cls, settings: Any, items: Optional[Iterable[Any]] = None) -> "AliasMap":
        """Create a map using the collision policy from ``AliasMapSettings``."""
        return cls(items, on_collision=settings.on_collision)

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is AliasMap and getattr(subclass, "CLASS_ID", None) == AliasMap.CLASS_ID:
            return True
        return NotImplemented

    # ---- Size & membership ----
    @property
    def size(self) -> int:
        """Number of primary names stored."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def has(self, name_or_alias: str) -> bool:
        """Return True if the name or alias is registered."""
        _check_name(name_or_alias)
        return name_or_alias in self._lookup

    def __contains__(self, name_or_alias: object) -> bool:
        return isinstance(name_or_alias, str) and name_or_alias in self._lookup

    # ---- Lookup ----
    def get(self, name_or_alias: str, default: Any = None) -> Any:
        """Get a value by name or alias. Returns ``default`` if not found."""
        _check_name(name_or_alias)
        primary = self._lookup.get(name_or_alias)
        if primary is None:
            return default
        return self._entries[primary].value

    def require(self, name_or_alias: str) -> Any:
        """Get a value or raise ``EntryNotFoundError`` if missing."""
        return self._require_entry(name_or_alias).value

    def __getitem__(self, name_or_alias: str) -> Any:
        return self.require(name_or_alias)

    def entry(self, name_or_alias: str) -> Optional[AliasEntry]:
        """Return the stored entry for a name or alias, or None."""
        _check_name(name_or_alias)
        primary = self._lookup.get(name_or_alias)
        return self._entries[primary] if primary is not None else None

    def primary_name(self, name_or_alias: str) -> Optional[str]:
        """Resolve a name or alias to the primary name that owns it."""
        _check_name(name_or_alias)
        return self._lookup.get(name_or_alias)

    def aliases_of(self, name_or_alias: str) -> Tuple[str, ...]:
        """Return the aliases stored for the entry owning ``name_or_alias``."""
        return self._require_entry(name_or_alias).aliases

    def _require_entry(self, name_or_alias: str) -> AliasEntry:
        _check_name(name_or_alias)
        primary = self._lookup.get(name_or_alias)
        if primary is None:
            raise EntryNotFoundError(
                f"'{name_or_alias}' is not registered. Available: {list(self._entries)}"
            )
        return self._entries[primary]

    # ---- Mutation ----
    def set(self, key: Any, value: Any = _MISSING) -> "AliasMap":
        """Store a value under the key's name and every one of its aliases.

        Args:
            key: Object (or mapping) exposing ``name`` and ``aliases``.
            value: Value to store. If omitted, ``key`` itself is stored.

        Returns:
            The map, so calls can be chained.

        Raises:
            InvalidArgumentError: If ``key`` has the wrong shape.
            AliasCollisionError: If a name is owned by another entry and the
                policy is ``"error"``.
        """
        name, aliases = _read_key(key)
        if value is _MISSING:
            value = key

        claimed = (name,) + aliases
        taken = [n for n in claimed if self._lookup.get(n, name) != name]
        if taken:
            if self.on_collision == "error":
                raise AliasCollisionError(
                    taken,
                    f"Cannot set '{name}': names already registered to another entry: {taken}",
                )
            self._release(taken, claimant=name)

        previous = self._entries.get(name)
        if previous is not None:
            for alias in previous.aliases:
                if alias not in aliases:
                    del self._lookup[alias]

        for n in claimed:
            self._lookup[n] = name
        # Re-assigning an existing key keeps its original position
        self._entries[name] = AliasEntry(name, aliases, value)

        logger.debug("%s '%s' with aliases %s", "Updated" if previous else "Added", name, list(aliases))
        return self

    def __setitem__(self, name: str, value: Any) -> None:
        _check_name(name, "name")
        previous = self._entries.get(name)
        self.set({"name": name, "aliases": list(previous.aliases) if previous else []}, value)

    def update(self, items: Iterable[Any]) -> None:
        """Store each key object as its own value."""
        for item in items:
            self.set(item)

    def delete(self, key: Any) -> bool:
        """Delete an entry together with all of its aliases.

        ``key`` may be a key object or a primary name. The aliases removed
        are the ones stored at insertion time, not the ones on ``key``.

        Returns:
            True if the primary name was present.
        """
        if isinstance(key, str):
            name = key
        else:
            name, _ = _read_key(key)

        record = self._entries.get(name)
        if record is None:
            return False
        self._discard(record)
        logger.debug("Deleted '%s' with aliases %s", name, list(record.aliases))
        return True

    def __delitem__(self, name: str) -> None:
        _check_name(name, "name")
        if not self.delete(name):
            raise EntryNotFoundError(f"'{name}' is not a registered primary name")

    def clear(self) -> None:
        """Remove all entries."""
        self._lookup.clear()
        self._entries.clear()
        logger.debug("Cleared alias map")

    def _discard(self, record: AliasEntry) -> None:
        for n in record.names:
            self._lookup.pop(n, None)
        del self._entries[record.name]

    def _release(self, names: List[str], claimant: str) -> None:
        """Take names away from the entries currently owning them."""
        for n in names:
            owner = self._lookup.get(n)
            if owner is None or owner == claimant:
                # Already released along with an evicted entry
                continue
            record = self._entries[owner]
            if n == owner:
                logger.warning("'%s' is claimed by '%s'; evicting entry '%s'", n, claimant, owner)
                self._discard(record)
            else:
                logger.warning("Alias '%s' moves from '%s' to '%s'", n, owner, claimant)
                del self._lookup[n]
                self._entries[owner] = replace(
                    record, aliases=tuple(a for a in record.aliases if a != n)
                )

    # ---- Iteration ----
    def for_each(self, iterator_fn: Callable[[Any, int, "AliasMap"], Any]) -> None:
        """Call ``iterator_fn(value, index, self)`` for each entry in order.

        The callback may add or delete entries. Entries deleted before their
        turn are skipped; entries added during the walk are not visited.
        """
        if not callable(iterator_fn):
            raise InvalidArgumentError(
                f"iterator_fn must be callable, got {type(iterator_fn).__name__}"
            )
        index = 0
        for name in list(self._entries):
            record = self._entries.get(name)
            if record is None:
                continue
            iterator_fn(record.value, index, self)
            index += 1

    def keys(self) -> Iterator[str]:
        """Iterate primary names in insertion order."""
        return iter(self._entries)

    def values(self) -> Iterator[Any]:
        """Iterate values in insertion order, resolving each one when pulled."""
        for name in self._entries:
            yield self._entries[name].value

    def items(self) -> Iterator[Tuple[str, Any]]:
        return iter(self)

    def entries(self) -> Iterator[AliasEntry]:
        return iter(self._entries.values())

    def names(self) -> List[str]:
        """Every registered name, primaries and aliases."""
        return list(self._lookup)

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        for name in self._entries:
            yield name, self._entries[name].value

    # ---- Introspection ----
    def copy(self) -> "AliasMap":
        clone = type(self)(on_collision=self.on_collision)
        clone._lookup = dict(self._lookup)
        clone._entries = dict(self._entries)
        return clone

    def __repr__(self) -> str:
        return f"AliasMap(size={len(self._entries)}, names={list(self._entries)})"


def is_alias_map(obj: Any) -> bool:
    """Return True if ``obj`` is an AliasMap from any loaded copy of this package."""
    return isinstance(obj, AliasMap)
