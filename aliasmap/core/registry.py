"""Decorator-friendly component registry backed by an AliasMap.

Provides a `ComponentRegistry` that components (classes or callables)
register into under a name and optional aliases, and that callers query by
either. Designed to be simple and explicit, no hidden magic.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from ..api.exceptions import AliasCollisionError
from .alias_map import AliasMap

T = TypeVar("T")


class ComponentRegistry:
    """A small, explicit registry for classes or callables.

    - Supports `@registry.register(name, aliases=[...])` decorator
    - Provides dict-like `get`, `keys`, `items`, `__contains__`
    - Optional `create(name, *args, **kwargs)` helper for instantiation

    Example
        detectors = ComponentRegistry("detectors")

        @detectors.register("grounding_dino", aliases=["dino", "gdino"])
        class GroundingDino:
            ...

        assert detectors.get("dino") is GroundingDino
        assert detectors.require("gdino") is GroundingDino
    """

    def __init__(self, kind: str = "registry", *, on_collision: str = "error") -> None:
        self.kind = kind
        self._items = AliasMap(on_collision=on_collision)

    # ---- Registration ----
    def register(self, name: Optional[str] = None, *, aliases: Optional[List[str]] = None) -> Callable[[T], T]:
        """Decorator to register an item under a name and aliases.

        If ``name`` is None, the class/function name (lowercased) is used.
        """

        def _decorator(obj: T) -> T:
            key = name or getattr(obj, "__name__", None)
            if not key:
                raise ValueError(f"Cannot infer name for registration in {self.kind}; provide a name explicitly.")
            if name is None:
                key = key.lower()
            self.add(key, obj, aliases=aliases)
            return obj

        return _decorator

    def add(self, name: str, obj: Any, *, aliases: Optional[Iterable[str]] = None, overwrite: bool = False) -> None:
        """Programmatically register an item.

        - ``overwrite``: if True, replaces an existing entry of the same name.
          Aliases owned by other entries still follow the collision policy.
        """
        if not overwrite and self._items.on_collision == "error" and name in self._items:
            raise AliasCollisionError([name], f"{self.kind}: '{name}' is already registered")
        self._items.set({"name": name, "aliases": list(aliases or [])}, obj)

    def remove(self, name: str) -> bool:
        """Unregister an item by name or alias. Returns True if it was present."""
        primary = self._items.primary_name(name)
        return primary is not None and self._items.delete(primary)

    def clear(self) -> None:
        self._items.clear()

    # ---- Lookup ----
    def get(self, name: str, default: Any = None) -> Any:
        return self._items.get(name, default)

    def require(self, name: str) -> Any:
        """Get an item or raise EntryNotFoundError if missing."""
        return self._items.require(name)

    def create(self, name: str, *args, **kwargs) -> Any:
        cls = self.require(name)
        return cls(*args, **kwargs)

    def aliases_of(self, name: str) -> Tuple[str, ...]:
        return self._items.aliases_of(name)

    def __getitem__(self, name: str) -> Any:
        return self.require(name)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def keys(self) -> Iterator[str]:
        return self._items.keys()

    def items(self) -> Iterator[Tuple[str, Any]]:
        return self._items.items()

    # ---- Introspection ----
    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return self._items.keys()

    def __repr__(self) -> str:
        return f"ComponentRegistry(kind={self.kind!r}, items={len(self._items)})"


def create_registry(kind: str, *, on_collision: str = "error") -> ComponentRegistry:
    """Convenience to create a named registry."""
    return ComponentRegistry(kind, on_collision=on_collision)
