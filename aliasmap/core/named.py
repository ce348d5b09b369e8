"""Key types accepted by AliasMap.

Any object exposing a string ``name`` and a list of string ``aliases`` can be
used as a key. ``NamedItem`` is a ready-made pydantic model for callers that
don't have their own type.
"""

from typing import List, Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class Named(Protocol):
    """Structural type of a key object."""

    name: str
    aliases: Sequence[str]


class NamedItem(BaseModel):
    """A named value with optional aliases.

    Extra fields are kept, so the item can carry its own payload:

        NamedItem(name="red", aliases=["r", "crimson"], rgb=(255, 0, 0))
    """

    model_config = ConfigDict(extra="allow")

    name: str
    aliases: List[str] = Field(default_factory=list)
