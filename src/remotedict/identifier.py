"""Typed identifiers for remote items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

from remotedict.exceptions import InvalidIdentifierError

T = TypeVar("T")
E = TypeVar("E")

Key: TypeAlias = str | int
"""Comparable runtime representation of an identifier."""


@dataclass(frozen=True)
class Id(Generic[E, T]):
    """Identifier of a remote item whose fetch fails with ``E`` or yields ``T``.

    The type parameters only exist for static checking; at runtime an id is
    just its key.  Two ids with the same key address the same item::

        user_id: Id[str, User] = Id("u-42")
    """

    key: Key

    def __post_init__(self) -> None:
        if isinstance(self.key, bool) or not isinstance(self.key, (str, int)):
            raise InvalidIdentifierError(
                f"identifier key must be str or int, got {type(self.key).__name__}",
                key=self.key,
            )

    def __repr__(self) -> str:
        return f"Id({self.key!r})"


def to_key(identifier: Id[Any, Any]) -> Key:
    """Return the comparable key of *identifier*."""
    return identifier.key


def sort_key(key: Key) -> tuple[int, Key]:
    """Total ordering over keys, placing ``int`` keys before ``str`` keys."""
    return (0, key) if isinstance(key, int) else (1, key)
