"""Remote-state variants.

A fetch for a single remote item is always in exactly one of four states.
Each variant is a frozen value object, so states compare by value and can
be matched structurally::

    match state:
        case Success(value=v):
            ...
        case Failure(error=e):
            ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

T = TypeVar("T")  # item type
E = TypeVar("E")  # error type
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class NotAsked:
    """Nothing requested yet."""


@dataclass(frozen=True, slots=True)
class Loading:
    """Request in flight."""


@dataclass(frozen=True)
class Success(Generic[T]):
    """Loaded value."""

    value: T


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Loaded with an error."""

    error: E


RemoteData: TypeAlias = NotAsked | Loading | Failure[E] | Success[T]
"""One of the four remote states, parameterised as ``RemoteData[E, T]`` (error, item)."""

_VARIANTS = (NotAsked, Loading, Success, Failure)


def not_asked() -> NotAsked:
    return NotAsked()


def loading() -> Loading:
    return Loading()


def success(value: T) -> Success[T]:
    return Success(value)


def failure(error: E) -> Failure[E]:
    return Failure(error)


def is_remote_data(value: Any) -> bool:
    """Return ``True`` when *value* is one of the four remote states."""
    return isinstance(value, _VARIANTS)


def is_not_asked(state: RemoteData[Any, Any]) -> bool:
    return isinstance(state, NotAsked)


def is_loading(state: RemoteData[Any, Any]) -> bool:
    return isinstance(state, Loading)


def is_success(state: RemoteData[Any, Any]) -> bool:
    return isinstance(state, Success)


def is_failure(state: RemoteData[Any, Any]) -> bool:
    return isinstance(state, Failure)


def map_success(state: RemoteData[E, T], f: Callable[[T], U]) -> RemoteData[E, U]:
    """Apply *f* to a ``Success`` value; other states pass through."""
    if isinstance(state, Success):
        return Success(f(state.value))
    return state


def map_failure(state: RemoteData[E, T], f: Callable[[E], F]) -> RemoteData[F, T]:
    """Apply *f* to a ``Failure`` error; other states pass through."""
    if isinstance(state, Failure):
        return Failure(f(state.error))
    return state


def with_default(state: RemoteData[E, T], default: T) -> T:
    """Return the ``Success`` value, or *default* for every other state."""
    if isinstance(state, Success):
        return state.value
    return default
