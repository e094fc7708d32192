"""Immutable keyed container of remote states.

A :class:`RemoteDict` maps identifiers to the loading state of the item
each one addresses.  Only three states are ever stored (loading, loaded,
failed); ``NotAsked`` is represented by the absence of a key:

    ``d.get(ident) == NotAsked()`` iff ``ident`` has no stored entry.

Every operation returns a new container and leaves the receiver untouched.
No operation raises for a well-typed argument.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

from remotedict._redact import redact_for_log
from remotedict.config import RemoteDictConfig
from remotedict.identifier import Id, Key, sort_key, to_key
from remotedict.remote import Failure, Loading, NotAsked, RemoteData, Success
from remotedict.row import Row
from remotedict.snapshot import EntrySnapshot, EntryStatus, RemoteDictSnapshot

_logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class _Pending:
    pass


@dataclass(frozen=True)
class _Loaded(Generic[T]):
    item: T


@dataclass(frozen=True)
class _Failed(Generic[E]):
    error: E


_Stored: TypeAlias = _Pending | _Loaded[Any] | _Failed[Any]
_Entries: TypeAlias = dict[Key, tuple[Id[Any, Any], _Stored]]

_PENDING = _Pending()


def _encode(state: RemoteData[Any, Any]) -> _Stored | None:
    """Map a remote state to its stored form; ``None`` means "no entry"."""
    match state:
        case NotAsked():
            return None
        case Loading():
            return _PENDING
        case Success(value=item):
            return _Loaded(item)
        case Failure(error=error):
            return _Failed(error)
    raise TypeError(f"expected NotAsked, Loading, Success or Failure, got {type(state).__name__}")


def _decode(stored: _Stored | None) -> RemoteData[Any, Any]:
    if stored is None:
        return NotAsked()
    if isinstance(stored, _Loaded):
        return Success(stored.item)
    if isinstance(stored, _Failed):
        return Failure(stored.error)
    return Loading()


class RemoteDict(Generic[E, T]):
    """Immutable mapping from :class:`Id` to remote state.

    Parameters
    ----------
    config : RemoteDictConfig or None
        Diagnostics configuration, inherited by every container derived
        from this one.  Defaults to ``RemoteDictConfig()``.

    Examples
    --------
    >>> users: RemoteDict[str, str] = RemoteDict()
    >>> users = users.loading(Id("u1"))
    >>> users.get(Id("u1"))
    Loading()
    >>> users.succeed(Id("u1"), "ada").get(Id("u1"))
    Success(value='ada')
    """

    __slots__ = ("_config", "_entries")

    def __init__(self, *, config: RemoteDictConfig | None = None) -> None:
        self._config = config if config is not None else RemoteDictConfig()
        self._entries: _Entries = {}

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Row[E, T] | tuple[Id[E, T], RemoteData[E, T]]],
        *,
        config: RemoteDictConfig | None = None,
    ) -> RemoteDict[E, T]:
        """Build a container by inserting *rows* left to right."""
        return cls(config=config).insert_many(rows)

    @property
    def config(self) -> RemoteDictConfig:
        return self._config

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _derive(self, entries: _Entries) -> RemoteDict[Any, Any]:
        derived = type(self).__new__(type(self))
        derived._config = self._config
        derived._entries = entries
        return derived

    def _tracing(self) -> bool:
        return self._config.trace_enabled and _logger.isEnabledFor(logging.DEBUG)

    def _render(self, state: RemoteData[Any, Any]) -> str:
        limit = self._config.max_log_string
        if isinstance(state, Success):
            return f"Success({redact_for_log(state.value, max_string=limit)!r})"
        if isinstance(state, Failure):
            return f"Failure({redact_for_log(state.error, max_string=limit)!r})"
        return type(state).__name__

    def _write(self, entries: _Entries, identifier: Id[E, T], state: RemoteData[E, T]) -> None:
        """Apply one insert to *entries*, which must be a private copy."""
        key = to_key(identifier)
        stored = _encode(state)
        if self._tracing():
            previous = entries.get(key)
            _logger.debug(
                "%r: %s -> %s",
                key,
                self._render(_decode(previous[1] if previous is not None else None)),
                self._render(state),
            )
        if stored is None:
            entries.pop(key, None)
        else:
            entries[key] = (identifier, stored)

    def _sorted_entries(self) -> list[tuple[Id[E, T], _Stored]]:
        return [self._entries[key] for key in sorted(self._entries, key=sort_key)]

    def _counts(self) -> tuple[int, int, int]:
        loading = loaded = failed = 0
        for _, stored in self._entries.values():
            if isinstance(stored, _Loaded):
                loaded += 1
            elif isinstance(stored, _Failed):
                failed += 1
            else:
                loading += 1
        return loading, loaded, failed

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def insert(self, row: Row[E, T] | tuple[Id[E, T], RemoteData[E, T]]) -> RemoteDict[E, T]:
        """Store ``row.state`` at ``row.id``; ``NotAsked`` removes the entry."""
        identifier, state = row
        entries = dict(self._entries)
        self._write(entries, identifier, state)
        return self._derive(entries)

    def insert_many(self, rows: Iterable[Row[E, T] | tuple[Id[E, T], RemoteData[E, T]]]) -> RemoteDict[E, T]:
        """Insert *rows* left to right; for a repeated id the last row wins."""
        entries = dict(self._entries)
        for identifier, state in rows:
            self._write(entries, identifier, state)
        return self._derive(entries)

    def succeed(self, identifier: Id[E, T], item: T) -> RemoteDict[E, T]:
        return self.insert(Row(identifier, Success(item)))

    def succeed_many(self, pairs: Iterable[tuple[Id[E, T], T]]) -> RemoteDict[E, T]:
        return self.insert_many(Row(identifier, Success(item)) for identifier, item in pairs)

    def loading(self, identifier: Id[E, T]) -> RemoteDict[E, T]:
        return self.insert(Row(identifier, Loading()))

    def loading_many(self, identifiers: Iterable[Id[E, T]]) -> RemoteDict[E, T]:
        return self.insert_many(Row(identifier, Loading()) for identifier in identifiers)

    def fail(self, identifier: Id[E, T], error: E) -> RemoteDict[E, T]:
        return self.insert(Row(identifier, Failure(error)))

    def fail_many(self, pairs: Iterable[tuple[Id[E, T], E]]) -> RemoteDict[E, T]:
        return self.insert_many(Row(identifier, Failure(error)) for identifier, error in pairs)

    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------

    def get(self, identifier: Id[E, T]) -> RemoteData[E, T]:
        """Return the state at *identifier*, ``NotAsked`` when absent."""
        entry = self._entries.get(to_key(identifier))
        return _decode(entry[1] if entry is not None else None)

    def get_with_id(self, identifier: Id[E, T]) -> Row[E, T]:
        return Row(identifier, self.get(identifier))

    def get_many(self, identifiers: Iterable[Id[E, T]]) -> list[Row[E, T]]:
        """Return one row per input id, in input order, duplicates kept."""
        return [self.get_with_id(identifier) for identifier in identifiers]

    def rows(self) -> list[Row[E, T]]:
        """Return every stored row ordered by key."""
        return [Row(identifier, _decode(stored)) for identifier, stored in self._sorted_entries()]

    def ids(self) -> list[Id[E, T]]:
        return [identifier for identifier, _ in self._sorted_entries()]

    # ------------------------------------------------------------------
    # Removal and update
    # ------------------------------------------------------------------

    def remove(self, identifier: Id[E, T]) -> RemoteDict[E, T]:
        return self.insert(Row(identifier, NotAsked()))

    def remove_many(self, identifiers: Iterable[Id[E, T]]) -> RemoteDict[E, T]:
        return self.insert_many(Row(identifier, NotAsked()) for identifier in identifiers)

    def update(
        self,
        identifier: Id[E, T],
        f: Callable[[RemoteData[E, T]], RemoteData[E, T]],
    ) -> RemoteDict[E, T]:
        """Replace the state at *identifier* with ``f(current)``.

        *f* receives ``NotAsked`` for an absent id and may return
        ``NotAsked`` to remove the entry, so it can express any per-id
        transition, e.g. retrying failures::

            d.update(ident, lambda s: Loading() if isinstance(s, Failure) else s)
        """
        return self.insert(Row(identifier, f(self.get(identifier))))

    def filter(self, predicate: Callable[[Row[E, T]], bool]) -> RemoteDict[E, T]:
        """Keep only the entries whose row satisfies *predicate*."""
        entries: _Entries = {
            key: (identifier, stored)
            for key, (identifier, stored) in self._entries.items()
            if predicate(Row(identifier, _decode(stored)))
        }
        return self._derive(entries)

    # ------------------------------------------------------------------
    # Structural mapping
    # ------------------------------------------------------------------

    def map(self, f: Callable[[T], U]) -> RemoteDict[E, U]:
        """Apply *f* to every loaded item; loading and failed entries are kept."""
        entries: _Entries = {
            key: (identifier, _Loaded(f(stored.item)) if isinstance(stored, _Loaded) else stored)
            for key, (identifier, stored) in self._entries.items()
        }
        if self._tracing():
            _logger.debug("map: %d loaded entries transformed", self._counts()[1])
        return self._derive(entries)

    def map_error(self, f: Callable[[E], F]) -> RemoteDict[F, T]:
        """Apply *f* to every stored error; loading and loaded entries are kept."""
        entries: _Entries = {
            key: (identifier, _Failed(f(stored.error)) if isinstance(stored, _Failed) else stored)
            for key, (identifier, stored) in self._entries.items()
        }
        if self._tracing():
            _logger.debug("map_error: %d failed entries transformed", self._counts()[2])
        return self._derive(entries)

    def map_item(self, identifier: Id[E, T], f: Callable[[T], T]) -> RemoteDict[E, T]:
        """Apply *f* to the item at *identifier* if, and only if, it is loaded.

        Unlike :meth:`update` this never creates, removes or changes the kind
        of an entry.
        """
        key = to_key(identifier)
        entry = self._entries.get(key)
        if entry is None or not isinstance(entry[1], _Loaded):
            return self
        entries = dict(self._entries)
        self._write(entries, entry[0], Success(f(entry[1].item)))
        return self._derive(entries)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def snapshot(self, *, redact: bool = False) -> RemoteDictSnapshot:
        """Describe the container as a pydantic model.

        With ``redact=True`` items and errors are rendered through
        ``redact_for_log`` so the snapshot is safe to dump to logs.
        """
        limit = self._config.max_log_string
        entries: list[EntrySnapshot] = []
        for identifier, stored in self._sorted_entries():
            value: Any = None
            if isinstance(stored, _Loaded):
                status = EntryStatus.LOADED
                value = stored.item
            elif isinstance(stored, _Failed):
                status = EntryStatus.FAILED
                value = stored.error
            else:
                status = EntryStatus.LOADING
            if redact:
                value = redact_for_log(value, max_string=limit)
            entries.append(EntrySnapshot(key=to_key(identifier), status=status, value=value))
        loading, loaded, failed = self._counts()
        return RemoteDictSnapshot(entries=entries, loading=loading, loaded=loaded, failed=failed)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, Id) and to_key(identifier) in self._entries

    def __iter__(self) -> Iterator[Id[E, T]]:
        return iter(self.ids())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RemoteDict):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        loading, loaded, failed = self._counts()
        return (
            f"{type(self).__name__}({len(self._entries)} entries: "
            f"{loading} loading, {loaded} loaded, {failed} failed)"
        )
