"""Identifier/state pairs."""

from __future__ import annotations

from typing import Generic, NamedTuple, TypeVar

from remotedict.identifier import Id
from remotedict.remote import RemoteData

T = TypeVar("T")
E = TypeVar("E")


class Row(NamedTuple, Generic[E, T]):
    """An id together with the remote state stored for it.

    Rows are plain tuples, so ``(id, state)`` literals work wherever a row
    is expected and rows unpack as ``ident, state = row``.
    """

    id: Id[E, T]
    state: RemoteData[E, T]
