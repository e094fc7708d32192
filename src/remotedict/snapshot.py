"""Inspection models describing the contents of a container.

Snapshots are read-only views for debugging and diagnostics dumps; they
are not a persistence format and cannot be turned back into a container.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EntryStatus(StrEnum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class EntrySnapshot(BaseModel):
    """One stored entry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str | int
    status: EntryStatus
    value: Any = Field(default=None, description="Item when loaded, error when failed, None while loading.")


class RemoteDictSnapshot(BaseModel):
    """All stored entries, ordered by key, with per-status counts."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    entries: list[EntrySnapshot] = Field(default_factory=list)
    loading: int = 0
    loaded: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return len(self.entries)

    def with_status(self, status: EntryStatus) -> list[EntrySnapshot]:
        return [entry for entry in self.entries if entry.status == status]
