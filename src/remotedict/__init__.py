"""remotedict - Immutable keyed container for the loading state of remote items."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("remotedict")
except PackageNotFoundError:
    __version__ = "0+local"
from remotedict.config import RemoteDictConfig
from remotedict.exceptions import (
    InvalidIdentifierError,
    RemoteDictConfigError,
    RemoteDictError,
)
from remotedict.identifier import Id, Key, to_key
from remotedict.remote import (
    Failure,
    Loading,
    NotAsked,
    RemoteData,
    Success,
    failure,
    is_failure,
    is_loading,
    is_not_asked,
    is_remote_data,
    is_success,
    loading,
    map_failure,
    map_success,
    not_asked,
    success,
    with_default,
)
from remotedict.row import Row
from remotedict.snapshot import EntrySnapshot, EntryStatus, RemoteDictSnapshot
from remotedict.store import RemoteDict

__all__ = [
    "__version__",
    "EntrySnapshot",
    "EntryStatus",
    "Failure",
    "Id",
    "InvalidIdentifierError",
    "Key",
    "Loading",
    "NotAsked",
    "RemoteData",
    "RemoteDict",
    "RemoteDictConfig",
    "RemoteDictConfigError",
    "RemoteDictError",
    "RemoteDictSnapshot",
    "Row",
    "Success",
    "failure",
    "is_failure",
    "is_loading",
    "is_not_asked",
    "is_remote_data",
    "is_success",
    "loading",
    "map_failure",
    "map_success",
    "not_asked",
    "success",
    "to_key",
    "with_default",
]
