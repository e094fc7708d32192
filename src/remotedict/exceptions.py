"""Custom exception hierarchy for remotedict.

Container operations never raise; these exist for boundary validation only.
"""

from __future__ import annotations


class RemoteDictError(Exception):
    """Base exception for all remotedict errors."""


class RemoteDictConfigError(RemoteDictError):
    """Invalid configuration value."""


class InvalidIdentifierError(RemoteDictError, TypeError):
    """Identifier key is not a supported comparable type.

    Keys must be ``str`` or ``int``.  ``bool`` is rejected even though it
    subclasses ``int``, since ``True`` and ``1`` would collide.
    """

    def __init__(self, message: str, *, key: object = None) -> None:
        self.key = key
        super().__init__(message)
