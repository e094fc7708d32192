"""Container configuration for remotedict."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from remotedict.exceptions import RemoteDictConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class RemoteDictConfig:
    """Container configuration.

    Configuration only affects diagnostics; it never changes the result of
    a container operation.

    Parameters
    ----------
    trace_enabled : bool
        Emit one DEBUG log record per state transition (insert, removal,
        mapping).  Records go to the ``remotedict.store`` logger.
    max_log_string : int
        Strings longer than this are truncated when item and error values
        are rendered for logs or redacted snapshots.
    """

    trace_enabled: bool = False
    max_log_string: int = 512

    def __post_init__(self) -> None:
        if self.max_log_string <= 0:
            raise RemoteDictConfigError(f"max_log_string must be positive, got {self.max_log_string}")

    @classmethod
    def from_env(cls, **overrides: Any) -> RemoteDictConfig:
        """Create configuration from environment variables.

        Reads ``REMOTEDICT_TRACE_ENABLED`` and ``REMOTEDICT_MAX_LOG_STRING``.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        RemoteDictConfig
            Populated configuration.

        Raises
        ------
        RemoteDictConfigError
            If ``REMOTEDICT_MAX_LOG_STRING`` is not an integer or the
            resulting configuration is invalid.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "trace_enabled" not in overrides:
            config_kwargs["trace_enabled"] = _env_bool(env.get("REMOTEDICT_TRACE_ENABLED"), False)

        max_env = env.get("REMOTEDICT_MAX_LOG_STRING")
        if max_env is not None and "max_log_string" not in overrides:
            try:
                config_kwargs["max_log_string"] = int(max_env)
            except ValueError as exc:
                raise RemoteDictConfigError(f"REMOTEDICT_MAX_LOG_STRING must be an integer, got {max_env!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
