"""
Namespaced loggers.

A Logger is a handle bound to one namespace and one LoggerConfig. It owns its
local context; everything else (enabled namespaces, minimum level, global
context, output) is read from the config on each emit call.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from nslog.core.errors import InvalidNamespaceError
from nslog.core.levels import Level
from nslog.core.namespaces import SEPARATOR

if TYPE_CHECKING:
    from nslog.config import LoggerConfig


class Logger:
    """
    Logger bound to a namespace.

    Every emit method takes the message, optional inline data, and keyword-only
    ``correlation_id`` and ``force`` arguments.

    Example:
        log = create_logger("api:users")
        log.debug("Fetched user", {"user_id": 42}, correlation_id="req-1")
        log.error("Lookup failed", force=True)
    """

    def __init__(
        self,
        namespace: str,
        config: LoggerConfig,
        force: bool = False,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        """
        Initialize the logger.

        Args:
            namespace: Colon-delimited namespace, e.g. ``"api:users"``
            config: Configuration consulted at emit time
            force: Always write records, ignoring level and namespace filters
            context: Initial local context

        Raises:
            InvalidNamespaceError: If the namespace is empty or not a string
        """
        if not isinstance(namespace, str) or not namespace.strip():
            raise InvalidNamespaceError(namespace)
        self._namespace = namespace
        self._config = config
        self._force = force
        self._context: dict[str, Any] = dict(context or {})

    def __repr__(self) -> str:
        return f"Logger(namespace={self._namespace!r}, force={self._force})"

    @property
    def namespace(self) -> str:
        """The logger namespace."""
        return self._namespace

    @property
    def force(self) -> bool:
        """Whether this logger bypasses level and namespace filtering."""
        return self._force

    @property
    def config(self) -> LoggerConfig:
        """The configuration this logger reads from."""
        return self._config

    # === Local context ===

    @property
    def context(self) -> dict[str, Any]:
        """A copy of the local context."""
        return dict(self._context)

    def set_context(self, context: Mapping[str, Any] | None) -> None:
        """Replace the local context."""
        self._context = dict(context or {})

    def update_context(self, context: Mapping[str, Any] | None = None, **fields: Any) -> None:
        """Merge fields into the local context."""
        updated = dict(self._context)
        if context:
            updated.update(context)
        updated.update(fields)
        self._context = updated

    def child(self, suffix: str, **kwargs: Any) -> Logger:
        """
        Create a logger nested below this one.

        The child inherits ``force`` and a copy of the local context unless
        overridden through ``kwargs``.
        """
        if not isinstance(suffix, str) or not suffix.strip():
            raise InvalidNamespaceError(suffix)
        kwargs.setdefault("force", self._force)
        kwargs.setdefault("context", self._context)
        return Logger(f"{self._namespace}{SEPARATOR}{suffix}", config=self._config, **kwargs)

    # === Emitting ===

    def is_enabled(self, level: Level | str) -> bool:
        """Check whether a record at ``level`` would be written."""
        if self._force:
            return True
        return self._config.is_enabled(self._namespace, level)

    def log(
        self,
        level: Level | str,
        message: str,
        data: Mapping[str, Any] | None = None,
        *,
        correlation_id: str | None = None,
        force: bool = False,
    ) -> None:
        """Log a message at ``level``."""
        self._config.emit(
            self._namespace,
            level,
            message,
            data,
            correlation_id=correlation_id,
            force=self._force or force,
            local_context=self._context,
        )

    def debug(
        self,
        message: str,
        data: Mapping[str, Any] | None = None,
        *,
        correlation_id: str | None = None,
        force: bool = False,
    ) -> None:
        """Log a debug message."""
        self.log(Level.DEBUG, message, data, correlation_id=correlation_id, force=force)

    def info(
        self,
        message: str,
        data: Mapping[str, Any] | None = None,
        *,
        correlation_id: str | None = None,
        force: bool = False,
    ) -> None:
        """Log an info message."""
        self.log(Level.INFO, message, data, correlation_id=correlation_id, force=force)

    def warn(
        self,
        message: str,
        data: Mapping[str, Any] | None = None,
        *,
        correlation_id: str | None = None,
        force: bool = False,
    ) -> None:
        """Log a warning message."""
        self.log(Level.WARN, message, data, correlation_id=correlation_id, force=force)

    warning = warn

    def error(
        self,
        message: str,
        data: Mapping[str, Any] | None = None,
        *,
        correlation_id: str | None = None,
        force: bool = False,
    ) -> None:
        """Log an error message."""
        self.log(Level.ERROR, message, data, correlation_id=correlation_id, force=force)
