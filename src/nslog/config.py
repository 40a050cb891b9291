"""
Process-wide logging configuration for nslog.

A LoggerConfig owns the enabled-namespace pattern, the minimum level, the
global context and the active output formatter. All four are read by every
logger created from it and may be replaced at any time; a change applies to
the next emit call. A single lock guards the state, so configs can be shared
between threads.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Mapping
from typing import Any, TextIO

from pydantic import BaseModel, Field, field_validator

from nslog.core.context import ContextStore
from nslog.core.errors import ConfigurationError
from nslog.core.levels import DEFAULT_LEVEL, Level, LevelGate
from nslog.core.namespaces import NamespacePattern
from nslog.core.record import LogRecord
from nslog.logger import Logger
from nslog.logging.formatters import OutputFormatter
from nslog.logging.output import OutputDispatcher
from nslog.logging.registry import OutputRegistry, outputs

ENV_NAMESPACES = "NSLOG_NAMESPACES"
ENV_LEVEL = "NSLOG_LEVEL"
ENV_OUTPUT = "NSLOG_OUTPUT"

logger = logging.getLogger(__name__)


class LoggerSettings(BaseModel):
    """
    Declarative logging settings.

    Useful for loading configuration from the environment or a settings file
    and applying it in one step.
    """

    namespaces: str = Field(default="", description="Enabled-namespace pattern")
    level: Level = Field(default=DEFAULT_LEVEL)
    output: str = Field(default="pretty", description="Registered output name")
    global_context: dict[str, Any] = Field(default_factory=dict)

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Level:
        return Level.parse(value)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LoggerSettings:
        """
        Create settings from environment variables.

        Reads ``NSLOG_NAMESPACES``, ``NSLOG_LEVEL`` and ``NSLOG_OUTPUT``;
        unset variables keep their defaults.
        """
        if environ is None:
            environ = os.environ
        values: dict[str, Any] = {}
        if ENV_NAMESPACES in environ:
            values["namespaces"] = environ[ENV_NAMESPACES]
        if ENV_LEVEL in environ:
            values["level"] = environ[ENV_LEVEL]
        if ENV_OUTPUT in environ:
            values["output"] = environ[ENV_OUTPUT].strip().lower()
        return cls(**values)


class LoggerConfig:
    """
    Shared configuration consulted by loggers at emit time.

    Starts with silent defaults: no namespace enabled, minimum level
    ``error``, pretty output and an empty global context.

    Example:
        config = LoggerConfig()
        config.set_namespaces("api:*")
        config.set_level("debug")
        log = config.create_logger("api:users")
        log.debug("Fetched user", {"user_id": 42})
    """

    def __init__(
        self,
        namespaces: str = "",
        level: Level | str = DEFAULT_LEVEL,
        output: OutputFormatter | str = "pretty",
        global_context: Mapping[str, Any] | None = None,
        stream: TextIO | None = None,
        registry: OutputRegistry | None = None,
    ) -> None:
        """
        Initialize the configuration.

        Args:
            namespaces: Enabled-namespace pattern
            level: Minimum level
            output: Formatter instance or registered output name
            global_context: Initial global context
            stream: Output stream (defaults to sys.stdout)
            registry: Registry used to resolve output names
        """
        self._lock = threading.RLock()
        self._registry = registry if registry is not None else outputs
        self._pattern = NamespacePattern.compile(namespaces)
        self._gate = LevelGate(level)
        self._context = ContextStore(global_context)
        self._dispatcher = OutputDispatcher(self._resolve_output(output), stream)

    @classmethod
    def from_settings(cls, settings: LoggerSettings, **kwargs: Any) -> LoggerConfig:
        """Create a configuration from LoggerSettings."""
        return cls(
            namespaces=settings.namespaces,
            level=settings.level,
            output=settings.output,
            global_context=settings.global_context,
            **kwargs,
        )

    def apply(self, settings: LoggerSettings) -> None:
        """Apply LoggerSettings to this configuration in one step."""
        pattern = NamespacePattern.compile(settings.namespaces)
        formatter = self._resolve_output(settings.output)
        with self._lock:
            self._pattern = pattern
            self._gate.set_minimum_level(settings.level)
            self._dispatcher.set_output(formatter)
            self._context.set_global_context(settings.global_context)

    def _resolve_output(self, output: OutputFormatter | str) -> OutputFormatter:
        if isinstance(output, str):
            return self._registry.get(output)
        if not isinstance(output, OutputFormatter):
            raise ConfigurationError(
                f"Output must be a registered name or implement render(record), "
                f"got {type(output).__name__}",
                details={"output": repr(output)},
            )
        return output

    # === Configuration surface ===

    @property
    def namespaces(self) -> NamespacePattern:
        """The compiled enabled-namespace pattern."""
        return self._pattern

    @property
    def level(self) -> Level:
        """The minimum level."""
        return self._gate.minimum

    @property
    def output(self) -> OutputFormatter:
        """The active output formatter."""
        return self._dispatcher.formatter

    @property
    def global_context(self) -> dict[str, Any]:
        """A copy of the global context."""
        with self._lock:
            return self._context.global_context

    def set_namespaces(self, pattern: str) -> None:
        """
        Recompile the enabled-namespace pattern.

        Raises:
            InvalidNamespacePatternError: If the pattern is malformed
        """
        compiled = NamespacePattern.compile(pattern)
        with self._lock:
            self._pattern = compiled

    def set_level(self, level: Level | str) -> None:
        """
        Set the minimum level.

        Raises:
            UnknownLevelError: If the level name is not recognized
        """
        parsed = Level.parse(level)
        with self._lock:
            self._gate.set_minimum_level(parsed)

    def set_output(self, output: OutputFormatter | str) -> None:
        """
        Swap the active output formatter.

        Raises:
            UnknownOutputError: If a name is given that is not registered
        """
        formatter = self._resolve_output(output)
        with self._lock:
            self._dispatcher.set_output(formatter)

    def set_global_context(self, context: Mapping[str, Any] | None) -> None:
        """Replace the global context wholesale."""
        with self._lock:
            self._context.set_global_context(context)

    def create_logger(
        self,
        namespace: str,
        force: bool = False,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> Logger:
        """Create a logger bound to ``namespace`` and this configuration."""
        return Logger(namespace, config=self, force=force, context=context)

    # === Emit pipeline ===

    def is_enabled(self, namespace: str, level: Level | str) -> bool:
        """Check whether a record at ``level`` from ``namespace`` would be written."""
        parsed = Level.parse(level)
        with self._lock:
            return self._gate.is_enabled(parsed) and self._pattern.test(namespace)

    def emit(
        self,
        namespace: str,
        level: Level | str,
        message: str,
        data: Mapping[str, Any] | None = None,
        *,
        correlation_id: str | None = None,
        force: bool = False,
        local_context: Mapping[str, Any] | None = None,
    ) -> None:
        """
        Filter, assemble and write one record.

        Forced records skip both the level gate and the namespace pattern.
        Records that do not pass are dropped silently.
        """
        parsed = Level.parse(level)
        with self._lock:
            if not force:
                if not self._gate.is_enabled(parsed):
                    return
                if not self._pattern.test(namespace):
                    return

            record = LogRecord(
                level=parsed,
                namespace=namespace,
                message=message if isinstance(message, str) else str(message),
                correlation_id=None if correlation_id is None else str(correlation_id),
                data=dict(data) if data is not None else None,
                context=self._context.merge(local_context, data),
            )
            self._dispatcher.write(record)


_default_config: LoggerConfig | None = None
_default_lock = threading.Lock()


def _config_from_env(environ: Mapping[str, str] | None = None) -> LoggerConfig:
    """
    Build a silent default configuration and apply the ``NSLOG_*`` variables.

    Each variable is applied on its own. An invalid one is reported once on
    the ``nslog.config`` logger and leaves its setting at the silent default,
    where the façade setters can still replace it.
    """
    if environ is None:
        environ = os.environ
    config = LoggerConfig()
    setters = (
        (ENV_NAMESPACES, config.set_namespaces),
        (ENV_LEVEL, config.set_level),
        (ENV_OUTPUT, lambda value: config.set_output(value.strip().lower())),
    )
    for name, setter in setters:
        if name not in environ:
            continue
        value = environ[name]
        try:
            setter(value)
        except ConfigurationError as e:
            logger.warning("Ignoring invalid %s=%r: %s", name, value, e.message)
    return config


def get_default_config() -> LoggerConfig:
    """
    Get the process-wide default configuration.

    Created on first use with silent defaults overlaid by the ``NSLOG_*``
    environment variables. Use ``LoggerSettings.from_env()`` to validate the
    environment strictly.
    """
    global _default_config
    with _default_lock:
        if _default_config is None:
            _default_config = _config_from_env()
        return _default_config
