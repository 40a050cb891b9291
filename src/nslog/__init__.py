"""
nslog - namespace-scoped logging.

Create many named loggers, enable subsets of them at runtime with glob-like
namespace patterns, gate messages by level, attach global and per-logger
context, and render records as pretty text or JSON lines on stdout.

Example:
    import nslog

    nslog.set_namespaces("api:*, -api:health")
    nslog.set_level("debug")
    nslog.set_output(nslog.outputs.pretty)

    log = nslog.create_logger("api:users")
    log.debug("Fetched user", {"user_id": 42}, correlation_id="req-1")
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__version__ = "0.1.0"

from nslog.config import LoggerConfig, LoggerSettings, get_default_config
from nslog.core.context import context_scope
from nslog.core.errors import (
    ConfigurationError,
    InvalidNamespaceError,
    InvalidNamespacePatternError,
    NsLogError,
    RenderError,
    UnknownLevelError,
    UnknownOutputError,
)
from nslog.core.levels import Level
from nslog.core.record import LogRecord
from nslog.logger import Logger
from nslog.logging.formatters import JSONFormatter, OutputFormatter, PrettyFormatter
from nslog.logging.registry import outputs


def set_namespaces(pattern: str) -> None:
    """Set the enabled-namespace pattern of the default configuration."""
    get_default_config().set_namespaces(pattern)


def set_level(level: Level | str) -> None:
    """Set the minimum level of the default configuration."""
    get_default_config().set_level(level)


def set_output(output: OutputFormatter | str) -> None:
    """Set the output formatter of the default configuration."""
    get_default_config().set_output(output)


def set_global_context(context: Mapping[str, Any] | None) -> None:
    """Replace the global context of the default configuration."""
    get_default_config().set_global_context(context)


def create_logger(
    namespace: str,
    force: bool = False,
    *,
    context: Mapping[str, Any] | None = None,
    config: LoggerConfig | None = None,
) -> Logger:
    """
    Create a logger bound to a namespace.

    Args:
        namespace: Colon-delimited namespace, e.g. ``"api:users"``
        force: Always write records, ignoring level and namespace filters
        context: Initial local context
        config: Configuration to bind to (defaults to the process-wide one)
    """
    if config is None:
        config = get_default_config()
    return config.create_logger(namespace, force, context=context)


__all__ = [
    # Version
    "__version__",
    # Configuration
    "LoggerConfig",
    "LoggerSettings",
    "get_default_config",
    "set_namespaces",
    "set_level",
    "set_output",
    "set_global_context",
    # Loggers
    "Logger",
    "create_logger",
    "context_scope",
    "Level",
    "LogRecord",
    # Outputs
    "outputs",
    "OutputFormatter",
    "PrettyFormatter",
    "JSONFormatter",
    # Errors
    "NsLogError",
    "ConfigurationError",
    "UnknownLevelError",
    "InvalidNamespacePatternError",
    "InvalidNamespaceError",
    "UnknownOutputError",
    "RenderError",
]
