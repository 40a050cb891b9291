"""Core filtering and context primitives for nslog."""

from nslog.core.context import ContextStore, context_scope, get_scoped_context, merge_context
from nslog.core.errors import (
    ConfigurationError,
    InvalidNamespaceError,
    InvalidNamespacePatternError,
    NsLogError,
    RenderError,
    UnknownLevelError,
    UnknownOutputError,
)
from nslog.core.levels import Level, LevelGate
from nslog.core.namespaces import NamespacePattern, NamespaceRule, compile_pattern
from nslog.core.record import LogRecord

__all__ = [
    # Context
    "ContextStore",
    "context_scope",
    "get_scoped_context",
    "merge_context",
    # Errors
    "NsLogError",
    "ConfigurationError",
    "UnknownLevelError",
    "InvalidNamespacePatternError",
    "InvalidNamespaceError",
    "UnknownOutputError",
    "RenderError",
    # Levels
    "Level",
    "LevelGate",
    # Namespaces
    "NamespacePattern",
    "NamespaceRule",
    "compile_pattern",
    # Records
    "LogRecord",
]
