"""
Context management for nslog.

Structured context reaches a record from four layers, lowest to highest
precedence:

1. the process-wide global context (``ContextStore``)
2. the logger's own local context
3. any active ``context_scope`` (per task/thread via contextvars)
4. the inline data passed to the emit call

Merging is a shallow key overwrite. Source mappings are never mutated.
"""

from __future__ import annotations

import contextvars
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

# Context variable for storing the scoped context
_scoped_context: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "nslog_scoped_context",
    default=None,
)


def merge_context(*layers: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Merge context layers into a new dict.

    Later layers overwrite identically-named keys from earlier ones. Nested
    values are not merged. ``None`` layers are skipped.
    """
    merged: dict[str, Any] = {}
    for layer in layers:
        if layer:
            merged.update(layer)
    return merged


class ContextStore:
    """Holds the process-wide global context."""

    def __init__(self, context: Mapping[str, Any] | None = None) -> None:
        self._global: dict[str, Any] = dict(context or {})

    @property
    def global_context(self) -> dict[str, Any]:
        """A copy of the global context."""
        return dict(self._global)

    def set_global_context(self, context: Mapping[str, Any] | None) -> None:
        """Replace the global context wholesale."""
        self._global = dict(context or {})

    def merge(
        self,
        local: Mapping[str, Any] | None = None,
        inline: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Merge global, local, scoped and inline context for one record."""
        return merge_context(self._global, local, _scoped_context.get(), inline)


def get_scoped_context() -> dict[str, Any]:
    """Get the currently active scoped context."""
    ctx = _scoped_context.get()
    return ctx.copy() if ctx else {}


@contextmanager
def context_scope(
    context: Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> Iterator[None]:
    """
    Context manager adding context fields to every record emitted in scope.

    Scopes nest: an inner scope starts from the outer one and overrides it.

    Example:
        with context_scope(request_id="123"):
            log.info("Processing request")  # Includes request_id

    Args:
        context: Optional mapping of context fields
        **kwargs: Additional context fields
    """
    previous = _scoped_context.get()

    new_context = previous.copy() if previous else {}
    if context is not None:
        new_context.update(context)
    new_context.update(kwargs)

    token = _scoped_context.set(new_context)
    try:
        yield
    finally:
        _scoped_context.reset(token)
