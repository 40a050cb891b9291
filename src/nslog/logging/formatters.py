"""
Output formatters for nslog.

Provides a human-readable pretty formatter for development and a JSON
formatter for machine ingestion. Both render the same LogRecord fields.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from nslog.core.errors import RenderError
from nslog.core.record import LogRecord


@runtime_checkable
class OutputFormatter(Protocol):
    """Anything that can turn a LogRecord into a line of text."""

    def render(self, record: LogRecord) -> str: ...


def _safe_value(value: Any) -> Any:
    """Return ``value`` if it is strict-JSON serializable, else its ``str()``."""
    try:
        json.dumps(value, allow_nan=False)
        return value
    except (TypeError, ValueError):
        return str(value)


def _safe_mapping(mapping: dict[Any, Any]) -> dict[str, Any]:
    return {str(key): _safe_value(value) for key, value in mapping.items()}


class JSONFormatter:
    """
    JSON-structured formatter for production use.

    Outputs each record as a single-line JSON object, compatible with log
    aggregation systems.

    Fields included (always present, in this order):
    - timestamp: ISO 8601 UTC timestamp
    - level: Level name
    - namespace: Logger namespace
    - correlation_id: Correlation ID or null
    - message: Log message
    - data: Inline data passed to the emit call, or null
    - context: Merged global, local and inline context
    """

    name = "json"

    def __init__(self, ensure_ascii: bool = False) -> None:
        """
        Initialize the JSON formatter.

        Args:
            ensure_ascii: Escape non-ASCII characters in the output
        """
        self.ensure_ascii = ensure_ascii

    def render(self, record: LogRecord) -> str:
        """Render the record as one line of JSON."""
        log_dict = record.to_dict()

        # Non-serializable values and non-finite floats degrade to strings
        if record.data is not None:
            log_dict["data"] = _safe_mapping(record.data)
        log_dict["context"] = _safe_mapping(record.context)

        try:
            return json.dumps(
                log_dict, default=str, ensure_ascii=self.ensure_ascii, allow_nan=False
            )
        except (TypeError, ValueError) as e:
            raise RenderError(self.name, str(e)) from e


class PrettyFormatter:
    """
    Human-readable formatter for development use.

    Outputs records in a colorized, easy-to-read format:

        2024-01-01 12:00:00.000Z DEBUG namespace:sub [ctxId] Will be logged a=1

    Inline data is already the top layer of the merged context, so it is
    rendered once, as part of the trailing ``key=value`` pairs, rather than
    as a separate field.
    """

    name = "pretty"

    COLORS = {
        "debug": "\033[36m",  # Cyan
        "info": "\033[32m",  # Green
        "warn": "\033[33m",  # Yellow
        "error": "\033[31m",  # Red
    }
    NAMESPACE_COLOR = "\033[35m"  # Magenta
    DIM = "\033[2m"
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        """
        Initialize the pretty formatter.

        Args:
            use_colors: Whether to use ANSI colors in output
        """
        self.use_colors = use_colors

    def _paint(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{self.RESET}"

    @staticmethod
    def _zone_suffix(timestamp: datetime) -> str:
        offset = timestamp.utcoffset()
        if offset is None:
            return ""
        if not offset:
            return "Z"
        return timestamp.strftime("%z")

    @staticmethod
    def _format_value(value: Any) -> str:
        if isinstance(value, str):
            # Quote anything that could split the line or read ambiguously
            if value and value.isprintable() and " " not in value:
                return value
            return json.dumps(value, ensure_ascii=False)
        try:
            return json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            return str(value)

    def render(self, record: LogRecord) -> str:
        """Render the record as a readable line."""
        timestamp = record.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        timestamp += self._zone_suffix(record.timestamp)

        level = record.level.value
        level_label = self._paint(f"{level.upper():5}", self.COLORS.get(level, ""))

        parts = [
            self._paint(timestamp, self.DIM),
            level_label,
            self._paint(record.namespace, self.NAMESPACE_COLOR),
        ]
        if record.correlation_id is not None:
            parts.append(f"[{record.correlation_id}]")
        parts.append(record.message)

        if record.context:
            parts.append(
                " ".join(
                    f"{key}={self._format_value(value)}"
                    for key, value in record.context.items()
                )
            )

        return " ".join(parts)
