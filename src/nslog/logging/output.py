"""
Output dispatch for nslog.

Renders records through the active formatter and writes them, one line per
record, to standard output.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

from nslog.core.errors import RenderError
from nslog.core.record import LogRecord
from nslog.logging.formatters import OutputFormatter

logger = logging.getLogger(__name__)


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def fallback_render(record: LogRecord) -> str:
    """Best-effort rendering used when the active formatter fails."""
    parts = [record.timestamp.isoformat(), record.level.value, record.namespace]
    if record.correlation_id is not None:
        parts.append(f"[{_safe_str(record.correlation_id)}]")
    parts.append(_safe_str(record.message))
    if record.context:
        parts.append(
            " ".join(f"{key}={_safe_str(value)}" for key, value in record.context.items())
        )
    return " ".join(parts)


class OutputDispatcher:
    """
    Writes rendered records to a stream.

    Exactly one formatter is active at a time. Replacing it affects only
    subsequent writes. A failing formatter never propagates to the caller:
    the record is written with ``fallback_render`` and the degradation is
    reported on the ``nslog`` diagnostics logger.
    """

    def __init__(self, formatter: OutputFormatter, stream: TextIO | None = None) -> None:
        """
        Initialize the dispatcher.

        Args:
            formatter: The active output formatter
            stream: Output stream (defaults to sys.stdout, looked up per write)
        """
        self._formatter = formatter
        self._stream = stream

    @property
    def formatter(self) -> OutputFormatter:
        """The active formatter."""
        return self._formatter

    @property
    def stream(self) -> TextIO:
        """The stream records are written to."""
        return self._stream if self._stream is not None else sys.stdout

    def set_output(self, formatter: OutputFormatter) -> None:
        """Swap the active formatter."""
        self._formatter = formatter

    def render(self, record: LogRecord) -> str:
        """Render a record, degrading to a best-effort line on failure."""
        try:
            return self._formatter.render(record)
        except RenderError as e:
            logger.warning("Degraded log output: %s", e.message)
        except Exception as e:
            error = RenderError(type(self._formatter).__name__, repr(e))
            logger.warning("Degraded log output: %s", error.message)
        return fallback_render(record)

    def write(self, record: LogRecord) -> None:
        """Render and write a record synchronously."""
        line = self.render(record)
        stream = self.stream
        try:
            stream.write(line + "\n")
            stream.flush()
        except (OSError, ValueError) as e:
            logger.warning("Failed to write log record to %r: %s", stream, e)
