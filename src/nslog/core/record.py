"""
The log record passed from a logger to the output dispatcher.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from nslog.core.levels import Level


class LogRecord(BaseModel):
    """
    A single, fully assembled log record.

    Created per emit call, rendered once and discarded. Formatters receive the
    same record regardless of output, so pretty and json output always carry
    the same fields.
    """

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    level: Level
    namespace: str
    message: str
    correlation_id: str | None = None
    # Inline data exactly as passed to the emit call. Keys are not
    # restricted to str; formatters stringify them.
    data: dict[Any, Any] | None = None
    # Global, local, scoped and inline context merged
    context: dict[Any, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the stable key set shared by all formatters."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.value,
            "namespace": self.namespace,
            "correlation_id": self.correlation_id,
            "message": self.message,
            "data": self.data,
            "context": self.context,
        }
