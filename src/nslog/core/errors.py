"""
Error taxonomy for nslog.

All nslog errors inherit from NsLogError and include:
- A unique error code for programmatic handling
- A human-readable message
- Optional details describing the offending input
"""

from typing import Any


class NsLogError(Exception):
    """
    Base class for all nslog errors.

    Attributes:
        code: Unique error code for programmatic handling
        message: Human-readable error message
        details: Additional error context
    """

    code: str = "NSLOG_ERROR"

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(NsLogError):
    """A configuration call received a value it cannot apply."""

    code = "CONFIGURATION_ERROR"


class UnknownLevelError(ConfigurationError):
    """The requested level name is not a known severity level."""

    code = "UNKNOWN_LEVEL"

    def __init__(
        self,
        level: Any,
        valid_levels: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        message = f"Unknown log level '{level}'"
        if valid_levels:
            message += f" (expected one of: {', '.join(valid_levels)})"
        super().__init__(
            message,
            details={"level": level, "valid_levels": valid_levels},
            **kwargs,
        )


class InvalidNamespacePatternError(ConfigurationError):
    """A rule in the enabled-namespace pattern is malformed."""

    code = "INVALID_NAMESPACE_PATTERN"

    def __init__(
        self,
        rule: str,
        reason: str,
        pattern: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Invalid namespace rule '{rule}': {reason}",
            details={"rule": rule, "reason": reason, "pattern": pattern},
            **kwargs,
        )


class InvalidNamespaceError(ConfigurationError):
    """A logger was created with an unusable namespace."""

    code = "INVALID_NAMESPACE"

    def __init__(self, namespace: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid logger namespace {namespace!r}: must be a non-empty string",
            details={"namespace": namespace},
            **kwargs,
        )


class UnknownOutputError(ConfigurationError):
    """The requested output formatter is not registered."""

    code = "UNKNOWN_OUTPUT"

    def __init__(
        self,
        name: str,
        available: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        message = f"Unknown output '{name}'"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(
            message,
            details={"output": name, "available": available},
            **kwargs,
        )


class RenderError(NsLogError):
    """
    A formatter could not render a record.

    Never reaches application code: the output dispatcher recovers from it
    and writes a best-effort line instead.
    """

    code = "RENDER_ERROR"

    def __init__(
        self,
        formatter: str,
        reason: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Formatter '{formatter}' failed to render record: {reason}",
            details={"formatter": formatter, "reason": reason},
            **kwargs,
        )
