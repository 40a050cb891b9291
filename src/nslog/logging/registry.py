"""
Registry of named output formatters.
"""

from __future__ import annotations

from nslog.core.errors import UnknownOutputError
from nslog.logging.formatters import JSONFormatter, OutputFormatter, PrettyFormatter


class OutputRegistry:
    """
    Registry for managing output formatters by name.

    The registry:
    - Stores formatters under stable names (``pretty``, ``json``)
    - Resolves names passed to ``set_output``
    - Exposes formatters as attributes (``outputs.pretty``)
    """

    def __init__(self) -> None:
        self._formatters: dict[str, OutputFormatter] = {}

    def register(self, name: str, formatter: OutputFormatter) -> None:
        """Register a formatter under a name, replacing any existing one."""
        if not isinstance(formatter, OutputFormatter):
            raise TypeError(f"Formatter for '{name}' must implement render(record) -> str")
        self._formatters[name] = formatter

    def unregister(self, name: str) -> None:
        """Unregister a formatter by name."""
        self._formatters.pop(name, None)

    def get(self, name: str) -> OutputFormatter:
        """
        Get a formatter by name.

        Raises:
            UnknownOutputError: If no formatter is registered under the name
        """
        formatter = self._formatters.get(name)
        if formatter is None:
            raise UnknownOutputError(name, available=self.list())
        return formatter

    def list(self) -> list[str]:
        """List all registered formatter names."""
        return list(self._formatters.keys())

    def __getattr__(self, name: str) -> OutputFormatter:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.get(name)
        except UnknownOutputError as e:
            raise AttributeError(name) from e

    def __len__(self) -> int:
        return len(self._formatters)

    def __contains__(self, name: str) -> bool:
        return name in self._formatters


def default_registry() -> OutputRegistry:
    """Create a registry holding the built-in formatters."""
    registry = OutputRegistry()
    registry.register("pretty", PrettyFormatter())
    registry.register("json", JSONFormatter())
    return registry


outputs = default_registry()
