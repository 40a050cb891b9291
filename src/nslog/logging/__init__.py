"""
nslog output layer.

Provides the pretty and JSON formatters, the output dispatcher and the
registry that maps output names to formatters.
"""

from nslog.logging.formatters import JSONFormatter, OutputFormatter, PrettyFormatter
from nslog.logging.output import OutputDispatcher, fallback_render
from nslog.logging.registry import OutputRegistry, default_registry, outputs

__all__ = [
    # Formatters
    "OutputFormatter",
    "JSONFormatter",
    "PrettyFormatter",
    # Dispatch
    "OutputDispatcher",
    "fallback_render",
    # Registry
    "OutputRegistry",
    "default_registry",
    "outputs",
]
