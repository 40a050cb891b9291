"""
Severity levels and the level gate.
"""

from __future__ import annotations

from enum import Enum

from nslog.core.errors import UnknownLevelError


class Level(str, Enum):
    """Log severity levels, in ascending order of severity."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def rank(self) -> int:
        """Position of the level in the severity ordering."""
        return _RANKS[self]

    @classmethod
    def parse(cls, value: Level | str) -> Level:
        """
        Resolve a level from a Level or a (case-insensitive) level name.

        Raises:
            UnknownLevelError: If the name is not a known level
        """
        if isinstance(value, Level):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            name = _ALIASES.get(name, name)
            try:
                return cls(name)
            except ValueError:
                pass
        raise UnknownLevelError(value, valid_levels=[level.value for level in cls])

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank >= other.rank


_RANKS = {level: index for index, level in enumerate(Level)}

_ALIASES = {"warning": "warn"}

DEFAULT_LEVEL = Level.ERROR


class LevelGate:
    """
    Decides whether a message at a given level should proceed.

    The gate holds a minimum level; messages below it are dropped. The
    default minimum is ``error`` so that unconfigured loggers stay quiet.
    """

    def __init__(self, minimum: Level | str = DEFAULT_LEVEL) -> None:
        self._minimum = Level.parse(minimum)

    @property
    def minimum(self) -> Level:
        """The current minimum level."""
        return self._minimum

    def set_minimum_level(self, level: Level | str) -> None:
        """
        Set the minimum level.

        Raises:
            UnknownLevelError: If the level name is not recognized
        """
        self._minimum = Level.parse(level)

    def is_enabled(self, level: Level | str) -> bool:
        """Check whether a message at ``level`` passes the gate."""
        return Level.parse(level).rank >= self._minimum.rank
