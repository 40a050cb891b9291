"""
Tests for levels and the level gate.
"""

import pytest

from nslog.core.errors import ConfigurationError, UnknownLevelError
from nslog.core.levels import DEFAULT_LEVEL, Level, LevelGate


class TestLevel:
    def test_ordering(self):
        assert Level.DEBUG < Level.INFO < Level.WARN < Level.ERROR
        assert Level.ERROR > Level.DEBUG
        assert Level.INFO >= Level.INFO
        assert Level.INFO <= Level.WARN

    def test_ranks(self):
        assert [level.rank for level in Level] == [0, 1, 2, 3]

    def test_ordering_is_by_rank_not_name(self):
        # "warn" > "info" > "error" > "debug" alphabetically
        assert Level.ERROR > Level.WARN
        assert max(Level) is Level.ERROR

    def test_parse_names(self):
        assert Level.parse("debug") is Level.DEBUG
        assert Level.parse("INFO") is Level.INFO
        assert Level.parse(" Warn ") is Level.WARN
        assert Level.parse(Level.ERROR) is Level.ERROR

    def test_parse_warning_alias(self):
        assert Level.parse("warning") is Level.WARN

    def test_parse_unknown(self):
        with pytest.raises(UnknownLevelError) as exc_info:
            Level.parse("verbose")
        error = exc_info.value
        assert isinstance(error, ConfigurationError)
        assert error.code == "UNKNOWN_LEVEL"
        assert error.details["valid_levels"] == ["debug", "info", "warn", "error"]

    def test_parse_non_string(self):
        with pytest.raises(UnknownLevelError):
            Level.parse(10)

    def test_compare_with_other_types(self):
        with pytest.raises(TypeError):
            Level.DEBUG < 1  # noqa: B015


class TestLevelGate:
    def test_default_is_error(self):
        gate = LevelGate()
        assert gate.minimum is DEFAULT_LEVEL is Level.ERROR
        assert not gate.is_enabled(Level.WARN)
        assert gate.is_enabled(Level.ERROR)

    def test_set_minimum_level(self):
        gate = LevelGate()
        gate.set_minimum_level("info")
        assert not gate.is_enabled(Level.DEBUG)
        assert gate.is_enabled(Level.INFO)
        assert gate.is_enabled(Level.WARN)
        assert gate.is_enabled("error")

    def test_debug_enables_everything(self):
        gate = LevelGate("debug")
        assert all(gate.is_enabled(level) for level in Level)

    def test_unknown_level_keeps_previous_minimum(self):
        gate = LevelGate("info")
        with pytest.raises(UnknownLevelError):
            gate.set_minimum_level("loud")
        assert gate.minimum is Level.INFO
