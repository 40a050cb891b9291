"""
Tests for the output registry.
"""

import pytest

from nslog.core.errors import ConfigurationError, UnknownOutputError
from nslog.logging.formatters import JSONFormatter, PrettyFormatter
from nslog.logging.registry import OutputRegistry, default_registry, outputs


class Upper:
    def render(self, record):
        return record.message.upper()


class TestOutputRegistry:
    def test_default_outputs(self):
        assert outputs.list() == ["pretty", "json"]
        assert isinstance(outputs.pretty, PrettyFormatter)
        assert isinstance(outputs.json, JSONFormatter)
        assert outputs.get("json") is outputs.json

    def test_register_and_get(self):
        registry = default_registry()
        registry.register("upper", Upper())
        assert "upper" in registry
        assert len(registry) == 3
        assert isinstance(registry.upper, Upper)

    def test_register_replaces(self):
        registry = OutputRegistry()
        first, second = Upper(), Upper()
        registry.register("upper", first)
        registry.register("upper", second)
        assert registry.get("upper") is second

    def test_register_rejects_non_formatter(self):
        registry = OutputRegistry()
        with pytest.raises(TypeError):
            registry.register("bad", object())

    def test_unregister(self):
        registry = default_registry()
        registry.unregister("json")
        registry.unregister("missing")
        assert registry.list() == ["pretty"]

    def test_unknown_name(self):
        with pytest.raises(UnknownOutputError) as exc_info:
            outputs.get("xml")
        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.details["available"] == ["pretty", "json"]

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            outputs.xml  # noqa: B018

    def test_default_registries_are_independent(self):
        registry = default_registry()
        registry.register("upper", Upper())
        assert "upper" not in outputs
