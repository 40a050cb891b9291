"""
Shared test fixtures.
"""

import io
import json
from datetime import datetime, timezone

import pytest

import nslog.config
from nslog.config import ENV_LEVEL, ENV_NAMESPACES, ENV_OUTPUT, LoggerConfig
from nslog.core.levels import Level
from nslog.core.record import LogRecord
from nslog.logging.formatters import PrettyFormatter

FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


# === Fixtures ===


@pytest.fixture
def stream():
    """In-memory output stream."""
    return io.StringIO()


@pytest.fixture
def config(stream):
    """Fresh configuration writing uncolored pretty output to ``stream``."""
    return LoggerConfig(output=PrettyFormatter(use_colors=False), stream=stream)


@pytest.fixture
def json_config(stream):
    """Fresh configuration writing JSON lines to ``stream``."""
    return LoggerConfig(output="json", stream=stream)


@pytest.fixture
def read_lines(stream):
    """Return the lines written to ``stream`` so far."""

    def _read():
        return stream.getvalue().splitlines()

    return _read


@pytest.fixture
def read_json(stream):
    """Return the JSON records written to ``stream`` so far."""

    def _read():
        return [json.loads(line) for line in stream.getvalue().splitlines()]

    return _read


@pytest.fixture
def record():
    """A fully populated record with a fixed timestamp."""
    return LogRecord(
        timestamp=FIXED_TIME,
        level=Level.DEBUG,
        namespace="namespace:subNamespace",
        message="Will be logged",
        correlation_id="ctxId",
        data={"a": 1},
        context={"version": "2.0.0", "a": 1},
    )


@pytest.fixture
def default_config(monkeypatch):
    """Reset the process-wide default configuration around a test."""
    for name in (ENV_NAMESPACES, ENV_LEVEL, ENV_OUTPUT):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(nslog.config, "_default_config", None)
