#!/usr/bin/env python3
"""
Pretty output for a nested namespace with a correlation ID.

Usage:
    python examples/pretty_output.py
"""

import nslog

nslog.set_namespaces("namespace:*")
nslog.set_level("debug")
nslog.set_output(nslog.outputs.pretty)

log = nslog.create_logger("namespace:subNamespace")
log.debug(
    "Will be logged",
    {"someData": "someValue", "someData2": "someValue"},
    correlation_id="ctxId",
)
