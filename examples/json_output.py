#!/usr/bin/env python3
"""
JSON lines output, one record per line.

Usage:
    python examples/json_output.py
"""

import nslog

nslog.set_namespaces("root:*")
nslog.set_level("debug")
nslog.set_output("json")

log = nslog.create_logger("root:testing")
log.debug("sample message", {"foo": "bar"})
log.debug("log with predefined context ID", {"foo": "bar"}, correlation_id="ctxId")
