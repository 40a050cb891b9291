#!/usr/bin/env python3
"""
Global context merged into every record, plus a scoped request context.

Usage:
    python examples/global_context.py
"""

import nslog

nslog.set_output(nslog.outputs.pretty)
nslog.set_namespaces("*")
nslog.set_level("info")
nslog.set_global_context({"version": "2.0.0", "env": "dev"})

log = nslog.create_logger("namespace")

log.warn("message", {"someData": "someValue"})

with nslog.context_scope(request_id="req-42"):
    log.info("handled request")
