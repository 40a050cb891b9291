#!/usr/bin/env python3
"""
Forced records are written regardless of level and namespace filters.

Usage:
    python examples/force.py
"""

import nslog

nslog.set_output(nslog.outputs.pretty)
nslog.set_namespaces("")
nslog.set_level("error")

# Forced logger: every call is written
log = nslog.create_logger("namespace", True)
log.debug("Will be logged", {"someData": "someValue"})

# Per-call force on a normal logger
num = 1
other = nslog.create_logger("other")
other.debug("Not logged")
other.debug("Will be logged", {"num": num}, force=num > 0)
