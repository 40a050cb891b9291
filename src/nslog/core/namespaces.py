"""
Namespace pattern compilation and matching.

An enabled-namespace pattern is a list of rules separated by commas and/or
whitespace, e.g. ``"api:*, db:query -api:health"``. Each rule is split on
``:`` into segments:

- ``*`` matches exactly one namespace segment
- a segment ending in ``*`` (``api*``) matches any segment with that prefix
- when the last segment of a rule is a wildcard, the rule also matches any
  namespace nested below it (``api:*`` matches ``api:v1:users``)
- a bare ``*`` rule matches every namespace

Rules starting with ``-`` disable matching namespaces. A namespace is enabled
when it matches at least one enable rule and no disable rule.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from nslog.core.errors import InvalidNamespacePatternError

SEPARATOR = ":"
WILDCARD = "*"
DISABLE_PREFIX = "-"

_RULE_SPLIT = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class NamespaceRule:
    """A single compiled rule of an enabled-namespace pattern."""

    source: str
    segments: tuple[str, ...]
    disable: bool = False

    @classmethod
    def parse(cls, text: str, pattern: str | None = None) -> NamespaceRule:
        """
        Parse one rule.

        Raises:
            InvalidNamespacePatternError: If the rule is malformed
        """
        disable = text.startswith(DISABLE_PREFIX)
        body = text[len(DISABLE_PREFIX):] if disable else text
        if not body:
            raise InvalidNamespacePatternError(text, "rule is empty", pattern)

        segments = tuple(body.split(SEPARATOR))
        for segment in segments:
            if not segment:
                raise InvalidNamespacePatternError(text, "empty namespace segment", pattern)
            if WILDCARD in segment[:-1]:
                raise InvalidNamespacePatternError(
                    text, f"wildcard only allowed at end of segment '{segment}'", pattern
                )
        return cls(source=text, segments=segments, disable=disable)

    @property
    def matches_all(self) -> bool:
        """Whether this is the bare ``*`` rule."""
        return self.segments == (WILDCARD,)

    def matches(self, namespace: str) -> bool:
        """Check whether ``namespace`` falls under this rule."""
        if self.matches_all:
            return True

        parts = namespace.split(SEPARATOR)
        last = self.segments[-1]
        open_ended = last.endswith(WILDCARD)

        if len(parts) < len(self.segments):
            return False
        if len(parts) > len(self.segments) and not open_ended:
            return False

        return all(
            _segment_matches(rule_segment, part)
            for rule_segment, part in zip(self.segments, parts)
        )


def _segment_matches(rule_segment: str, part: str) -> bool:
    if rule_segment == WILDCARD:
        return True
    if rule_segment.endswith(WILDCARD):
        return part.startswith(rule_segment[:-1])
    return rule_segment == part


@dataclass(frozen=True)
class NamespacePattern:
    """
    An immutable compiled enabled-namespace pattern.

    Replaced wholesale whenever the configuration string changes.
    """

    source: str = ""
    enable: tuple[NamespaceRule, ...] = field(default_factory=tuple)
    disable: tuple[NamespaceRule, ...] = field(default_factory=tuple)

    @classmethod
    def compile(cls, pattern: str) -> NamespacePattern:
        """
        Compile a pattern string into enable and disable rules.

        An empty or whitespace-only pattern enables nothing.

        Raises:
            InvalidNamespacePatternError: If the pattern is not a string or
                any rule is malformed
        """
        if not isinstance(pattern, str):
            raise InvalidNamespacePatternError(
                repr(pattern), "pattern must be a string", None
            )

        enable: list[NamespaceRule] = []
        disable: list[NamespaceRule] = []
        for text in _RULE_SPLIT.split(pattern.strip()):
            if not text:
                continue
            rule = NamespaceRule.parse(text, pattern)
            (disable if rule.disable else enable).append(rule)

        return cls(source=pattern, enable=tuple(enable), disable=tuple(disable))

    @property
    def is_empty(self) -> bool:
        """Whether the pattern enables nothing at all."""
        return not self.enable

    def test(self, namespace: str) -> bool:
        """Check whether a logger namespace is enabled by this pattern."""
        enabled = any(rule.matches(namespace) for rule in self.enable)
        disabled = any(rule.matches(namespace) for rule in self.disable)
        return enabled and not disabled


def compile_pattern(pattern: str) -> NamespacePattern:
    """Compile an enabled-namespace pattern string."""
    return NamespacePattern.compile(pattern)
