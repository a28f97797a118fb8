"""Matching of strings against simple wildcard patterns.

A simple pattern may carry a ``*`` wildcard only at its start ("ends
with"), at its end ("begins with"), at both ends ("contains"), or not at
all ("equals"). An empty pattern or a lone ``*`` matches everything.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class _MatcherPattern:
    pattern: str
    prefix: str = ""
    suffix: str = ""
    contains: str = ""
    any: bool = False

    @classmethod
    def parse(cls, s: str) -> "_MatcherPattern":
        if not s or s == "*":
            return cls(pattern=s, any=True)
        starts, ends = s.startswith("*"), s.endswith("*")
        if starts and ends:
            return cls(pattern=s, contains=s[1:-1])
        if starts:
            return cls(pattern=s, suffix=s[1:])
        if ends:
            return cls(pattern=s, prefix=s[:-1])
        return cls(pattern=s)

    @property
    def has_wildcard(self) -> bool:
        return self.any or bool(self.contains or self.prefix or self.suffix)


class Matcher:
    """Matches strings against any number of simple patterns at once."""

    def __init__(self, *patterns: str) -> None:
        self._patterns: list[_MatcherPattern] = []
        self._has_wildcards = False
        self.add_patterns(*patterns)

    def add_patterns(self, *patterns: str) -> None:
        """Add the given simple patterns."""
        for s in patterns:
            parsed = _MatcherPattern.parse(s)
            if parsed.has_wildcard:
                self._has_wildcards = True
            self._patterns.append(parsed)

    def has_wildcard_patterns(self) -> bool:
        """Return whether any added pattern carries a usable ``*`` wildcard."""
        return self._has_wildcards

    def is_match(self, s: str) -> bool:
        """Return whether ``s`` matches any of the added patterns."""
        for p in self._patterns:
            if p.any or s == p.pattern:
                return True
            if self._has_wildcards:
                if p.prefix and s.startswith(p.prefix):
                    return True
                if p.suffix and s.endswith(p.suffix):
                    return True
                if p.contains and p.contains in s:
                    return True
        return False


def matches_any(value: str, *patterns: str) -> bool:
    """Return whether ``value`` matches any of the simple ``patterns``."""
    return Matcher(*patterns).is_match(value)


class Pattern(str):
    """A single simple pattern with matching methods."""

    def _matches_everything(self) -> bool:
        return len(self) == 0 or self == "*"

    def is_match(self, value: str) -> bool:
        """Return whether ``value`` matches this pattern.

        For a "contains" pattern the character before the closing ``*``
        is not part of the searched text.
        """
        if self._matches_everything():
            return True
        text = str(self)
        starts, ends = text[0] == "*", text[-1] == "*"
        if starts and ends:
            if len(text) < 3:
                raise ValueError(f"malformed pattern: {text!r}")
            return text[1:-2] in value
        if starts:
            return value.endswith(text[1:])
        if ends:
            return value.startswith(text[:-1])
        return value == text

    def all_match(self, *values: str) -> bool:
        """Return whether every one of ``values`` matches this pattern."""
        if self._matches_everything():
            return True
        return all(self.is_match(v) for v in values)

    def any_matches(self, *values: str) -> str:
        """Return the first of ``values`` that matches, or ``""``."""
        return next((v for v in values if self.is_match(v)), "")