"""Shell glob matching for candidate paths."""
from __future__ import annotations

import fnmatch
import re
from typing import Iterable

from .errors import MalformedPattern, NoPattern


def normalize_path(path: str) -> str:
    return path.replace("\\", "/")


def split_patterns(raw: str) -> tuple[str, ...]:
    """Split a comma separated ``--ext`` value into glob patterns."""

    patterns = tuple(item.strip() for item in raw.split(",") if item.strip())
    if not patterns:
        raise NoPattern(f"no pattern for --ext found in {raw!r}")
    return patterns


def _has_unterminated_class(pattern: str) -> bool:
    i, n = 0, len(pattern)
    while i < n:
        if pattern[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < n and pattern[j] in "!^":
            j += 1
        # a leading "]" is part of the class
        if j < n and pattern[j] == "]":
            j += 1
        while j < n and pattern[j] != "]":
            j += 1
        if j >= n:
            return True
        i = j + 1
    return False


class PatternMatcher:
    """Acceptance predicate built from a list of shell glob patterns.

    ``*``, ``?`` and ``[...]`` behave as in :mod:`fnmatch`; matching is case
    sensitive. Backslashes in the tested path are normalized to ``/`` first.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        self.patterns = tuple(patterns)
        if not self.patterns:
            raise NoPattern("no pattern for --ext found")
        self._compiled: list[re.Pattern[str]] = []
        for pattern in self.patterns:
            if _has_unterminated_class(pattern):
                raise MalformedPattern(f"pattern {pattern} may be malformed: unterminated '['")
            try:
                self._compiled.append(re.compile(fnmatch.translate(pattern)))
            except re.error as exc:
                raise MalformedPattern(f"pattern {pattern} may be malformed: {exc}") from exc

    @classmethod
    def from_string(cls, raw: str) -> PatternMatcher:
        return cls(split_patterns(raw))

    def matches(self, path: str) -> bool:
        normalized = normalize_path(path)
        return any(regex.match(normalized) for regex in self._compiled)

    def __repr__(self) -> str:
        return f"PatternMatcher({list(self.patterns)!r})"


__all__ = ["PatternMatcher", "normalize_path", "split_patterns"]
