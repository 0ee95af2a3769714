"""Comparison modes.

A comparison mode is a pair of pure functions deciding whether a literal
string or a compiled pattern matches at the start of the unscanned
remainder. Both return a MatchResult.

Built-in modes:
- normal: case-sensitive prefix test; anchored pattern match
- insensitive: caseless prefix test; pattern forced to IGNORECASE

Patterns are anchored with ``Pattern.match``, so a pattern never matches
past the start of the remainder. Empty matches never count.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from xscanner.outcome import NO_MATCH, MatchResult

StringComparator = Callable[[str, str], MatchResult]
RegexComparator = Callable[[re.Pattern[str], str], MatchResult]


@dataclass(frozen=True, slots=True)
class ComparatorGroup:
    """String and pattern comparators making up one comparison mode.

    Attributes:
        string: ``(literal, remainder) -> MatchResult``
        regex: ``(pattern, remainder) -> MatchResult``

    """

    string: StringComparator
    regex: RegexComparator


def is_comparator_group(value: object) -> bool:
    """Check that value can be registered as a comparison mode."""
    return (
        isinstance(value, ComparatorGroup)
        and callable(value.string)
        and callable(value.regex)
    )


def _match_pattern(pattern: re.Pattern[str], text: str) -> MatchResult:
    m = pattern.match(text)
    if m is None or m.group(0) == "":
        return NO_MATCH
    return MatchResult.success(m.group(0))


def normal_string(s: str, text: str) -> MatchResult:
    if not text.startswith(s):
        return NO_MATCH
    return MatchResult.success(s)


def normal_regex(pattern: re.Pattern[str], text: str) -> MatchResult:
    return _match_pattern(pattern, text)


def insensitive_string(s: str, text: str) -> MatchResult:
    """Caseless prefix test.

    The returned text is taken from the remainder, so it keeps the
    casing of the scanned input rather than the literal.
    """
    candidate = text[: len(s)]
    if candidate.casefold() != s.casefold():
        return NO_MATCH
    return MatchResult.success(candidate)


def insensitive_regex(pattern: re.Pattern[str], text: str) -> MatchResult:
    if not pattern.flags & re.IGNORECASE:
        pattern = re.compile(pattern.pattern, pattern.flags | re.IGNORECASE)
    return _match_pattern(pattern, text)


NORMAL = ComparatorGroup(string=normal_string, regex=normal_regex)
INSENSITIVE = ComparatorGroup(string=insensitive_string, regex=insensitive_regex)

BUILTIN_COMPARISON_MODES: dict[str, ComparatorGroup] = {
    "normal": NORMAL,
    "insensitive": INSENSITIVE,
}
