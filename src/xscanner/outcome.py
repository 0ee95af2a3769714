"""Match result records.

Two record types flow through the engine:

- MatchResult: what a comparator (or a type function) reports, i.e.
  whether something matched and the exact text it covers.
- MatchOutcome: the normalized record produced by option resolution,
  tagged with the option kind and key. Output modes render it.

Thread Safety:
Both records are frozen dataclasses and safe to share.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Explicit match signal.

    Type functions may return a MatchResult instead of a plain value to
    report an empty match, which a falsy plain return cannot express.

    Attributes:
        matched: Whether the candidate matched
        text_matched: Exact text covered by the match (None on failure)

    """

    matched: bool
    text_matched: str | None = None

    @classmethod
    def success(cls, text: str) -> MatchResult:
        """Build a successful result covering ``text``."""
        return cls(True, text)

    def __bool__(self) -> bool:
        return self.matched


NO_MATCH = MatchResult(False)


@dataclass(frozen=True, slots=True)
class MatchOutcome:
    """Normalized outcome of trying one or more options.

    On failure every field except ``matched`` is None.

    Attributes:
        matched: Whether an option matched
        kind: "string", "regex", "enum" or "type:<name>"
        key: The option (or enum key) that matched
        result: Caller-facing value; equals text_matched unless an enum
            substitute overrides it
        text_matched: Literal text consumed on advance

    """

    matched: bool
    kind: str | None = None
    key: Any = None
    result: Any = None
    text_matched: str | None = None

    @classmethod
    def from_match(
        cls,
        match: MatchResult,
        kind: str,
        key: Any,
    ) -> MatchOutcome:
        """Tag a comparator result, collapsing failures to FAILED."""
        if not match.matched:
            return FAILED
        return cls(True, kind, key, match.text_matched, match.text_matched)

    def __bool__(self) -> bool:
        return self.matched


FAILED = MatchOutcome(False)
