"""Output composition.

An output mode is a function ``(scanner, outcome) -> Any`` rendering a
MatchOutcome for the caller. Selecting a mode changes presentation only;
matching and cursor movement are identical in every mode.

Built-in modes:
- normal: the result on success, None on failure
- full: the MatchOutcome record itself
- advanced: an AdvancedScannerOutput wrapper with fluent ``then``

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from xscanner.outcome import MatchOutcome

if TYPE_CHECKING:
    from xscanner.scanner.core import Scanner

OutputFormatter = Callable[["Scanner", MatchOutcome], Any]


def _quoted(value: Any) -> str:
    return f'"{value}"' if isinstance(value, str) else repr(value)


class AdvancedScannerOutput:
    """Read-only view of a MatchOutcome bound to its scanner.

    ``then`` yields the scanner only when the match succeeded, so calls
    can be chained on success:

        >>> out = scanner.scan("let")
        >>> out.then and out.then.scan(r_whitespace)

    Truthiness equals ``matched``.
    """

    __slots__ = ("_parent", "_matched", "_kind", "_key", "_result", "_text_matched")

    def __init__(self, parent: Scanner, outcome: MatchOutcome) -> None:
        if parent is None:
            raise TypeError("AdvancedScannerOutput needs a parent Scanner, not None")

        self._parent = parent
        self._matched = bool(outcome.matched)
        self._kind = outcome.kind
        self._key = outcome.key
        self._result = outcome.result
        self._text_matched = outcome.text_matched

    @property
    def parent(self) -> Scanner:
        return self._parent

    @property
    def matched(self) -> bool:
        return self._matched

    @property
    def kind(self) -> str | None:
        return self._kind

    @property
    def key(self) -> Any:
        return self._key

    @property
    def result(self) -> Any:
        return self._result

    @property
    def text_matched(self) -> str | None:
        return self._text_matched

    @property
    def then(self) -> Scanner | None:
        """The owning scanner on success, None on failure."""
        return self._parent if self._matched else None

    def __bool__(self) -> bool:
        return self._matched

    def __repr__(self) -> str:
        return (
            f"AdvancedScannerOutput(matched={self._matched!r}, kind={self._kind!r}, "
            f"result={self._result!r}, text_matched={self._text_matched!r})"
        )

    def __str__(self) -> str:
        parent = (
            "XScanner {\n"
            f'    text: "{self._parent.text}"\n'
            f"    pos:  {self._parent.pos}\n"
            "  }"
        )
        return (
            "AdvancedScannerOutput {\n"
            f"  parent:       {parent}\n"
            f"  matched:      {self._matched}\n"
            f"  kind:         {_quoted(self._kind)}\n"
            f"  key:          {_quoted(self._key)}\n"
            f"  result:       {_quoted(self._result)}\n"
            f"  text_matched: {_quoted(self._text_matched)}\n"
            "}"
        )


def normal_output(scanner: Scanner, outcome: MatchOutcome) -> Any:
    return outcome.result if outcome.matched else None


def full_output(scanner: Scanner, outcome: MatchOutcome) -> MatchOutcome:
    return outcome


def advanced_output(scanner: Scanner, outcome: MatchOutcome) -> AdvancedScannerOutput:
    return AdvancedScannerOutput(scanner, outcome)


BUILTIN_OUTPUT_TYPES: dict[str, OutputFormatter] = {
    "normal": normal_output,
    "full": full_output,
    "advanced": advanced_output,
}
