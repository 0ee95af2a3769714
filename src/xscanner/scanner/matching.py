"""Option resolution mixin.

Tries options left to right against the unscanned remainder and stops at
the first success. check* methods never move the cursor; scan* methods
advance by exactly the matched text on success and leave the scanner
untouched on failure.

Type options run against a duplicate of the scanner, so a type function
may mutate its scanner freely. Only the matched text is committed back.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from xscanner.comparators import ComparatorGroup
from xscanner.errors import ConfigurationError
from xscanner.options import (
    EnumOption,
    Option,
    OptionKind,
    TypeRef,
    coerce_option,
    option_kind,
)
from xscanner.outcome import FAILED, NO_MATCH, MatchOutcome, MatchResult
from xscanner.output import OutputFormatter
from xscanner.registry import FunctionRegistry
from xscanner.utils.logger import get_logger

if TYPE_CHECKING:
    from xscanner.scanner.core import Scanner

logger = get_logger(__name__)

# Sources that compile to a pattern matching only the empty string
_EMPTY_PATTERNS = frozenset({"", "(?:)"})


class MatchingMixin:
    """Mixin providing check/scan over heterogeneous options."""

    # These will be set by the Scanner class
    _text: str
    _pos: int
    _types: FunctionRegistry[Any]
    _output_types: FunctionRegistry[OutputFormatter]
    _comparison_modes: FunctionRegistry[ComparatorGroup]
    _output_type: str
    _comparison_mode: str
    _strict_options: bool

    def duplicate(self) -> Scanner:
        """Independent copy of the scanner. Implemented by Scanner."""
        raise NotImplementedError

    def update_match(self, text_matched: str) -> Any:
        """Advance past text_matched. Implemented by CursorMixin."""
        raise NotImplementedError

    # =========================================================================
    # Per-kind resolution (always returns a MatchOutcome)
    # =========================================================================

    def _comparators(self) -> ComparatorGroup:
        return self._comparison_modes.get(self._comparison_mode)

    def _check_string(self, s: str) -> MatchOutcome:
        if s == "":
            return FAILED
        match = self._comparators().string(s, self._text[self._pos :])
        return MatchOutcome.from_match(match, "string", s)

    def _check_regex(self, pattern: re.Pattern[str]) -> MatchOutcome:
        if pattern.pattern in _EMPTY_PATTERNS:
            return FAILED
        match = self._comparators().regex(pattern, self._text[self._pos :])
        return MatchOutcome.from_match(match, "regex", pattern)

    def _check_type(self, name: str, args: tuple[Any, ...] = ()) -> MatchOutcome:
        fn = self._types.get(name)
        dup = self.duplicate()
        logger.debug("Dispatching type %r at %d", name, self._pos)
        returned = fn(dup, *args)
        match = self._type_match(dup, returned)
        return MatchOutcome.from_match(match, f"type:{name}", name)

    def _type_match(self, dup: Scanner, returned: Any) -> MatchResult:
        """Interpret a type function's return value.

        An explicit MatchResult is taken as-is. Otherwise a falsy return, or
        one whose ``matched`` attribute is falsy, means no match. The
        consumed text is the span the duplicate advanced over, falling back
        to the returned text when it did not advance. A return that neither
        advanced nor carries text is no match; use MatchResult.success("")
        for an empty match.
        """
        if isinstance(returned, MatchResult):
            match = returned
        elif not returned or not getattr(returned, "matched", True):
            match = NO_MATCH
        elif dup.pos > self._pos:
            match = MatchResult.success(self._text[self._pos : dup.pos])
        elif isinstance(returned, str):
            match = MatchResult.success(returned)
        else:
            text = getattr(returned, "text_matched", None)
            match = MatchResult.success(text) if isinstance(text, str) else NO_MATCH

        if match.matched and match.text_matched is None:
            match = MatchResult.success("")
        return match

    def _check_enum(self, option: EnumOption) -> MatchOutcome:
        inner = self._resolve(option.key)
        if not inner.matched:
            return FAILED
        return MatchOutcome(True, "enum", option.key, option.value, inner.text_matched)

    def _resolve(self, option: Any) -> MatchOutcome:
        kind = option_kind(option)
        if kind is OptionKind.STRING:
            return self._check_string(option)
        if kind is OptionKind.REGEX:
            return self._check_regex(option)
        if kind is OptionKind.TYPE:
            return self._check_type(option.name, option.args)
        if kind is OptionKind.ENUM:
            return self._check_enum(option)
        return FAILED

    def _unrecognised(self, value: Any) -> None:
        if self._strict_options:
            msg = f"Not a scan option: {value!r}"
            raise ConfigurationError(msg)
        logger.debug("Skipping unrecognised option %r", value)

    def _check(self, options: tuple[Any, ...]) -> MatchOutcome:
        # Normalize everything first so malformed options fail before any
        # type function runs.
        normalized = []
        for value in options:
            option = coerce_option(value)
            if option is None:
                self._unrecognised(value)
            elif isinstance(option, EnumOption) and option_kind(option.key) is None:
                self._unrecognised(option.key)
            normalized.append(option)

        for option in normalized:
            outcome = self._resolve(option)
            if outcome.matched:
                return outcome
        return FAILED

    # =========================================================================
    # Output and commit
    # =========================================================================

    def _emit(self, outcome: MatchOutcome) -> Any:
        return self._output_types.get(self._output_type)(self, outcome)

    def _commit(self, outcome: MatchOutcome) -> Any:
        if outcome.matched:
            self.update_match(outcome.text_matched)
        return self._emit(outcome)

    # =========================================================================
    # Public matching API
    # =========================================================================

    def check(self, *options: Option) -> Any:
        """Try options in order without moving the cursor.

        Args:
            *options: Strings, patterns, TypeRefs, EnumOptions or their
                sequence shorthand

        Returns:
            The first successful outcome (or the failure outcome) rendered
            by the active output mode

        Raises:
            ConfigurationError: For a nested enum or, in strict mode, a
                value that is not an option
            NotFoundError: For a type option naming an unregistered type
        """
        return self._emit(self._check(options))

    def scan(self, *options: Option) -> Any:
        """Like check(), but advance past the matched text on success."""
        return self._commit(self._check(options))

    def check_string(self, s: str) -> Any:
        return self.check(s)

    def scan_string(self, s: str) -> Any:
        return self.scan(s)

    def check_regex(self, pattern: re.Pattern[str] | str) -> Any:
        """Try a pattern anchored at the cursor.

        Args:
            pattern: Compiled pattern, or a pattern source to compile
        """
        return self.check(re.compile(pattern))

    def scan_regex(self, pattern: re.Pattern[str] | str) -> Any:
        return self.scan(re.compile(pattern))

    def check_enum(self, key: Any, value: Any) -> Any:
        """Try ``key``; on success present ``value`` instead of the matched text."""
        return self.check(EnumOption(key, value))

    def scan_enum(self, key: Any, value: Any) -> Any:
        return self.scan(EnumOption(key, value))

    def check_type(self, name: str, *args: Any) -> Any:
        """Run registered type ``name`` on a duplicate without moving the cursor."""
        return self.check(TypeRef(name, args))

    def scan_type(self, name: str, *args: Any) -> Any:
        return self.scan(TypeRef(name, args))
