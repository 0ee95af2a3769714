"""Positional text scanner.

Composes the cursor, matching and extension mixins into Scanner and adds
the operations that touch all of them: construction, reset, duplication
and the debug dump.

Thread Safety:
A Scanner is owned by one caller and is not safe to share. Speculative
work runs on duplicates instead of locking a shared scanner.

"""

from __future__ import annotations

import copy

from xscanner.comparators import BUILTIN_COMPARISON_MODES, is_comparator_group
from xscanner.config import get_scanner_config
from xscanner.output import BUILTIN_OUTPUT_TYPES
from xscanner.registry import FunctionRegistry
from xscanner.scanner.cursor import CursorMixin
from xscanner.scanner.extension import ExtensionMixin
from xscanner.scanner.matching import MatchingMixin
from xscanner.state import INITIAL_STATE


class Scanner(
    CursorMixin,
    MatchingMixin,
    ExtensionMixin,
):
    """Cursor over an immutable string with pluggable match options.

    Usage:
            >>> s = Scanner("Hello, World")
            >>> s.scan_string("Hello")
        'Hello'
            >>> s.scan([re.compile(r"[, ]+"), "SEP"])
        'SEP'
            >>> s.unscanned_text
        'World'

    """

    __slots__ = (
        "_text",
        "_pos",
        "_last_pos",
        "_last_match",
        "_last_state",  # One-slot undo snapshot
        "_pointers",
        "_types",
        "_macros",
        "_output_types",
        "_comparison_modes",
        "_data",
        "_output_type",
        "_comparison_mode",
        "_strict_options",
    )

    def __init__(self, text: str) -> None:
        """Initialize scanner at position 0 with empty registries.

        Default output type and comparison mode come from the active
        ScannerConfig.

        Args:
            text: Text to scan (never modified)
        """
        self._text = text
        self._pos = 0
        self._last_pos = 0
        self._last_match: str | None = None
        self._last_state = INITIAL_STATE
        self._pointers = {}
        self._types = FunctionRegistry("type")
        self._macros = FunctionRegistry("macro")
        self._output_types = FunctionRegistry("output type", BUILTIN_OUTPUT_TYPES)
        self._comparison_modes = FunctionRegistry(
            "comparison mode",
            BUILTIN_COMPARISON_MODES,
            validator=is_comparator_group,
        )
        self._data = {}
        self._apply_config()

    def _apply_config(self) -> None:
        config = get_scanner_config()
        self._strict_options = config.strict_options
        # Setters validate against the registries
        self.output_type = config.output_type
        self.comparison_mode = config.comparison_mode

    def reset(self, full: bool = False) -> Scanner:
        """Return the cursor to the start and clear the undo snapshot.

        Args:
            full: Also clear pointers, types, macros and data, restore the
                built-in output types and comparison modes, and reselect
                the configured default modes
        """
        self._reset_cursor()

        if full:
            self._pointers = {}
            self._types.clear()
            self._macros.clear()
            self._output_types.replace(BUILTIN_OUTPUT_TYPES)
            self._comparison_modes.replace(BUILTIN_COMPARISON_MODES)
            self._data = {}
            self._apply_config()

        return self

    def duplicate(self) -> Scanner:
        """Independent copy sharing only the immutable text.

        Registries and pointers are copied, the data store is deep-copied,
        and cursor state (including the undo snapshot) carries over.
        """
        dup = Scanner.__new__(Scanner)
        dup._text = self._text
        dup._pos = self._pos
        dup._last_pos = self._last_pos
        dup._last_match = self._last_match
        dup._last_state = self._last_state
        dup._pointers = dict(self._pointers)
        dup._types = self._types.copy()
        dup._macros = self._macros.copy()
        dup._output_types = self._output_types.copy()
        dup._comparison_modes = self._comparison_modes.copy()
        dup._data = copy.deepcopy(self._data)
        dup._output_type = self._output_type
        dup._comparison_mode = self._comparison_mode
        dup._strict_options = self._strict_options
        return dup

    def __repr__(self) -> str:
        return f"Scanner(pos={self._pos}, len={len(self._text)})"

    def __str__(self) -> str:
        def listing(names) -> str:
            lines = "\n    ".join(f'"{name}"' for name in names)
            return f"{{\n    {lines}\n  }}" if lines else "{ }"

        pointers = "\n    ".join(
            f'{state.pos:<4} @ "{name}"' for name, state in self._pointers.items()
        )
        pointers = f"{{\n    {pointers}\n  }}" if pointers else "{ }"
        last_match = (
            f'"{self._last_match}"' if isinstance(self._last_match, str) else self._last_match
        )

        return (
            "XScanner {\n"
            f'  text:             "{self._text}"\n'
            f"  pos:              {self._pos}\n"
            f"  last_pos:         {self._last_pos}\n"
            f"  last_match:       {last_match}\n"
            f'  output_type:      "{self._output_type}"\n'
            f'  comparison_mode:  "{self._comparison_mode}"\n'
            f"  pointers:         {pointers}\n"
            f"  types:            {listing(self._types)}\n"
            f"  macros:           {listing(self._macros)}\n"
            f"  output_types:     {listing(self._output_types)}\n"
            f"  comparison_modes: {listing(self._comparison_modes)}\n"
            f"  data:             {listing(self._data)}\n"
            "}"
        )
