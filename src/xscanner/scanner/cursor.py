"""Cursor and history mixin.

Owns cursor movement, the one-slot undo snapshot and named pointers.
Every movement first copies the current state into the snapshot, so the
most recent movement can always be undone.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from xscanner.errors import NotFoundError
from xscanner.state import INITIAL_STATE, ScannerState


class CursorMixin:
    """Mixin providing cursor state, undo and pointers.

    Undo is a swap, not a stack: undoing twice in a row returns to the
    state before the first undo.

    """

    # These will be set by the Scanner class
    _text: str
    _pos: int
    _last_pos: int
    _last_match: str | None
    _last_state: ScannerState
    _pointers: dict[str, ScannerState]

    # =========================================================================
    # Read accessors
    # =========================================================================

    @property
    def text(self) -> str:
        return self._text

    @property
    def scanned_text(self) -> str:
        """Text before the cursor."""
        return self._text[: self._pos]

    @property
    def unscanned_text(self) -> str:
        """Text from the cursor to the end."""
        return self._text[self._pos :]

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def last_pos(self) -> int:
        return self._last_pos

    @property
    def last_match(self) -> str | None:
        return self._last_match

    @property
    def last_state(self) -> ScannerState:
        """The one-slot undo snapshot."""
        return self._last_state

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    @property
    def pointers(self) -> Mapping[str, ScannerState]:
        return MappingProxyType(self._pointers)

    # =========================================================================
    # State helpers
    # =========================================================================

    def _current_state(self) -> ScannerState:
        return ScannerState(self._pos, self._last_pos, self._last_match)

    def _restore_state(self, state: ScannerState) -> None:
        self._pos = state.pos
        self._last_pos = state.last_pos
        self._last_match = state.last_match

    def _update_last_state(self) -> None:
        self._last_state = self._current_state()

    def _clamp(self, n: int) -> int:
        return max(0, min(n, len(self._text)))

    def _reset_cursor(self) -> None:
        self._restore_state(INITIAL_STATE)
        self._last_state = INITIAL_STATE

    # =========================================================================
    # Movement
    # =========================================================================

    def move_position(self, n: int) -> CursorMixin:
        """Move the cursor by ``n`` characters, clamped to the text bounds.

        Returns:
            Self for chaining
        """
        self._update_last_state()
        self._last_pos = self._pos
        self._pos = self._clamp(self._pos + n)
        return self

    def set_position(self, n: int) -> CursorMixin:
        """Move the cursor to absolute position ``n``, clamped to the text bounds.

        Returns:
            Self for chaining
        """
        self._update_last_state()
        self._last_pos = self._pos
        self._pos = self._clamp(n)
        return self

    def update_match(self, text_matched: str) -> CursorMixin:
        """Advance past ``text_matched`` and record it as the last match."""
        self.move_position(len(text_matched))
        self._last_match = text_matched
        return self

    def undo_last_movement(self) -> CursorMixin:
        """Swap the current state with the undo snapshot."""
        previous = self._current_state()
        self._restore_state(self._last_state)
        self._last_state = previous
        return self

    # =========================================================================
    # Pointers
    # =========================================================================

    def save_pointer(self, name: str) -> ScannerState:
        """Save the current state under ``name``, overwriting any prior entry.

        Returns:
            The stored snapshot
        """
        state = self._current_state()
        self._pointers[name] = state
        return state

    def load_pointer(self, name: str) -> CursorMixin:
        """Restore the state saved under ``name``.

        The load itself is recorded in the undo snapshot.

        Raises:
            NotFoundError: If no pointer is saved under name
        """
        if name not in self._pointers:
            raise NotFoundError("pointer", name)

        self._update_last_state()
        self._restore_state(self._pointers[name])
        return self
