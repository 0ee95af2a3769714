"""Cursor state snapshots.

ScannerState is the unit of history in XScanner: the one-slot undo
snapshot and every saved pointer are ScannerState values.

Thread Safety:
ScannerState is frozen (immutable) and safe to share between a scanner
and its duplicates.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScannerState:
    """Snapshot of a scanner's cursor.

    Attributes:
        pos: Cursor position (0 <= pos <= len(text))
        last_pos: Cursor position before the most recent movement
        last_match: Text consumed by the most recent successful advance,
            or None if nothing has been matched yet

    Examples:
            >>> ScannerState(pos=5, last_pos=0, last_match="Hello")
        ScannerState(pos=5, last_pos=0, last_match='Hello')

    """

    pos: int = 0
    last_pos: int = 0
    last_match: str | None = None


INITIAL_STATE = ScannerState()
