"""Mixin-composed scanner for XScanner.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (mixin composition, reset, duplicate)
├── cursor.py            # Cursor movement, undo snapshot, pointers
├── matching.py          # Option resolution, check/scan
└── extension.py         # Registries, mode selectors, macros

"""

from xscanner.scanner.core import Scanner

__all__ = ["Scanner"]
