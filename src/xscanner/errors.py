"""Exception classes for XScanner.

Provides standardized exceptions for error handling throughout XScanner.
A failed match is never an error: it is a normal return value.
"""

from __future__ import annotations


class XScannerError(Exception):
    """Base exception for all XScanner errors.

    Subclass this for specific error categories.
    """

    pass


class NotFoundError(XScannerError):
    """Lookup of an unregistered name.

    Raised when a pointer, type, macro, output type or comparison mode
    is referenced by a name the scanner does not know.
    """

    def __init__(self, kind: str, name: str) -> None:
        """Initialize lookup error.

        Args:
            kind: Registry being searched (e.g., "pointer", "type")
            name: Name that was not found
        """
        self.kind = kind
        self.name = name
        super().__init__(f"{kind.capitalize()} '{name}' does not exist on XScanner")


class ConfigurationError(XScannerError):
    """Invalid scanner configuration or option shape.

    Raised when registering a non-callable, selecting an unregistered
    mode, or nesting an enum option inside another enum's key.
    """

    pass
