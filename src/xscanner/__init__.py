"""
XScanner: configurable positional text scanner.

Building blocks for hand-written lexers and recursive-descent parsers: a
cursor over an immutable string that tries literals, patterns, named
types and enum substitutions against the unscanned remainder, advancing
only on success. Zero runtime dependencies.

Quick Start:
    >>> import re
    >>> from xscanner import Scanner
    >>> s = Scanner("Hello, World")
    >>> s.scan_string("Hello")
    'Hello'
    >>> s.scan([re.compile(r",\\s*"), "COMMA"])
    'COMMA'

Types and Macros:
    >>> s = Scanner("let x = 42")
    >>> _ = s.add_type("word", lambda d: d.scan_regex(r"[a-z]+"))
    >>> s.scan_type("word")
    'let'

Types run against a duplicate of the scanner; only the matched text is
committed back.
"""

from xscanner.comparators import INSENSITIVE, NORMAL, ComparatorGroup
from xscanner.config import (
    ScannerConfig,
    get_scanner_config,
    reset_scanner_config,
    scanner_config_context,
    set_scanner_config,
)
from xscanner.errors import ConfigurationError, NotFoundError, XScannerError
from xscanner.options import EnumOption, OptionKind, TypeRef, coerce_option, option_kind
from xscanner.outcome import FAILED, NO_MATCH, MatchOutcome, MatchResult
from xscanner.output import AdvancedScannerOutput
from xscanner.registry import FunctionRegistry
from xscanner.scanner import Scanner
from xscanner.state import ScannerState

__version__ = "0.1.0"

__all__ = [
    # Core
    "Scanner",
    "ScannerState",
    # Options
    "EnumOption",
    "OptionKind",
    "TypeRef",
    "coerce_option",
    "option_kind",
    # Results
    "AdvancedScannerOutput",
    "FAILED",
    "MatchOutcome",
    "MatchResult",
    "NO_MATCH",
    # Extension
    "ComparatorGroup",
    "FunctionRegistry",
    "INSENSITIVE",
    "NORMAL",
    # Configuration
    "ScannerConfig",
    "get_scanner_config",
    "reset_scanner_config",
    "scanner_config_context",
    "set_scanner_config",
    # Errors
    "ConfigurationError",
    "NotFoundError",
    "XScannerError",
]
