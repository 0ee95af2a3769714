"""ContextVar-based scanner configuration for XScanner.

Provides context-local defaults using Python's ContextVars (PEP 567).
A Scanner reads the active config when it is created and again when it
is fully reset; changing the config afterwards does not touch existing
scanners.

Usage:
    from xscanner.config import ScannerConfig, scanner_config_context

    with scanner_config_context(ScannerConfig(comparison_mode="insensitive")):
        scanner = Scanner("Hello, World")
        scanner.scan_string("hello")  # "Hello"

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScannerConfig:
    """Immutable scanner defaults.

    Attributes:
        output_type: Output mode selected on new or fully reset scanners
        comparison_mode: Comparison mode selected on new or fully reset scanners
        strict_options: Raise ConfigurationError for unrecognised option
            values instead of treating them as non-matching

    """

    output_type: str = "normal"
    comparison_mode: str = "normal"
    strict_options: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScannerConfig":
        """Create ScannerConfig from dictionary.

        Only includes keys that are valid ScannerConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScannerConfig.from_dict({
            ...     "comparison_mode": "insensitive",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.comparison_mode
            'insensitive'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScannerConfig = ScannerConfig()

_scanner_config: ContextVar[ScannerConfig] = ContextVar(
    "scanner_config",
    default=_DEFAULT_CONFIG,
)


def get_scanner_config() -> ScannerConfig:
    """Get current scanner configuration (context-local)."""
    return _scanner_config.get()


def set_scanner_config(config: ScannerConfig) -> None:
    """Set scanner configuration for current context.

    Args:
        config: ScannerConfig instance to use for this context.
    """
    _scanner_config.set(config)


def reset_scanner_config() -> None:
    """Reset to default configuration."""
    _scanner_config.set(_DEFAULT_CONFIG)


@contextmanager
def scanner_config_context(config: ScannerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scanner_config_context(ScannerConfig(output_type="full")):
        ...     Scanner("abc").output_type
        'full'

    """
    previous = _scanner_config.get()
    _scanner_config.set(config)
    try:
        yield
    finally:
        _scanner_config.set(previous)


__all__ = [
    "ScannerConfig",
    "get_scanner_config",
    "set_scanner_config",
    "reset_scanner_config",
    "scanner_config_context",
]
