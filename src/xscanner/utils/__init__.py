"""Utility modules for XScanner.

Provides:
- logger: get_logger for logging
"""

from xscanner.utils.logger import get_logger

__all__ = ["get_logger"]
