"""Tests for xscanner.utils."""

from __future__ import annotations


class TestGetLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from xscanner.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "xscanner.mymodule"

    def test_logger_with_xscanner_prefix(self) -> None:
        from xscanner.utils.logger import get_logger

        logger = get_logger("xscanner.registry")
        assert logger.name == "xscanner.registry"

    def test_logger_name_starting_with_xscanner_not_submodule(self) -> None:
        """Names starting with 'xscanner' but not submodules should get prefix."""
        from xscanner.utils.logger import get_logger

        logger = get_logger("xscanner_other")
        assert logger.name == "xscanner.xscanner_other"

    def test_logger_exact_name(self) -> None:
        """The exact name 'xscanner' should not get double-prefixed."""
        from xscanner.utils.logger import get_logger

        logger = get_logger("xscanner")
        assert logger.name == "xscanner"

    def test_reexported_from_utils(self) -> None:
        from xscanner.utils import get_logger

        assert get_logger("a").name == "xscanner.a"
