"""Error-path tests.

A failed match is a return value; misuse of the scanner raises. These
tests cover construction and formatting of the error types and every
call site that raises them.
"""

import re

import pytest

from xscanner import ConfigurationError, EnumOption, NotFoundError, Scanner, XScannerError

# =========================================================================
# Error construction and formatting
# =========================================================================


class TestNotFoundError:
    """Verify NotFoundError formatting and hierarchy."""

    def test_message(self) -> None:
        err = NotFoundError("pointer", "start")
        assert str(err) == "Pointer 'start' does not exist on XScanner"

    def test_attributes(self) -> None:
        err = NotFoundError("macro", "sig")
        assert err.kind == "macro"
        assert err.name == "sig"

    def test_is_xscanner_error(self) -> None:
        assert isinstance(NotFoundError("type", "x"), XScannerError)


class TestConfigurationError:
    """Verify ConfigurationError hierarchy."""

    def test_is_xscanner_error(self) -> None:
        assert isinstance(ConfigurationError("bad"), XScannerError)


# =========================================================================
# NotFoundError call sites
# =========================================================================


class TestNotFound:
    """Referencing unregistered names raises NotFoundError."""

    def test_load_unknown_pointer(self) -> None:
        with pytest.raises(NotFoundError, match="Pointer 'nope'"):
            Scanner("abc").load_pointer("nope")

    def test_load_unknown_pointer_leaves_state(self) -> None:
        s = Scanner("abc")
        s.scan_string("a")
        before = (s.pos, s.last_pos, s.last_match, s.last_state)
        with pytest.raises(NotFoundError):
            s.load_pointer("nope")
        assert (s.pos, s.last_pos, s.last_match, s.last_state) == before

    def test_scan_unknown_type(self) -> None:
        with pytest.raises(NotFoundError, match="Type 'word'"):
            Scanner("abc").scan_type("word")

    def test_unknown_type_inside_option_list(self) -> None:
        s = Scanner("abc")
        with pytest.raises(NotFoundError):
            s.scan("x", ["word"])

    def test_unknown_type_after_match_is_never_reached(self) -> None:
        """Resolution stops at the first success, so later types are not looked up."""
        s = Scanner("abc")
        assert s.scan("a", ["word"]) == "a"

    def test_do_unknown_macro(self) -> None:
        with pytest.raises(NotFoundError, match="Macro 'sig'"):
            Scanner("abc").do("sig")

    def test_remove_unknown_type(self) -> None:
        with pytest.raises(NotFoundError):
            Scanner("abc").remove_type("word")

    def test_remove_unknown_macro(self) -> None:
        with pytest.raises(NotFoundError):
            Scanner("abc").remove_macro("sig")

    def test_remove_unknown_output_type(self) -> None:
        with pytest.raises(NotFoundError):
            Scanner("abc").remove_output_type("fancy")


# =========================================================================
# ConfigurationError call sites
# =========================================================================


class TestConfiguration:
    """Invalid configuration raises ConfigurationError."""

    def test_non_callable_type(self) -> None:
        with pytest.raises(ConfigurationError):
            Scanner("abc").add_type("word", "not a function")

    def test_non_callable_macro(self) -> None:
        with pytest.raises(ConfigurationError):
            Scanner("abc").add_macro("sig", 42)

    def test_non_string_type_name(self) -> None:
        with pytest.raises(ConfigurationError):
            Scanner("abc").add_type(1, lambda s: None)

    def test_unknown_output_type(self) -> None:
        s = Scanner("abc")
        with pytest.raises(ConfigurationError):
            s.output_type = "fancy"
        assert s.output_type == "normal"

    def test_unknown_comparison_mode(self) -> None:
        s = Scanner("abc")
        with pytest.raises(ConfigurationError):
            s.comparison_mode = "fuzzy"
        assert s.comparison_mode == "normal"

    def test_nested_enum_sequence(self) -> None:
        with pytest.raises(ConfigurationError):
            Scanner("abc").scan([["a", 1], 2])

    def test_nested_enum_object(self) -> None:
        with pytest.raises(ConfigurationError):
            EnumOption(EnumOption("a", 1), 2)

    def test_nested_enum_checked_before_matching(self) -> None:
        """A nested enum later in the list fails before earlier options run."""
        calls = []
        s = Scanner("abc")
        s.add_type("spy", lambda d: calls.append(d.pos))
        with pytest.raises(ConfigurationError):
            s.scan(["spy"], [["a", 1], 2])
        assert calls == []
        assert s.pos == 0

    def test_scan_enum_nested_key(self) -> None:
        with pytest.raises(ConfigurationError):
            Scanner("abc").scan_enum(("a", 1), 2)

    def test_type_option_with_non_string_name(self) -> None:
        with pytest.raises(ConfigurationError):
            Scanner("abc").scan([re.compile("a")])

    def test_remove_active_comparison_mode(self) -> None:
        with pytest.raises(ConfigurationError):
            Scanner("abc").remove_comparison_mode("normal")

    def test_remove_active_output_type(self) -> None:
        with pytest.raises(ConfigurationError):
            Scanner("abc").remove_output_type("normal")

    def test_comparison_mode_must_be_group(self) -> None:
        with pytest.raises(ConfigurationError):
            Scanner("abc").add_comparison_mode("bad", lambda s, t: None)


class TestErrorsPropagate:
    """Errors raised inside user functions reach the caller unchanged."""

    def test_type_function_error(self) -> None:
        def boom(s: Scanner) -> str:
            raise ValueError("boom")

        s = Scanner("abc")
        s.add_type("boom", boom)
        with pytest.raises(ValueError, match="boom"):
            s.scan_type("boom")
        assert s.pos == 0

    def test_macro_error(self) -> None:
        def boom(s: Scanner) -> None:
            raise RuntimeError("macro failed")

        s = Scanner("abc")
        s.add_macro("boom", boom)
        with pytest.raises(RuntimeError, match="macro failed"):
            s.do("boom")
