"""Tests for option variants and sequence shorthand."""

from __future__ import annotations

import re

import pytest

from xscanner.errors import ConfigurationError
from xscanner.options import EnumOption, OptionKind, TypeRef, coerce_option, option_kind


class TestCoerceOption:
    """Sequence shorthand normalizes to the closed variants."""

    def test_string_passes_through(self) -> None:
        assert coerce_option("let") == "let"

    def test_pattern_passes_through(self) -> None:
        pattern = re.compile(r"\d+")
        assert coerce_option(pattern) is pattern

    def test_single_element_is_type(self) -> None:
        assert coerce_option(["word"]) == TypeRef("word")
        assert coerce_option(("word",)) == TypeRef("word")

    def test_pair_is_enum(self) -> None:
        assert coerce_option(["let", "LET"]) == EnumOption("let", "LET")

    def test_enum_with_type_key(self) -> None:
        option = coerce_option([["word"], "WORD"])
        assert option == EnumOption(TypeRef("word"), "WORD")

    def test_other_values_unrecognised(self) -> None:
        assert coerce_option(42) is None
        assert coerce_option(None) is None
        assert coerce_option([]) is None
        assert coerce_option(["a", "b", "c"]) is None

    def test_type_name_must_be_string(self) -> None:
        with pytest.raises(ConfigurationError):
            coerce_option([42])


class TestEnumOption:
    """EnumOption construction and validation."""

    def test_value_defaults_to_none(self) -> None:
        assert EnumOption("a").value is None

    def test_nested_enum_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            EnumOption(EnumOption("a", 1), 2)
        with pytest.raises(ConfigurationError):
            EnumOption(("a", 1), 2)

    def test_frozen(self) -> None:
        option = EnumOption("a", 1)
        with pytest.raises(AttributeError):
            option.value = 2  # type: ignore[misc]


class TestTypeRef:
    """TypeRef construction and validation."""

    def test_args_become_tuple(self) -> None:
        assert TypeRef("word", [1, 2]).args == (1, 2)

    def test_name_must_be_string(self) -> None:
        with pytest.raises(ConfigurationError):
            TypeRef(3)  # type: ignore[arg-type]


class TestOptionKind:
    """Variant tags of normalized options."""

    @pytest.mark.parametrize(
        ("option", "kind"),
        [
            ("a", OptionKind.STRING),
            (re.compile("a"), OptionKind.REGEX),
            (TypeRef("a"), OptionKind.TYPE),
            (EnumOption("a", 1), OptionKind.ENUM),
            (42, None),
        ],
    )
    def test_kind(self, option, kind) -> None:
        assert option_kind(option) is kind
