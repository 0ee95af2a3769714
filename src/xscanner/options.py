"""Scan options.

An option is one of four closed variants:

- String: a literal ``str``
- Pattern: a compiled ``re.Pattern``
- TypeRef: names a registered type, with optional extra arguments
- EnumOption: an inner String/Pattern/TypeRef paired with a substitute value

Sequence shorthand is accepted wherever an option is expected and is
normalized by coerce_option():

    ["word"]              -> TypeRef("word")
    [r_pattern, "NUMBER"] -> EnumOption(r_pattern, "NUMBER")
    [["word"], 42]        -> EnumOption(TypeRef("word"), 42)

Any other value is unrecognised and never matches.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Union

from xscanner.errors import ConfigurationError


class OptionKind(Enum):
    """Variant tag of a normalized option."""

    STRING = auto()
    REGEX = auto()
    TYPE = auto()
    ENUM = auto()


@dataclass(frozen=True, slots=True)
class TypeRef:
    """Reference to a registered type.

    Attributes:
        name: Registered type name
        args: Extra positional arguments passed to the type function

    """

    name: str
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            msg = f"A type option needs a string name, not {type(self.name).__name__}"
            raise ConfigurationError(msg)
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True, slots=True)
class EnumOption:
    """Inner option whose successful match yields ``value``.

    The cursor still advances by the inner match's text; only the
    presented result is replaced. ``value`` may be None.

    Attributes:
        key: String, Pattern or TypeRef (never another enum)
        value: Substitute result

    """

    key: Any
    value: Any = None

    def __post_init__(self) -> None:
        key = self.key
        if isinstance(key, EnumOption) or (
            isinstance(key, (list, tuple)) and len(key) == 2
        ):
            raise ConfigurationError("An enum option cannot have an enum as its key")
        if isinstance(key, (list, tuple)) and len(key) == 1:
            object.__setattr__(self, "key", _type_ref_from(key))


Option = Union[str, re.Pattern, TypeRef, EnumOption, list, tuple]


def _type_ref_from(seq: list | tuple) -> TypeRef:
    if not isinstance(seq[0], str):
        msg = f"A type option needs a string name, not {type(seq[0]).__name__}"
        raise ConfigurationError(msg)
    return TypeRef(seq[0])


def coerce_option(value: Any) -> str | re.Pattern | TypeRef | EnumOption | None:
    """Normalize an option value to one of the four variants.

    Returns:
        The normalized option, or None if value is not an option

    Raises:
        ConfigurationError: For a malformed type name or a nested enum
    """
    if isinstance(value, (str, re.Pattern, TypeRef, EnumOption)):
        return value
    if isinstance(value, (list, tuple)):
        if len(value) == 1:
            return _type_ref_from(value)
        if len(value) == 2:
            return EnumOption(value[0], value[1])
    return None


def option_kind(option: Any) -> OptionKind | None:
    """Variant tag of a normalized option, or None if unrecognised."""
    if isinstance(option, str):
        return OptionKind.STRING
    if isinstance(option, re.Pattern):
        return OptionKind.REGEX
    if isinstance(option, TypeRef):
        return OptionKind.TYPE
    if isinstance(option, EnumOption):
        return OptionKind.ENUM
    return None
