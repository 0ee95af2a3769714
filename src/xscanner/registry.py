"""Name-keyed function registries.

A Scanner owns four registries: types, macros, output types and
comparison modes. Each maps a name to a value conforming to a fixed
signature for that registry. Registering an existing name overwrites it;
removing an unknown name is an error.

Thread Safety:
FunctionRegistry is mutable and owned by a single scanner. Duplicates
receive their own copy, so a registry is never shared between scanners.

Example:
    >>> types = FunctionRegistry("type")
    >>> types.register("word", lambda s: s.scan_regex(r"[a-zA-Z]+"))
    >>> "word" in types
    True
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from xscanner.errors import ConfigurationError, NotFoundError
from xscanner.utils.logger import get_logger

logger = get_logger(__name__)

F = TypeVar("F")


class FunctionRegistry(Generic[F]):
    """Mutable name → entry mapping with validated registration.

    Entries are callables for types, macros and output types. Comparison
    modes register a ComparatorGroup, so the callable check is supplied
    by the owner through ``validator``.
    """

    __slots__ = ("_kind", "_entries", "_validator")

    def __init__(
        self,
        kind: str,
        entries: Mapping[str, F] | None = None,
        validator: Callable[[Any], bool] = callable,
    ) -> None:
        """Initialize registry.

        Args:
            kind: Human-readable registry name used in error messages
            entries: Initial bindings (copied, not shared)
            validator: Predicate every registered value must satisfy
        """
        self._kind = kind
        self._validator = validator
        self._entries: dict[str, F] = dict(entries) if entries else {}

    @property
    def kind(self) -> str:
        return self._kind

    def register(self, name: str, entry: F) -> FunctionRegistry[F]:
        """Bind ``name`` to ``entry``, overwriting any existing binding.

        Returns:
            Self for chaining

        Raises:
            ConfigurationError: If name is not a string or entry fails validation
        """
        if not isinstance(name, str):
            msg = f"A {self._kind} name must be a string, not {type(name).__name__}"
            raise ConfigurationError(msg)
        if not self._validator(entry):
            msg = f"Cannot register {type(entry).__name__} as {self._kind} '{name}'"
            raise ConfigurationError(msg)

        if name in self._entries:
            logger.debug("Overwriting %s %r", self._kind, name)
        self._entries[name] = entry
        return self

    def remove(self, name: str) -> None:
        """Delete the binding for ``name``.

        Raises:
            NotFoundError: If name is not registered
        """
        if name not in self._entries:
            raise NotFoundError(self._kind, name)
        del self._entries[name]

    def get(self, name: str) -> F:
        """Look up ``name``.

        Raises:
            NotFoundError: If name is not registered
        """
        try:
            return self._entries[name]
        except KeyError:
            raise NotFoundError(self._kind, name) from None

    def has(self, name: str) -> bool:
        """Check if name is registered."""
        return name in self._entries

    def clear(self) -> None:
        self._entries.clear()

    def replace(self, entries: Mapping[str, F]) -> None:
        """Drop every binding and install ``entries`` instead."""
        self._entries = dict(entries)

    def copy(self) -> FunctionRegistry[F]:
        """Independent registry with the same bindings."""
        return FunctionRegistry(self._kind, self._entries, self._validator)

    @property
    def names(self) -> tuple[str, ...]:
        """Registered names in registration order."""
        return tuple(self._entries)

    def view(self) -> Mapping[str, F]:
        """Read-only live view of the bindings."""
        return MappingProxyType(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"FunctionRegistry({self._kind!r}, names={list(self._entries)!r})"
