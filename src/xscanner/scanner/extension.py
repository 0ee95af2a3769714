"""Extension mixin: registries, mode selectors, data store and macros."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from xscanner.comparators import ComparatorGroup
from xscanner.errors import ConfigurationError
from xscanner.output import OutputFormatter
from xscanner.registry import FunctionRegistry
from xscanner.utils.logger import get_logger

logger = get_logger(__name__)

TypeFunction = Callable[..., Any]
MacroFunction = Callable[..., None]


class ExtensionMixin:
    """Mixin providing the type, macro, output and comparison registries.

    Type functions are called as ``fn(duplicate, *args)`` and report a
    match through their return value. Macros are called as
    ``fn(scanner, *args)`` on the scanner itself and return nothing.

    """

    # These will be set by the Scanner class
    _types: FunctionRegistry[TypeFunction]
    _macros: FunctionRegistry[MacroFunction]
    _output_types: FunctionRegistry[OutputFormatter]
    _comparison_modes: FunctionRegistry[ComparatorGroup]
    _data: dict[Any, Any]
    _output_type: str
    _comparison_mode: str

    # =========================================================================
    # Read accessors
    # =========================================================================

    @property
    def types(self) -> Mapping[str, TypeFunction]:
        return self._types.view()

    @property
    def macros(self) -> Mapping[str, MacroFunction]:
        return self._macros.view()

    @property
    def output_types(self) -> Mapping[str, OutputFormatter]:
        return self._output_types.view()

    @property
    def comparison_modes(self) -> Mapping[str, ComparatorGroup]:
        return self._comparison_modes.view()

    @property
    def data(self) -> dict[Any, Any]:
        """Free-form store for values collected by macros."""
        return self._data

    # =========================================================================
    # Mode selectors
    # =========================================================================

    @property
    def output_type(self) -> str:
        return self._output_type

    @output_type.setter
    def output_type(self, name: str) -> None:
        if name not in self._output_types:
            msg = f"Output type '{name}' does not exist on XScanner"
            raise ConfigurationError(msg)
        self._output_type = name

    @property
    def comparison_mode(self) -> str:
        return self._comparison_mode

    @comparison_mode.setter
    def comparison_mode(self, name: str) -> None:
        if name not in self._comparison_modes:
            msg = f"Comparison mode '{name}' does not exist on XScanner"
            raise ConfigurationError(msg)
        self._comparison_mode = name

    # =========================================================================
    # Registration
    # =========================================================================

    def add_type(self, name: str, fn: TypeFunction) -> ExtensionMixin:
        self._types.register(name, fn)
        return self

    def remove_type(self, name: str) -> ExtensionMixin:
        self._types.remove(name)
        return self

    def add_macro(self, name: str, fn: MacroFunction) -> ExtensionMixin:
        self._macros.register(name, fn)
        return self

    def remove_macro(self, name: str) -> ExtensionMixin:
        self._macros.remove(name)
        return self

    def add_output_type(self, name: str, fn: OutputFormatter) -> ExtensionMixin:
        """Register an output mode ``fn(scanner, outcome) -> Any``."""
        self._output_types.register(name, fn)
        return self

    def remove_output_type(self, name: str) -> ExtensionMixin:
        """Remove an output mode.

        Raises:
            ConfigurationError: If name is the active output type
            NotFoundError: If name is not registered
        """
        if name == self._output_type:
            msg = f"Cannot remove the active output type '{name}'"
            raise ConfigurationError(msg)
        self._output_types.remove(name)
        return self

    def add_comparison_mode(self, name: str, group: ComparatorGroup) -> ExtensionMixin:
        self._comparison_modes.register(name, group)
        return self

    def remove_comparison_mode(self, name: str) -> ExtensionMixin:
        """Remove a comparison mode.

        Raises:
            ConfigurationError: If name is the active comparison mode
            NotFoundError: If name is not registered
        """
        if name == self._comparison_mode:
            msg = f"Cannot remove the active comparison mode '{name}'"
            raise ConfigurationError(msg)
        self._comparison_modes.remove(name)
        return self

    # =========================================================================
    # Macros
    # =========================================================================

    def do(self, name: str, *args: Any) -> ExtensionMixin:
        """Run macro ``name`` against this scanner.

        Raises:
            NotFoundError: If name is not a registered macro
        """
        fn = self._macros.get(name)
        logger.debug("Running macro %r", name)
        fn(self, *args)
        return self
