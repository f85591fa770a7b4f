"""Chainable wrapper exposing the string functions as methods."""

from __future__ import annotations

from importlib import import_module
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .format import sprintf, vprintf

__all__ = ["FUNCTIONS", "Chain", "chain", "wrap"]


_FUNCTION_MODULES = ("case", "chop", "count", "escape", "index", "manipulate", "query", "split", "strip")


def _collect_functions() -> dict[str, Callable[..., Any]]:
    functions: dict[str, Callable[..., Any]] = {}
    for module_name in _FUNCTION_MODULES:
        module = import_module(f".{module_name}", __package__)
        for name in module.__all__:
            functions[name] = getattr(module, name)
    functions["sprintf"] = sprintf
    functions["vprintf"] = vprintf
    return functions


FUNCTIONS: Mapping[str, Callable[..., Any]] = MappingProxyType(_collect_functions())


class Chain:
    """Wrap a value so string functions can be called on it in sequence.

    With implicit chaining a call returning anything other than a string ends
    the sequence and returns the plain result. Explicit chaining wraps every
    result until :meth:`value` is called.

    >>> wrap("  Hello world ").trim().lower_case().words()
    ['hello', 'world']
    >>> chain("15").is_numeric().value()
    True
    """

    __slots__ = ("_wrapped", "_explicit")

    def __init__(self, subject: Any = None, *, explicit: bool = False) -> None:
        self._wrapped = subject
        self._explicit = explicit

    def __getattr__(self, name: str) -> Callable[..., Any]:
        try:
            function = FUNCTIONS[name]
        except KeyError as exc:
            raise AttributeError(f"{type(self).__name__} has no function '{name}'") from exc

        def call(*args: Any, **kwargs: Any) -> Any:
            result = function(self._wrapped, *args, **kwargs)
            if self._explicit or isinstance(result, str):
                return Chain(result, explicit=self._explicit)
            return result

        call.__name__ = name
        call.__doc__ = function.__doc__
        return call

    @property
    def explicit(self) -> bool:
        return self._explicit

    def value(self) -> Any:
        """Return the wrapped value."""

        return self._wrapped

    def chain(self) -> Chain:
        """Switch to explicit chaining."""

        return Chain(self._wrapped, explicit=True)

    def thru(self, function: Callable[[Any], Any] | None = None) -> Chain:
        """Pass the wrapped value through ``function`` and wrap the result."""

        result = self._wrapped if function is None else function(self._wrapped)
        return Chain(result, explicit=self._explicit)

    def __str__(self) -> str:
        if self._wrapped is None:
            return ""
        return str(self._wrapped)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._wrapped!r}, explicit={self._explicit})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Chain):
            return self._wrapped == other._wrapped
        return self._wrapped == other

    __hash__ = None  # type: ignore[assignment]


def chain(subject: Any = None) -> Chain:
    """Start an explicit chain on ``subject``."""

    return Chain(subject, explicit=True)


def wrap(subject: Any = None) -> Chain:
    """Start an implicit chain on ``subject``."""

    return Chain(subject)
