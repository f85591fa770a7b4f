"""Exceptions raised while applying a format template."""

from __future__ import annotations

__all__ = [
    "InvalidArgumentPositionError",
    "SprintfError",
    "TooFewArgumentsError",
    "UnknownTypeSpecifierError",
]


class SprintfError(ValueError):
    """Raised when a template cannot be applied to its arguments."""

    prefix = "sprintf(): "

    def __init__(self, message: str) -> None:
        super().__init__(f"{self.prefix}{message}")


class UnknownTypeSpecifierError(SprintfError):
    """A directive has no type letter or an unsupported one."""

    def __init__(self, message: str = "Unknown type specifier") -> None:
        super().__init__(message)


class TooFewArgumentsError(SprintfError):
    """A directive refers to an argument beyond the supplied ones."""

    def __init__(self, message: str = "Too few arguments") -> None:
        super().__init__(message)


class InvalidArgumentPositionError(SprintfError):
    """An explicit ``N$`` position is zero."""

    def __init__(self, message: str = "Argument number must be greater than zero") -> None:
        super().__init__(message)
