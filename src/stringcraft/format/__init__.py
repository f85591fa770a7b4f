"""printf style formatting engine."""

from .errors import (
    InvalidArgumentPositionError,
    SprintfError,
    TooFewArgumentsError,
    UnknownTypeSpecifierError,
)
from .replacement_index import ReplacementIndex
from .specification import ConversionSpecification, TypeSpecifier
from .sprintf import Formatter, sprintf, vprintf

__all__ = [
    "ConversionSpecification",
    "Formatter",
    "InvalidArgumentPositionError",
    "ReplacementIndex",
    "SprintfError",
    "TooFewArgumentsError",
    "TypeSpecifier",
    "UnknownTypeSpecifierError",
    "sprintf",
    "vprintf",
]
