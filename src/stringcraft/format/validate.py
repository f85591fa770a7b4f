"""Checks applied to every directive before it is rendered."""

from __future__ import annotations

from .errors import InvalidArgumentPositionError, TooFewArgumentsError, UnknownTypeSpecifierError
from .specification import ConversionSpecification

__all__ = ["validate"]


def validate(index: int, argument_count: int, conversion: ConversionSpecification) -> None:
    if conversion.type_specifier is None:
        raise UnknownTypeSpecifierError()
    if index >= argument_count:
        raise TooFewArgumentsError()
    if index < 0:
        raise InvalidArgumentPositionError()
