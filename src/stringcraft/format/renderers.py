"""Render a single argument according to its conversion type.

Every renderer returns the value without width padding; see
:func:`~stringcraft.format.align.align_and_pad` for that step.
"""

from __future__ import annotations

import math
import sys
from decimal import ROUND_HALF_UP, Context, Decimal
from types import MappingProxyType
from typing import Any, Callable, Mapping

from ..chop import truncate
from ..config import FormatterConfig
from ..utils import coerce_to_string
from .coerce import parse_float, parse_int
from .specification import ConversionSpecification, TypeSpecifier

__all__ = [
    "RENDERERS",
    "Renderer",
    "render_float",
    "render_integer_base",
    "render_integer_decimal",
    "render_string",
]


Renderer = Callable[[Any, ConversionSpecification, FormatterConfig], str]

_RADIX_FORMATS = {
    TypeSpecifier.INTEGER_BINARY: "b",
    TypeSpecifier.INTEGER_OCTAL: "o",
    TypeSpecifier.INTEGER_HEXADECIMAL: "x",
    TypeSpecifier.INTEGER_HEXADECIMAL_UPPERCASE: "X",
    TypeSpecifier.INTEGER_UNSIGNED_DECIMAL: "d",
}


def _add_sign(number: float, text: str, conversion: ConversionSpecification) -> str:
    if conversion.forces_sign and number >= 0:
        return f"+{text}"
    return text


def render_string(value: Any, conversion: ConversionSpecification, config: FormatterConfig) -> str:
    """Coerce ``value`` to text and cut it to ``precision`` characters, if given."""

    text = coerce_to_string(value)
    precision = conversion.precision
    if precision is not None and len(text) > precision:
        return truncate(text, precision, "")
    return text


def render_integer_decimal(value: Any, conversion: ConversionSpecification, config: FormatterConfig) -> str:
    number = parse_int(value)
    return _add_sign(number, str(number), conversion)


def render_integer_base(value: Any, conversion: ConversionSpecification, config: FormatterConfig) -> str:
    """Render the unsigned ``config.integer_bits`` form of ``value``.

    ``c`` turns the unsigned value into a character; code points outside the
    Unicode range keep only their low 16 bits. The sign flag is ignored.
    """

    number = parse_int(value) & config.integer_mask
    if conversion.type_specifier is TypeSpecifier.INTEGER_ASCII_CHARACTER:
        return chr(number if number <= sys.maxunicode else number & 0xFFFF)
    return format(number, _RADIX_FORMATS[conversion.type_specifier])


def _strip_fraction_zeros(text: str) -> str:
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


def _decimal_context(fraction_digits: int) -> Context:
    # the exact decimal expansion of a double has at most 767 significant digits
    return Context(prec=fraction_digits + 800, rounding=ROUND_HALF_UP)


def _fixed(number: float, fraction_digits: int) -> str:
    """Round the exact value of ``number`` to ``fraction_digits`` places, ties away from zero."""

    quantum = Decimal(1).scaleb(-fraction_digits)
    rounded = Decimal(number).quantize(quantum, context=_decimal_context(fraction_digits))
    return f"{rounded:f}"


def _scientific_parts(number: float, fraction_digits: int) -> tuple[str, int]:
    """Return the rounded mantissa text and the decimal exponent of ``number``."""

    value = Decimal(number)
    if not value:
        return _fixed(0.0, fraction_digits), 0

    context = _decimal_context(fraction_digits)
    quantum = Decimal(1).scaleb(-fraction_digits)
    exponent = value.adjusted()
    mantissa = value.scaleb(-exponent, context).quantize(quantum, context=context)
    if abs(mantissa) >= 10:
        exponent += 1
        mantissa = value.scaleb(-exponent, context).quantize(quantum, context=context)
    return f"{mantissa:f}", exponent


def _exponential(number: float, fraction_digits: int) -> str:
    mantissa, exponent = _scientific_parts(number, fraction_digits)
    return f"{mantissa}e{exponent:+d}"


def _short(number: float, precision: int) -> str:
    if number == 0:
        return "0"

    significant = precision or 1
    mantissa, exponent = _scientific_parts(number, significant - 1)
    if exponent < -6 or exponent >= significant:
        return f"{_strip_fraction_zeros(mantissa)}e{exponent:+d}"
    return _strip_fraction_zeros(_fixed(number, significant - 1 - exponent))


def _non_finite(number: float) -> str:
    return "Infinity" if number > 0 else "-Infinity"


def render_float(value: Any, conversion: ConversionSpecification, config: FormatterConfig) -> str:
    """Render ``value`` in fixed (``f``), scientific (``e``) or short (``g``) notation.

    Without a precision ``f`` and ``e`` print ``config.float_precision``
    fractional digits and ``g`` keeps that many significant digits. Rounding
    works on the exact binary value and sends ties away from zero, so ``%.0f``
    of ``2.5`` is ``3``. Exponents carry no zero padding: ``1.000000e+2``.
    """

    number = parse_float(value)
    precision = config.float_precision if conversion.precision is None else conversion.precision
    type_specifier = conversion.type_specifier

    if not math.isfinite(number):
        text = _non_finite(number)
    elif type_specifier is TypeSpecifier.FLOAT:
        text = _fixed(number, precision)
    elif type_specifier in (TypeSpecifier.FLOAT_SCIENTIFIC, TypeSpecifier.FLOAT_SCIENTIFIC_UPPERCASE):
        text = _exponential(number, precision)
    else:
        text = _short(number, precision)

    if type_specifier.is_uppercase:
        text = text.upper()
    return _add_sign(number, text, conversion)


RENDERERS: Mapping[TypeSpecifier, Renderer] = MappingProxyType(
    {
        TypeSpecifier.STRING: render_string,
        TypeSpecifier.INTEGER_DECIMAL: render_integer_decimal,
        TypeSpecifier.INTEGER: render_integer_decimal,
        TypeSpecifier.INTEGER_BINARY: render_integer_base,
        TypeSpecifier.INTEGER_ASCII_CHARACTER: render_integer_base,
        TypeSpecifier.INTEGER_OCTAL: render_integer_base,
        TypeSpecifier.INTEGER_UNSIGNED_DECIMAL: render_integer_base,
        TypeSpecifier.INTEGER_HEXADECIMAL: render_integer_base,
        TypeSpecifier.INTEGER_HEXADECIMAL_UPPERCASE: render_integer_base,
        TypeSpecifier.FLOAT_SCIENTIFIC: render_float,
        TypeSpecifier.FLOAT_SCIENTIFIC_UPPERCASE: render_float,
        TypeSpecifier.FLOAT: render_float,
        TypeSpecifier.FLOAT_SHORT: render_float,
        TypeSpecifier.FLOAT_SHORT_UPPERCASE: render_float,
    }
)
