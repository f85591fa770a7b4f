"""printf style template formatting."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable

from ..config import FormatterConfig
from ..utils import coerce_to_string
from .align import align_and_pad
from .renderers import RENDERERS
from .replacement_index import ReplacementIndex
from .specification import LITERAL_PERCENT, ConversionSpecification
from .validate import validate

__all__ = [
    "Formatter",
    "sprintf",
    "vprintf",
]


LOGGER = logging.getLogger(__name__)

_CONVERSION_SPECIFICATION = re.compile(
    r"(?P<literal>%%)"
    r"|%(?:(?P<position>\d+)\$)?"
    r"(?P<sign>\+)?"
    r"(?P<padding>[ 0]|'.)?"
    r"(?P<alignment>-)?"
    r"(?P<width>\d+)?"
    r"(?:\.(?P<precision>\d+))?"
    r"(?P<type>[bcdiouxXeEfgGs])?",
    re.ASCII,
)


def _optional_int(text: str | None) -> int | None:
    return None if text is None else int(text)


def _conversion_from_match(match: re.Match[str]) -> ConversionSpecification:
    if match.group("literal") is not None:
        return ConversionSpecification(percent=LITERAL_PERCENT)

    return ConversionSpecification(
        sign_specifier=match.group("sign"),
        padding_specifier=match.group("padding"),
        alignment_specifier=match.group("alignment"),
        width=_optional_int(match.group("width")),
        precision=_optional_int(match.group("precision")),
        type_specifier=match.group("type"),
    )


@dataclass(slots=True)
class Formatter:
    """Apply printf style templates such as ``"%'*10s %+d %.2f"``.

    A directive is ``%`` followed, in this order, by an optional ``N$``
    argument position, ``+`` to force a sign, a fill flag (``0``, a space or
    ``'`` plus any character), ``-`` for left alignment, a width, ``.`` plus a
    precision and one of the type letters ``s d i b c o u x X e E f g G``.
    ``%%`` produces a literal percent sign.
    """

    config: FormatterConfig = field(default_factory=FormatterConfig)

    def sprintf(self, template: Any = None, *replacements: Any) -> str:
        """Render ``template`` with ``replacements`` as its arguments.

        Parameters
        ----------
        template:
            The format string. ``None`` and ``""`` produce ``""``.
        replacements:
            Values consumed by the directives, sequentially or via ``N$``.

        Raises
        ------
        UnknownTypeSpecifierError
            When a directive has no supported type letter, including a lone
            trailing ``%``.
        TooFewArgumentsError
            When a directive refers past the last argument.
        InvalidArgumentPositionError
            When a directive uses the position ``0$``.
        """

        return self.vprintf(template, replacements)

    def vprintf(self, template: Any = None, replacements: Iterable[Any] | None = None) -> str:
        """Same as :meth:`sprintf` with the arguments given as one collection."""

        text = coerce_to_string(template)
        if not text:
            return text

        arguments = tuple(replacements or ())
        replacement_index = ReplacementIndex()

        def substitute(match: re.Match[str]) -> str:
            conversion = _conversion_from_match(match)
            if conversion.is_percent_literal():
                return "%"

            position = _optional_int(match.group("position"))
            index = replacement_index.resolve(position)
            validate(index, len(arguments), conversion)
            LOGGER.debug(
                "directive text=%r position=%s index=%s type=%s",
                match.group(0),
                position,
                index,
                conversion.type_specifier.value,
            )
            return self.compute(arguments[index], conversion)

        return _CONVERSION_SPECIFICATION.sub(substitute, text)

    def compute(self, replacement: Any, conversion: ConversionSpecification) -> str:
        """Render one argument for ``conversion`` and pad it to the requested width."""

        render = RENDERERS[conversion.type_specifier]
        rendered = render(replacement, conversion, self.config)
        return align_and_pad(rendered, conversion, self.config.padding)


_DEFAULT_FORMATTER = Formatter()


def sprintf(template: Any = None, *replacements: Any) -> str:
    """Format ``template`` with the default :class:`Formatter`.

    >>> sprintf("%s costs $%.2f", "Coffee", 2)
    'Coffee costs $2.00'
    >>> sprintf("%2$s %1$s", "A", "B")
    'B A'
    """

    return _DEFAULT_FORMATTER.sprintf(template, *replacements)


def vprintf(template: Any = None, replacements: Iterable[Any] | None = None) -> str:
    """Format ``template`` with ``replacements`` given as a single sequence.

    >>> vprintf("%d %d %d", [1, 0, -100])
    '1 0 -100'
    """

    return _DEFAULT_FORMATTER.vprintf(template, replacements)
