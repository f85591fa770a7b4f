"""Lenient numeric coercion for directive arguments."""

from __future__ import annotations

import logging
import math
import numbers
import re
from typing import Any

from ..utils import coerce_to_string

__all__ = ["parse_float", "parse_int"]


LOGGER = logging.getLogger(__name__)

_INTEGER_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|Infinity))")


def parse_int(value: Any) -> int:
    """Interpret ``value`` as an integer.

    Numbers are truncated toward zero and non-finite ones give ``0``.
    Anything else is read as text and its leading ``[+-]digits`` run is used,
    so ``"15NN"`` gives ``15`` and ``"1.5e+3"`` gives ``1``. Values without
    such a run give ``0``.
    """

    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        try:
            return int(value)
        except (OverflowError, ValueError):
            LOGGER.debug("parse_int value=%r fallback=0", value)
            return 0

    match = _INTEGER_PREFIX.match(coerce_to_string(value))
    if match is None:
        LOGGER.debug("parse_int value=%r fallback=0", value)
        return 0
    return int(match.group(1))


def parse_float(value: Any) -> float:
    """Interpret ``value`` as a float using its leading numeric text.

    ``"-15.67TUU"`` gives ``-15.67`` and ``"Infinity"`` gives ``inf``. Numbers
    too large for a float become signed infinity. NaN and unparsable text give
    ``0.0``; negative zero is normalised to ``0.0``.
    """

    if isinstance(value, numbers.Real):
        try:
            number = float(value)
        except OverflowError:
            LOGGER.debug("parse_float value=%r fallback=inf", value)
            number = math.inf if value > 0 else -math.inf
    else:
        match = _FLOAT_PREFIX.match(coerce_to_string(value))
        number = float(match.group(1)) if match else math.nan

    if math.isnan(number):
        LOGGER.debug("parse_float value=%r fallback=0", value)
        return 0.0
    return number + 0.0
