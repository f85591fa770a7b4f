"""Coercion helpers shared by the string utilities."""

from __future__ import annotations

import math
from typing import Any

__all__ = ["coerce_to_string", "coerce_to_int", "clip"]


def coerce_to_string(value: Any, default: str = "") -> str:
    """Return ``value`` as text, mapping ``None`` to ``default``."""

    if value is None:
        return default
    if isinstance(value, str):
        return value
    return str(value)


def coerce_to_int(value: Any, default: int = 0) -> int:
    if value is None:
        return default
    if isinstance(value, float) and not math.isfinite(value):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def clip(value: int, lower: int, upper: int | None = None) -> int:
    if value < lower:
        return lower
    if upper is not None and value > upper:
        return upper
    return value
