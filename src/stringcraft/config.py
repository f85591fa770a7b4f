"""Configuration shared by the formatter and the command line interface."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Defaults applied by :class:`~stringcraft.format.Formatter`.

    Attributes
    ----------
    float_precision:
        Digits used by the ``f``, ``e`` and ``E`` conversions, and significant
        digits used by ``g`` and ``G``, when a directive gives no precision.
    integer_bits:
        Width of the unsigned representation that ``b``, ``o``, ``x``, ``X``,
        ``u`` and ``c`` reduce their argument to. Negative values therefore
        render in two's complement, e.g. ``-1`` as ``ffffffff`` for 32 bits.
    padding:
        Fill character used for width padding when a directive does not name
        one with ``0``, a space or ``'c``.
    """

    float_precision: int = 6
    integer_bits: int = 32
    padding: str = " "

    def __post_init__(self) -> None:
        if self.float_precision < 0:
            raise ValueError("float_precision must not be negative")
        if self.integer_bits <= 0:
            raise ValueError("integer_bits must be positive")
        if len(self.padding) != 1:
            raise ValueError("padding must be a single character")

    @property
    def integer_mask(self) -> int:
        return (1 << self.integer_bits) - 1

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "FormatterConfig":
        """Build a :class:`FormatterConfig` from loosely typed ``values``.

        Keys must be field names; ``None`` values fall back to the defaults.
        Numeric fields accept strings such as ``"8"``.
        """

        known = {item.name for item in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"unknown formatter option(s): {', '.join(unknown)}")

        options: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if key in {"float_precision", "integer_bits"}:
                try:
                    options[key] = int(value)
                except (TypeError, ValueError) as exc:
                    raise ValueError(f"{key} must be an integer, got {value!r}") from exc
            else:
                options[key] = str(value)

        return cls(**options)

    def as_dict(self) -> Mapping[str, Any]:
        return asdict(self)
