"""Argument cursor for a single template application."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ReplacementIndex"]


@dataclass(slots=True)
class ReplacementIndex:
    """Track which argument the next sequential directive consumes."""

    cursor: int = 0

    def resolve(self, position: int | None = None) -> int:
        """Return the zero based argument index for a directive.

        An explicit 1-based ``position`` maps to ``position - 1`` and leaves the
        cursor alone. Without one the current cursor is consumed and advanced.
        Bounds are not checked here.
        """

        if position is not None:
            return position - 1
        index = self.cursor
        self.cursor += 1
        return index
