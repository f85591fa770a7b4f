"""Width handling for rendered directive values."""

from __future__ import annotations

from ..manipulate import pad_left, pad_right
from .specification import ConversionSpecification

__all__ = ["align_and_pad"]


def align_and_pad(subject: str, conversion: ConversionSpecification, default_padding: str = " ") -> str:
    """Pad ``subject`` up to ``conversion.width``.

    Values already at least as long as the width are returned unchanged. The
    fill goes before the value unless the directive asks for left alignment.
    """

    width = conversion.width
    if width is None or len(subject) >= width:
        return subject

    padding = conversion.padding_character(default_padding)
    if conversion.left_aligned:
        return pad_right(subject, width, padding)
    return pad_left(subject, width, padding)
