"""Conversion specification parsed from one ``%`` directive."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["LITERAL_PERCENT", "ConversionSpecification", "TypeSpecifier"]


LITERAL_PERCENT = "%%"


class TypeSpecifier(str, Enum):
    """Type letters understood by the formatter."""

    STRING = "s"
    INTEGER_DECIMAL = "d"
    INTEGER = "i"
    INTEGER_BINARY = "b"
    INTEGER_ASCII_CHARACTER = "c"
    INTEGER_OCTAL = "o"
    INTEGER_UNSIGNED_DECIMAL = "u"
    INTEGER_HEXADECIMAL = "x"
    INTEGER_HEXADECIMAL_UPPERCASE = "X"
    FLOAT_SCIENTIFIC = "e"
    FLOAT_SCIENTIFIC_UPPERCASE = "E"
    FLOAT = "f"
    FLOAT_SHORT = "g"
    FLOAT_SHORT_UPPERCASE = "G"

    @property
    def is_uppercase(self) -> bool:
        return self.value.isupper()


class ConversionSpecification(BaseModel):
    """Flags, width, precision and type of a single directive.

    ``padding_specifier`` keeps the raw template text: ``"0"``, ``" "`` or a
    quote followed by the custom fill character.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    percent: str = Field("%", description="Leading percent text, '%%' for an escaped percent sign.")
    sign_specifier: str | None = Field(None, description="'+' to force a sign on non-negative numbers.")
    padding_specifier: str | None = Field(None, description="Fill flag as written in the template.")
    alignment_specifier: str | None = Field(None, description="'-' to left-justify within the width.")
    width: int | None = Field(None, ge=0, description="Minimum length of the rendered value.")
    precision: int | None = Field(None, ge=0, description="Type dependent precision.")
    type_specifier: TypeSpecifier | None = Field(None, description="Conversion type letter.")

    def is_percent_literal(self) -> bool:
        return self.percent == LITERAL_PERCENT

    @property
    def forces_sign(self) -> bool:
        return self.sign_specifier == "+"

    @property
    def left_aligned(self) -> bool:
        return self.alignment_specifier == "-"

    def padding_character(self, default: str = " ") -> str:
        """Return the fill character, unwrapping the ``'c`` custom form."""

        padding = self.padding_specifier
        if padding is None:
            return default
        if len(padding) == 2 and padding[0] == "'":
            return padding[1]
        return padding
