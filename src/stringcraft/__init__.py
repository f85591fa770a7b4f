"""String manipulation helpers and a printf style formatter.

The package exposes ``sprintf``/``vprintf`` together with small, independent
functions for case conversion, trimming, padding, grapheme aware character
access, substring search, counting, HTML escaping, tag stripping and
word wrapping. :func:`chain` and :func:`wrap` make the functions callable as
methods on a wrapped value.
"""

from __future__ import annotations

from .case import (
    camel_case,
    capitalize,
    decapitalize,
    kebab_case,
    lower_case,
    snake_case,
    swap_case,
    title_case,
    upper_case,
)
from .chop import (
    char_at,
    code_point_at,
    first,
    grapheme_at,
    last,
    prune,
    slice,
    substr,
    substring,
    truncate,
)
from .config import FormatterConfig
from .count import count, count_graphemes, count_substrings, count_where, count_words
from .escape import escape_html, escape_reg_exp, unescape_html
from .format import (
    ConversionSpecification,
    Formatter,
    InvalidArgumentPositionError,
    SprintfError,
    TooFewArgumentsError,
    TypeSpecifier,
    UnknownTypeSpecifierError,
    sprintf,
    vprintf,
)
from .index import index_of, last_index_of, search
from .manipulate import (
    insert,
    latinise,
    pad,
    pad_left,
    pad_right,
    repeat,
    replace,
    replace_all,
    reverse,
    reverse_grapheme,
    slugify,
    splice,
    trim,
    trim_left,
    trim_right,
    word_wrap,
)
from .query import (
    ends_with,
    includes,
    is_alpha,
    is_alpha_digit,
    is_blank,
    is_digit,
    is_empty,
    is_lower_case,
    is_numeric,
    is_string,
    is_upper_case,
    matches,
    starts_with,
)
from .split import chars, code_points, graphemes, split, words
from .strip import strip_tags
from .wrapper import Chain, chain, wrap

__all__ = [
    "Chain",
    "ConversionSpecification",
    "Formatter",
    "FormatterConfig",
    "InvalidArgumentPositionError",
    "SprintfError",
    "TooFewArgumentsError",
    "TypeSpecifier",
    "UnknownTypeSpecifierError",
    "camel_case",
    "capitalize",
    "chain",
    "char_at",
    "chars",
    "code_point_at",
    "code_points",
    "count",
    "count_graphemes",
    "count_substrings",
    "count_where",
    "count_words",
    "decapitalize",
    "ends_with",
    "escape_html",
    "escape_reg_exp",
    "first",
    "grapheme_at",
    "graphemes",
    "includes",
    "index_of",
    "insert",
    "is_alpha",
    "is_alpha_digit",
    "is_blank",
    "is_digit",
    "is_empty",
    "is_lower_case",
    "is_numeric",
    "is_string",
    "is_upper_case",
    "kebab_case",
    "last",
    "last_index_of",
    "latinise",
    "lower_case",
    "matches",
    "pad",
    "pad_left",
    "pad_right",
    "prune",
    "repeat",
    "replace",
    "replace_all",
    "reverse",
    "reverse_grapheme",
    "search",
    "slice",
    "slugify",
    "snake_case",
    "splice",
    "split",
    "sprintf",
    "starts_with",
    "strip_tags",
    "substr",
    "substring",
    "swap_case",
    "title_case",
    "trim",
    "trim_left",
    "trim_right",
    "truncate",
    "unescape_html",
    "upper_case",
    "vprintf",
    "word_wrap",
    "words",
    "wrap",
]

__version__ = "0.1.0"
