"""
Token models, reference resolution and typography conversions.

Everything here is platform-neutral; target syntax lives in
style_tokens.formats.
"""

from style_tokens.core.conversions import (
    compute_letter_spacing,
    convert_percentage,
    font_file_name,
    map_weight,
    parse_number,
    resolve_style,
    resolve_styles,
    strip_reference_braces,
)
from style_tokens.core.dictionary import TokenDictionary
from style_tokens.core.models import (
    EmissionContext,
    FontWeight,
    FormatOptions,
    TypographyStyle,
    TypographyToken,
)
from style_tokens.core.resolver import IdentityResolver, MappingResolver, ReferenceResolver

__all__ = [
    "TokenDictionary",
    "TypographyToken",
    "TypographyStyle",
    "FontWeight",
    "FormatOptions",
    "EmissionContext",
    "ReferenceResolver",
    "IdentityResolver",
    "MappingResolver",
    "compute_letter_spacing",
    "convert_percentage",
    "font_file_name",
    "map_weight",
    "parse_number",
    "resolve_style",
    "resolve_styles",
    "strip_reference_braces",
]
