"""
style-tokens - platform typography code from design tokens.

Resolves typography tokens from a design-token dictionary and emits
Swift/UIKit font and attributed-string extensions.

Usage:
    from style_tokens import TokenDictionary, format_dictionary

    dictionary = TokenDictionary.from_values(tokens, values)
    swift = format_dictionary("swift/typography", dictionary, {"imports": ["UIKit"]})
"""

from __future__ import annotations

from ._version import get_version
from .core import (
    FontWeight,
    FormatOptions,
    IdentityResolver,
    MappingResolver,
    ReferenceResolver,
    TokenDictionary,
    TypographyStyle,
    TypographyToken,
)
from .core.errors import (
    CircularReferenceError,
    FormatError,
    FormatNotFoundError,
    OptionsError,
    ReferenceResolutionError,
    StyleTokensError,
    UnresolvedReferenceError,
)
from .formats import (
    SWIFT_TYPOGRAPHY,
    FormatRegistry,
    SwiftTypographyFormat,
    emit,
    format_dictionary,
    get_format,
    register_format,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "emit",
    "format_dictionary",
    "get_format",
    "register_format",
    "FormatRegistry",
    "SwiftTypographyFormat",
    "SWIFT_TYPOGRAPHY",
    "TokenDictionary",
    "TypographyToken",
    "TypographyStyle",
    "FontWeight",
    "FormatOptions",
    "ReferenceResolver",
    "IdentityResolver",
    "MappingResolver",
    "StyleTokensError",
    "ReferenceResolutionError",
    "UnresolvedReferenceError",
    "CircularReferenceError",
    "FormatError",
    "FormatNotFoundError",
    "OptionsError",
]
