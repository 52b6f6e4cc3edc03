"""
Output formats for typography tokens.

- renderer.py: Jinja2 environment and literal filters
- swift.py: Swift/UIKit typography format
- registry.py: name -> formatter registry
"""

from style_tokens.formats.registry import (
    SWIFT_TYPOGRAPHY,
    FormatRegistry,
    format_dictionary,
    get_format,
    register_format,
)
from style_tokens.formats.swift import SwiftTypographyFormat, emit

__all__ = [
    "SWIFT_TYPOGRAPHY",
    "FormatRegistry",
    "SwiftTypographyFormat",
    "emit",
    "format_dictionary",
    "get_format",
    "register_format",
]
