"""
Typography value conversions.

Turns resolved token values into the numbers and names platform code
needs: point sizes, line-height multiples, kerning in points, and one of
four font weights. Nothing here raises on odd input; unknown weights fall
back to regular and unparsable numbers come back as NaN.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from .errors import ErrorContext, ReferenceResolutionError
from .models import FontWeight, TokenValue, TypographyStyle, TypographyToken
from .resolver import ReferenceResolver

logger = logging.getLogger(__name__)

_NUMBER_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# Suffix appended to the family name to get the font's PostScript name
_FONT_FILE_SUFFIXES: dict[FontWeight, str] = {
    FontWeight.BOLD: "Bold",
    FontWeight.SEMIBOLD: "SemiBold",
    FontWeight.MEDIUM: "Medium",
    FontWeight.REGULAR: "Regular",
}


def strip_reference_braces(value: TokenValue) -> str:
    """Remove every ``{`` and ``}`` from a value."""
    return str(value).replace("{", "").replace("}", "")


def parse_number(value: TokenValue) -> float:
    """
    Parse the leading number of a value.

    ``"16px"`` gives 16.0, ``"-0.5"`` gives -0.5. Values with no numeric
    prefix give NaN rather than raising.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    match = _NUMBER_PREFIX_RE.match(value)
    if not match:
        return math.nan
    return float(match.group(1))


def _is_percentage(value: TokenValue) -> bool:
    return isinstance(value, str) and value.endswith("%")


def _recognised_weight(weight: TokenValue) -> FontWeight | None:
    try:
        return FontWeight(strip_reference_braces(weight).lower())
    except ValueError:
        return None


def map_weight(weight: TokenValue) -> FontWeight:
    """Map a weight name to a FontWeight, case-insensitively; unknown names are regular."""
    recognised = _recognised_weight(weight)
    if recognised is None:
        logger.warning("Unrecognised font weight %r, falling back to regular", weight)
        return FontWeight.REGULAR
    return recognised


def font_file_name(family: TokenValue, weight: TokenValue) -> str:
    """
    Derive the custom font's name from family and weight.

    >>> font_file_name("Pretendard", "SemiBold")
    'Pretendard-SemiBold'

    Unrecognised weights leave the family name bare.
    """
    family_name = strip_reference_braces(family)
    recognised = _recognised_weight(weight)
    if recognised is None:
        return family_name
    return f"{family_name}-{_FONT_FILE_SUFFIXES[recognised]}"


def convert_percentage(value: TokenValue) -> float:
    """Convert ``"135%"`` to 1.35; anything else is parsed as a plain number."""
    if _is_percentage(value):
        return parse_number(value[:-1]) / 100.0
    return parse_number(value)


def compute_letter_spacing(font_size: float, value: TokenValue) -> float:
    """
    Convert letter spacing to points.

    Percentages are relative to the font size, so ``"10%"`` at 16pt is
    1.6pt. Other values are taken as points already.
    """
    if _is_percentage(value):
        percentage = parse_number(value[:-1])
        return (percentage / 100) * font_size
    return parse_number(value)


def _resolve_fields(token: TypographyToken, resolver: ReferenceResolver) -> dict[str, TokenValue]:
    """Resolve each field value, tagging reference errors with token and field."""
    resolved: dict[str, TokenValue] = {}
    for field, value in token.field_values().items():
        try:
            resolved[field] = resolver.resolve(value)
        except ReferenceResolutionError as e:
            chain = e.context.chain if e.context else ()
            context = ErrorContext(token=token.name, field=field, chain=chain)
            raise type(e)(e.message, context) from e
    return resolved


def resolve_style(token: TypographyToken, resolver: ReferenceResolver) -> TypographyStyle:
    """Resolve every field of *token* through *resolver* and convert the results."""
    fields = _resolve_fields(token, resolver)
    font_family = fields["fontFamily"]
    font_weight = fields["fontWeight"]
    font_size = parse_number(fields["fontSize"])
    line_height = convert_percentage(fields["lineHeight"])
    letter_spacing = compute_letter_spacing(font_size, fields["letterSpacing"])

    style = TypographyStyle(
        name=token.name,
        font_family_name=strip_reference_braces(font_family),
        font_weight_name=strip_reference_braces(font_weight).lower(),
        font_size_points=font_size,
        line_height_multiple=line_height,
        letter_spacing_points=letter_spacing,
        platform_weight=map_weight(font_weight),
        font_file_name=font_file_name(font_family, font_weight),
    )
    logger.debug(
        "Resolved %s: %s %.2fpt lh=%s kern=%s",
        token.name,
        style.font_file_name,
        style.font_size_points,
        style.line_height_multiple,
        style.letter_spacing_points,
    )
    return style


def resolve_styles(
    tokens: Sequence[TypographyToken],
    resolver: ReferenceResolver,
    max_workers: int | None = None,
) -> list[TypographyStyle]:
    """
    Resolve a sequence of tokens, keeping their order.

    With ``max_workers`` set, tokens are resolved on a thread pool, which
    only pays off when the resolver is slow (e.g. remote).
    """
    if not max_workers or len(tokens) < 2:
        return [resolve_style(token, resolver) for token in tokens]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        # map() yields in submission order regardless of completion order
        return list(pool.map(lambda token: resolve_style(token, resolver), tokens))
