"""
Swift/UIKit typography format.

Generates a Swift file with:
1. A UIFont.Weight helper mapping weight names to UIKit weights
2. One UIFont factory per typography token
3. A String helper building NSAttributedString from a font, line height
   multiple and kerning
4. One ``<name>Attributed`` accessor per token
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from style_tokens.core.conversions import resolve_styles
from style_tokens.core.models import (
    EmissionContext,
    FontWeight,
    FormatOptions,
    TypographyToken,
)
from style_tokens.core.resolver import IdentityResolver, ReferenceResolver
from style_tokens.formats.renderer import TemplateRenderer, create_jinja_env

logger = logging.getLogger(__name__)

PLATFORM = "ios-swift"
TEMPLATE_NAME = "swift/typography.swift.jinja"

# UIFont.Weight member for each weight
UIKIT_WEIGHTS: dict[FontWeight, str] = {
    FontWeight.BOLD: ".bold",
    FontWeight.SEMIBOLD: ".semibold",
    FontWeight.MEDIUM: ".medium",
    FontWeight.REGULAR: ".regular",
}


def _uikit_weight_filter(weight: FontWeight) -> str:
    return UIKIT_WEIGHTS.get(weight, UIKIT_WEIGHTS[FontWeight.REGULAR])


class SwiftTypographyFormat:
    """
    Emit UIKit typography extensions from typography tokens.

    The format is stateless between calls: every emit() resolves each
    token afresh, so the same tokens and options always give the same text.

    Args:
        resolver: Resolver applied to every token field (literal values by default)
        max_workers: Resolve tokens on a thread pool of this size
        renderer: Template renderer, mainly for tests or template overrides
    """

    def __init__(
        self,
        resolver: ReferenceResolver | None = None,
        max_workers: int | None = None,
        renderer: TemplateRenderer | None = None,
    ):
        self.resolver = resolver or IdentityResolver()
        self.max_workers = max_workers
        self.renderer = renderer or TemplateRenderer(create_jinja_env())
        self.renderer.env.filters.setdefault("uikit_weight", _uikit_weight_filter)

    def emit(
        self,
        tokens: Sequence[TypographyToken],
        options: FormatOptions | dict[str, Any] | None = None,
    ) -> str:
        """
        Generate the Swift source for *tokens*.

        Args:
            tokens: Typography tokens in output order
            options: FormatOptions or a mapping of option keys

        Returns:
            Complete Swift file content
        """
        opts = FormatOptions.coerce(options)
        tokens = list(tokens)
        context = EmissionContext(
            tokens=tokens,
            options=opts,
            platform=PLATFORM,
            destination=opts.destination,
        )

        styles = resolve_styles(tokens, self.resolver, max_workers=self.max_workers)
        logger.debug("Emitting %d typography styles for %s", len(styles), PLATFORM)

        return self.renderer.render(
            TEMPLATE_NAME,
            header_lines=opts.header_lines(context),
            imports=opts.imports or [],
            access=opts.resolved_access_level,
            weights=list(FontWeight),
            default_weight=FontWeight.REGULAR,
            styles=styles,
        )


def emit(
    tokens: Sequence[TypographyToken],
    options: FormatOptions | dict[str, Any] | None = None,
    resolver: ReferenceResolver | None = None,
) -> str:
    """Generate Swift typography source for *tokens*. See SwiftTypographyFormat."""
    return SwiftTypographyFormat(resolver=resolver).emit(tokens, options)
