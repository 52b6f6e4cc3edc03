"""
Format registry.

Formats are callables ``formatter(dictionary, options) -> str`` registered
under a name such as ``swift/typography``. A build step looks the name up
and hands over its token dictionary; code that already holds a dictionary
can call format_dictionary() directly. Both paths end in the same emitter.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from style_tokens.core.dictionary import TokenDictionary
from style_tokens.core.errors import FormatError, FormatNotFoundError
from style_tokens.core.models import TYPOGRAPHY_CATEGORY, FormatOptions
from style_tokens.formats.swift import SwiftTypographyFormat

logger = logging.getLogger(__name__)

Formatter = Callable[[TokenDictionary, FormatOptions], str]

SWIFT_TYPOGRAPHY = "swift/typography"


class FormatRegistry:
    """Name -> formatter table."""

    def __init__(self) -> None:
        self._formats: dict[str, Formatter] = {}

    def register(self, name: str, formatter: Formatter, replace: bool = False) -> None:
        if not callable(formatter):
            raise FormatError(f"Format '{name}' is not callable")
        if name in self._formats and not replace:
            raise FormatError(f"Format '{name}' is already registered")
        self._formats[name] = formatter
        logger.debug("Registered format %s", name)

    def get(self, name: str) -> Formatter:
        try:
            return self._formats[name]
        except KeyError:
            available = ", ".join(sorted(self._formats)) or "none"
            raise FormatNotFoundError(
                f"Unknown format '{name}' (available: {available})"
            ) from None

    def names(self) -> list[str]:
        return sorted(self._formats)

    def __contains__(self, name: object) -> bool:
        return name in self._formats

    def format(
        self,
        name: str,
        dictionary: TokenDictionary,
        options: FormatOptions | dict[str, Any] | None = None,
    ) -> str:
        """Run the named format over *dictionary*."""
        return self.get(name)(dictionary, FormatOptions.coerce(options))


def swift_typography_formatter(dictionary: TokenDictionary, options: FormatOptions) -> str:
    """Emit Swift typography for the dictionary's typography-category tokens."""
    tokens = dictionary.filter(TYPOGRAPHY_CATEGORY)
    skipped = len(dictionary) - len(tokens)
    if skipped:
        logger.debug("Skipping %d non-typography tokens", skipped)
    return SwiftTypographyFormat(resolver=dictionary.resolver).emit(tokens, options)


def create_default_registry() -> FormatRegistry:
    """A registry with the built-in formats."""
    registry = FormatRegistry()
    registry.register(SWIFT_TYPOGRAPHY, swift_typography_formatter)
    return registry


_default_registry = create_default_registry()


def register_format(name: str, formatter: Formatter, replace: bool = False) -> None:
    """Register *formatter* in the default registry."""
    _default_registry.register(name, formatter, replace=replace)


def get_format(name: str) -> Formatter:
    """Look up a formatter in the default registry."""
    return _default_registry.get(name)


def format_dictionary(
    name: str,
    dictionary: TokenDictionary,
    options: FormatOptions | dict[str, Any] | None = None,
) -> str:
    """Run a format from the default registry directly."""
    return _default_registry.format(name, dictionary, options)
