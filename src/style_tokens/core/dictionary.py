"""
In-memory token dictionary.

Pairs an ordered token list with the resolver that dereferences its
values. This is the shape formats receive when invoked through the
registry.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .models import TypographyToken
from .resolver import IdentityResolver, MappingResolver, ReferenceResolver


class TokenDictionary:
    """
    Ordered tokens plus a reference resolver.

    Attributes:
        all_tokens: Every token, in source order
        resolver: Resolver used for all token field values
    """

    def __init__(
        self,
        tokens: Iterable[TypographyToken | Mapping[str, Any]],
        resolver: ReferenceResolver | None = None,
    ):
        self.all_tokens: list[TypographyToken] = [
            t if isinstance(t, TypographyToken) else TypographyToken.model_validate(t)
            for t in tokens
        ]
        self.resolver = resolver or IdentityResolver()

    @classmethod
    def from_values(
        cls,
        tokens: Iterable[TypographyToken | Mapping[str, Any]],
        values: Mapping[str, Any],
        strict: bool = True,
    ) -> TokenDictionary:
        """Build a dictionary whose references resolve against a path -> value table."""
        return cls(tokens, MappingResolver(values, strict=strict))

    def filter(self, category: str) -> list[TypographyToken]:
        """Tokens in *category*, order preserved."""
        return [t for t in self.all_tokens if t.category == category]

    def __len__(self) -> int:
        return len(self.all_tokens)
