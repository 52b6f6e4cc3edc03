"""
Reference resolvers.

A token field may hold a literal (``"Pretendard"``, ``28``) or a reference
to another token (``"{font.size.title1}"``). The emitter hands every field
to a ReferenceResolver and only ever converts what comes back.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from .errors import make_reference_error
from .models import TokenValue

logger = logging.getLogger(__name__)

# A value that is nothing but one reference, e.g. "{font.family.base}"
_REFERENCE_RE = re.compile(r"^\{([^{}]+)\}$")


@runtime_checkable
class ReferenceResolver(Protocol):
    """Dereferences a token field value to its literal value."""

    def resolve(self, value: TokenValue) -> TokenValue: ...


def reference_path(value: TokenValue) -> str | None:
    """Return the dotted path if *value* is a whole-value reference."""
    if not isinstance(value, str):
        return None
    match = _REFERENCE_RE.match(value.strip())
    return match.group(1).strip() if match else None


class IdentityResolver:
    """Resolver for token sets whose values are already literal."""

    def resolve(self, value: TokenValue) -> TokenValue:
        return value


class MappingResolver:
    """
    Resolve references against an in-memory table of token values.

    Keys are dotted token paths. A reference is followed until a literal
    comes back, so chains like ``{title1.size} -> {size.xl} -> 28`` work.

    Args:
        values: Token path -> value (which may itself be a reference)
        strict: Raise on unknown paths instead of returning the value as-is
    """

    def __init__(self, values: Mapping[str, TokenValue], strict: bool = True):
        self._values = dict(values)
        self.strict = strict

    def resolve(self, value: TokenValue) -> TokenValue:
        chain: list[str] = []
        current = value
        while (path := reference_path(current)) is not None:
            if path in chain:
                chain.append(path)
                raise make_reference_error(
                    f"Circular reference at '{path}'", tuple(chain), circular=True
                )
            chain.append(path)
            if path not in self._values:
                if not self.strict:
                    logger.debug("Leaving unknown reference %s unresolved", current)
                    return current
                raise make_reference_error(f"Unknown token reference '{path}'", tuple(chain))
            current = self._values[path]
        return current
