"""Tests for reference resolvers."""

from __future__ import annotations

import pytest

from style_tokens.core.errors import (
    CircularReferenceError,
    ReferenceResolutionError,
    UnresolvedReferenceError,
)
from style_tokens.core.resolver import (
    IdentityResolver,
    MappingResolver,
    ReferenceResolver,
    reference_path,
)


class TestReferencePath:
    def test_whole_value_reference(self) -> None:
        assert reference_path("{font.size.title1}") == "font.size.title1"
        assert reference_path(" { font.size } ") == "font.size"

    def test_literals_are_not_references(self) -> None:
        assert reference_path("Pretendard") is None
        assert reference_path("135%") is None
        assert reference_path(28) is None
        assert reference_path("{a} {b}") is None


class TestIdentityResolver:
    def test_returns_value_unchanged(self) -> None:
        resolver = IdentityResolver()
        assert resolver.resolve("{Pretendard}") == "{Pretendard}"
        assert resolver.resolve(28) == 28

    def test_satisfies_protocol(self) -> None:
        assert isinstance(IdentityResolver(), ReferenceResolver)
        assert isinstance(MappingResolver({}), ReferenceResolver)


class TestMappingResolver:
    @pytest.fixture
    def resolver(self) -> MappingResolver:
        return MappingResolver(
            {
                "size.xl": 28,
                "title1.size": "{size.xl}",
                "family.base": "Pretendard",
                "loop.a": "{loop.b}",
                "loop.b": "{loop.a}",
            }
        )

    def test_literal_passes_through(self, resolver: MappingResolver) -> None:
        assert resolver.resolve("Pretendard") == "Pretendard"
        assert resolver.resolve("-2%") == "-2%"

    def test_direct_reference(self, resolver: MappingResolver) -> None:
        assert resolver.resolve("{family.base}") == "Pretendard"

    def test_chained_reference(self, resolver: MappingResolver) -> None:
        assert resolver.resolve("{title1.size}") == 28

    def test_idempotent(self, resolver: MappingResolver) -> None:
        once = resolver.resolve("{title1.size}")
        assert resolver.resolve(once) == once

    def test_unknown_reference_raises(self, resolver: MappingResolver) -> None:
        with pytest.raises(UnresolvedReferenceError) as exc_info:
            resolver.resolve("{size.missing}")

        assert "size.missing" in str(exc_info.value)
        assert isinstance(exc_info.value, ReferenceResolutionError)

    def test_unknown_reference_non_strict(self) -> None:
        resolver = MappingResolver({}, strict=False)
        assert resolver.resolve("{Pretendard}") == "{Pretendard}"

    def test_cycle_raises(self, resolver: MappingResolver) -> None:
        with pytest.raises(CircularReferenceError) as exc_info:
            resolver.resolve("{loop.a}")

        assert "loop.a -> loop.b -> loop.a" in str(exc_info.value)
