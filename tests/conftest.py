"""Shared fixtures for style-tokens tests."""

from __future__ import annotations

from typing import Any

import pytest

from style_tokens.core.dictionary import TokenDictionary
from style_tokens.core.models import TypographyToken


@pytest.fixture
def token_values() -> dict[str, Any]:
    """Reference table for the base tokens the typography tokens point at."""
    return {
        "font.family.base": "Pretendard",
        "font.weight.bold": "Bold",
        "font.weight.semibold": "SemiBold",
        "font.weight.regular": "Regular",
        "font.size.title1": "28",
        "font.size.body": "16",
        "font.line-height.title": "135%",
        "font.line-height.body": "150%",
        "font.letter-spacing.tight": "-2%",
        "font.letter-spacing.none": "0",
    }


@pytest.fixture
def title_token() -> TypographyToken:
    """Title1Bold with literal values."""
    return TypographyToken(
        name="Title1Bold",
        fontFamily="Pretendard",
        fontWeight="Bold",
        fontSize="28",
        lineHeight="135%",
        letterSpacing="-2%",
    )


@pytest.fixture
def referencing_tokens() -> list[TypographyToken]:
    """Typography tokens whose fields all point at base tokens."""
    return [
        TypographyToken(
            name="Title1Bold",
            fontFamily="{font.family.base}",
            fontWeight="{font.weight.bold}",
            fontSize="{font.size.title1}",
            lineHeight="{font.line-height.title}",
            letterSpacing="{font.letter-spacing.tight}",
        ),
        TypographyToken(
            name="Body1Regular",
            fontFamily="{font.family.base}",
            fontWeight="{font.weight.regular}",
            fontSize="{font.size.body}",
            lineHeight="{font.line-height.body}",
            letterSpacing="{font.letter-spacing.none}",
        ),
    ]


@pytest.fixture
def dictionary(
    referencing_tokens: list[TypographyToken], token_values: dict[str, Any]
) -> TokenDictionary:
    """Dictionary mixing typography tokens with a color token."""
    color = TypographyToken(
        name="PrimaryColor",
        category="color",
        fontFamily="",
        fontWeight="",
        fontSize="0",
        lineHeight="0",
        letterSpacing="0",
    )
    tokens = [referencing_tokens[0], color, referencing_tokens[1]]
    return TokenDictionary.from_values(tokens, token_values)
