"""
Data models for typography tokens and emission options.

Tokens arrive from a design-token dictionary with their original,
possibly-referencing field values. A TypographyStyle is the resolved,
platform-neutral view computed from one token on each emission pass.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import OptionsError

TokenValue = Union[str, int, float]

TYPOGRAPHY_CATEGORY = "typography"
DEFAULT_ACCESS_LEVEL = "internal"


class FontWeight(StrEnum):
    """Font weights the generated code understands."""

    BOLD = "bold"
    SEMIBOLD = "semibold"
    MEDIUM = "medium"
    REGULAR = "regular"


class TypographyToken(BaseModel):
    """
    A typography token as supplied by the token source.

    Field values are the original ones, before reference resolution, so
    any of them may be a ``{path.to.token}`` reference.

    Attributes:
        name: Unique token name, used as the generated symbol name
        category: Token category (only ``typography`` is emitted)
        font_family: Family name or reference
        font_weight: Weight name or reference
        font_size: Point size or reference
        line_height: Percentage, multiplier or reference
        letter_spacing: Percentage, absolute points or reference
    """

    name: str
    category: str = TYPOGRAPHY_CATEGORY
    font_family: TokenValue = Field(alias="fontFamily")
    font_weight: TokenValue = Field(alias="fontWeight")
    font_size: TokenValue = Field(alias="fontSize")
    line_height: TokenValue = Field(alias="lineHeight")
    letter_spacing: TokenValue = Field(alias="letterSpacing")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def field_values(self) -> dict[str, TokenValue]:
        """Return the original field values keyed by their token names."""
        return {
            "fontFamily": self.font_family,
            "fontWeight": self.font_weight,
            "fontSize": self.font_size,
            "lineHeight": self.line_height,
            "letterSpacing": self.letter_spacing,
        }


class TypographyStyle(BaseModel):
    """
    Resolved typography values for one token.

    Attributes:
        name: Token name
        font_family_name: Family with reference braces stripped
        font_weight_name: Lowercased weight with braces stripped
        font_size_points: Point size
        line_height_multiple: Line height as a multiplier (1.35 for 135%)
        letter_spacing_points: Kerning in points
        platform_weight: Weight used for the system font fallback
        font_file_name: PostScript name of the custom font
    """

    name: str
    font_family_name: str
    font_weight_name: str
    font_size_points: float
    line_height_multiple: float
    letter_spacing_points: float
    platform_weight: FontWeight
    font_file_name: str

    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True)
class EmissionContext:
    """What a file header callable gets to see."""

    tokens: Sequence[TypographyToken]
    options: FormatOptions
    platform: str = "ios-swift"
    destination: str | None = None


FileHeader = Union[list[str], Callable[[EmissionContext], list[str]]]


class FormatOptions(BaseModel):
    """
    Options accepted by a format, keyed the way token build configs spell them.

    Attributes:
        file_header: Header lines, or a callable producing them
        imports: Modules to import at the top of the generated file
        access_level: Visibility keyword for generated declarations
        destination: Output file name, passed to header callables
    """

    file_header: FileHeader | None = Field(
        default=None, validation_alias=AliasChoices("fileHeader", "file_header")
    )
    imports: list[str] | None = Field(
        default=None, validation_alias=AliasChoices("imports", "import")
    )
    access_level: str | None = Field(
        default=None, validation_alias=AliasChoices("accessLevel", "access_level")
    )
    destination: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore", arbitrary_types_allowed=True)

    @field_validator("file_header", mode="before")
    @classmethod
    def _unwrap_header_text(cls, value: Any) -> Any:
        # {"text": [...]} is how build configs usually nest the header
        if isinstance(value, dict) and "text" in value:
            return value["text"]
        return value

    @property
    def resolved_access_level(self) -> str:
        return self.access_level or DEFAULT_ACCESS_LEVEL

    def header_lines(self, context: EmissionContext) -> list[str]:
        """
        Return the header lines, calling the header factory if there is one.

        Entries containing newlines are split so every line can be
        commented on its own.
        """
        if self.file_header is None:
            return []
        if callable(self.file_header):
            entries = self.file_header(context)
        else:
            entries = self.file_header
        lines: list[str] = []
        for entry in entries:
            lines.extend(str(entry).splitlines() or [""])
        return lines

    @classmethod
    def coerce(cls, options: FormatOptions | dict[str, Any] | None) -> FormatOptions:
        """Build options from a mapping, passing existing instances through."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        try:
            return cls.model_validate(options)
        except PydanticValidationError as e:
            raise OptionsError(f"Invalid format options: {e}") from e
