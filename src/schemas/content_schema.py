"""Pydantic models for slide content and its derived profile.

``Content`` is the caller-supplied draft for a single slide. Every field is
optional: absent or null values fall back to the defaults below, so a
partial payload never fails validation. ``ContentProfile`` is the read-only
classification derived from it by the content classifier.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

_TRUE_WORDS = {"true", "yes", "y", "on", "1"}
_FALSE_WORDS = {"false", "no", "n", "off", "0", ""}


def _bool_like(value: Any) -> Optional[bool]:
    """Interpret a loosely typed flag; None when it cannot be read as one."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    return None


class ContentType(str, Enum):
    """Classification tag assigned to a piece of content."""

    AGENDA = "agenda"
    QUOTE = "quote"
    SECTION = "section"
    IMAGE_FOCUSED = "image-focused"
    LIST_HEAVY = "list-heavy"
    COMPARISON = "comparison"
    CLOSING = "closing"
    GENERAL = "general"


class ContentLength(str, Enum):
    """Body length bucket."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class TextStyle(BaseModel):
    """Optional text styling directives for one text role."""

    model_config = ConfigDict(extra="ignore")

    font_size: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("font_size", "fontSize"),
        description="Font size in points",
    )
    color: Optional[str] = Field(default=None, description="'#rrggbb' or 'rgb(r, g, b)'")
    bold: Optional[bool] = None
    italic: Optional[bool] = None

    @field_validator("font_size", mode="before")
    @classmethod
    def _coerce_font_size(cls, value: Any) -> Optional[float]:
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                return None
        return None

    @field_validator("color", mode="before")
    @classmethod
    def _coerce_color(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("bold", "italic", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> Optional[bool]:
        return _bool_like(value)


class TextFormatting(BaseModel):
    """Formatting directives keyed by text role."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[TextStyle] = None
    body: Optional[TextStyle] = None

    @field_validator("title", "body", mode="before")
    @classmethod
    def _drop_unreadable_style(cls, value: Any) -> Any:
        if isinstance(value, (Mapping, TextStyle)):
            return value
        return None


class Content(BaseModel):
    """Draft content for one slide.

    Defaults: text fields are empty strings, list fields are empty,
    ``image_url`` and ``formatting`` are None, ``comparison`` is False.
    Camel-case keys (``imageUrl``, ``bulletPoints``) are accepted.
    """

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    body: str = ""
    subtitle: str = ""
    image_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("image_url", "imageUrl")
    )
    images: list[str] = Field(default_factory=list)
    bullets: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("bullets", "bulletPoints", "bullet_points"),
    )
    columns: list[str] = Field(default_factory=list)
    comparison: bool = Field(default=False, description="Explicit side-by-side comparison flag")
    formatting: Optional[TextFormatting] = None

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @field_validator("title", "body", "subtitle", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if isinstance(value, str):
            return value
        return str(value)

    @field_validator("images", "bullets", "columns", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            return [value]
        if not isinstance(value, (list, tuple)):
            return []
        return [item if isinstance(item, str) else str(item) for item in value if item is not None]

    @field_validator("image_url", mode="before")
    @classmethod
    def _coerce_image_url(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("comparison", mode="before")
    @classmethod
    def _coerce_comparison(cls, value: Any) -> bool:
        return _bool_like(value) is True

    @field_validator("formatting", mode="before")
    @classmethod
    def _drop_unreadable_formatting(cls, value: Any) -> Any:
        if isinstance(value, (Mapping, TextFormatting)):
            return value
        return None

    @classmethod
    def from_raw(cls, raw: "Content | Mapping[str, Any] | None") -> "Content":
        """Validate caller input once at the engine boundary."""
        if isinstance(raw, Content):
            return raw
        if not isinstance(raw, Mapping):
            return cls()
        return cls.model_validate(raw)


class ContentProfile(BaseModel):
    """Read-only classification snapshot of a Content object."""

    model_config = ConfigDict(frozen=True)

    has_title: bool = False
    has_body: bool = False
    has_image: bool = False
    has_bullets: bool = False
    has_multiple_columns: bool = False
    content_length: ContentLength = ContentLength.SHORT
    content_type: ContentType = ContentType.GENERAL
    image_count: int = 0
    bullet_count: int = 0
