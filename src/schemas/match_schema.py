"""Pydantic models for matching results and placeholder edit plans."""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field

from .content_schema import ContentProfile
from .template_schema import PlaceholderRole, Template


class Confidence(str, Enum):
    """How confident the selector is in the chosen template."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RgbColor(BaseModel):
    """Color with 0.0-1.0 channels."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0


class TextStylePatch(BaseModel):
    """Resolved style values for an update_text_style edit."""

    font_size: Optional[float] = Field(default=None, description="Font size in points")
    color: Optional[RgbColor] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None


class PlaceholderEdit(BaseModel):
    """One abstract edit needed to render content into a template.

    Collaborators translate these into concrete presentation-service
    requests; the engine never issues them itself.
    """

    kind: Literal["insert_text", "replace_image", "update_text_style"]
    placeholder_id: str
    role: PlaceholderRole
    text: Optional[str] = None
    image_url: Optional[str] = None
    style: Optional[TextStylePatch] = None
    fields: list[str] = Field(
        default_factory=list,
        description="Style attributes being updated (fontSize, foregroundColor, bold, italic)",
    )


class MatchResult(BaseModel):
    """Outcome of one matching run."""

    best_template: Template
    alternatives: list[Template] = Field(default_factory=list, max_length=2)
    profile: ContentProfile
    reasoning: str
    confidence: Confidence = Confidence.LOW
    edits: list[PlaceholderEdit] = Field(default_factory=list)


class AlternativeNote(BaseModel):
    """Short summary of a runner-up template."""

    display_name: str
    score: int
    reason: str


class MatchExplanation(BaseModel):
    """Structured explanation of a match, for display or logging."""

    content_factors: list[str] = Field(default_factory=list)
    layout_factors: list[str] = Field(default_factory=list)
    matching_reason: str = ""
    alternatives: list[AlternativeNote] = Field(default_factory=list)
