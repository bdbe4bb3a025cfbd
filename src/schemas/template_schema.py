"""Pydantic models for slide templates and their placeholders."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class PlaceholderRole(str, Enum):
    """Normalized role of a placeholder slot."""

    TITLE = "title"
    BODY = "body"
    SUBTITLE = "subtitle"
    IMAGE = "image"
    OTHER = "other"


# Raw placeholder types (Slides API and python-pptx names) -> role
_ROLE_BY_TYPE: dict[str, PlaceholderRole] = {
    "TITLE": PlaceholderRole.TITLE,
    "CENTERED_TITLE": PlaceholderRole.TITLE,
    "CENTER_TITLE": PlaceholderRole.TITLE,
    "BODY": PlaceholderRole.BODY,
    "CONTENT": PlaceholderRole.BODY,
    "OBJECT": PlaceholderRole.BODY,
    "SUBTITLE": PlaceholderRole.SUBTITLE,
    "PICTURE": PlaceholderRole.IMAGE,
    "IMAGE": PlaceholderRole.IMAGE,
}


def role_for_type(placeholder_type: str | None) -> PlaceholderRole:
    """Map a raw placeholder type string to its role."""
    if not placeholder_type:
        return PlaceholderRole.OTHER
    return _ROLE_BY_TYPE.get(placeholder_type.upper(), PlaceholderRole.OTHER)


class TemplateCategory(str, Enum):
    """Structural categories a template can fall into."""

    TITLE_ONLY = "title-only"
    TITLE_AND_BODY = "title-and-body"
    TITLE_AND_TWO_COLUMNS = "title-and-two-columns"
    SECTION_HEADER = "section-header"
    BLANK = "blank"
    OTHER = "other"


class Bounds(BaseModel):
    """Placeholder geometry in source units (EMU)."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class Placeholder(BaseModel):
    """A typed slot within a template."""

    id: str
    type: str = Field(description="Raw placeholder type from the source, e.g. TITLE, BODY, PICTURE")
    role: PlaceholderRole = PlaceholderRole.OTHER
    index: int = 0
    bounds: Optional[Bounds] = None


class Template(BaseModel):
    """A reusable slide layout exposing placeholder slots.

    ``category`` is derived once when the template is extracted. ``score`` is
    only set on the scored copies produced during a matching run.
    """

    id: str
    display_name: str = "Unnamed Layout"
    placeholders: list[Placeholder] = Field(default_factory=list)
    category: Optional[TemplateCategory] = None
    score: Optional[int] = Field(default=None, ge=0, le=100)

    @property
    def roles(self) -> list[PlaceholderRole]:
        return [p.role for p in self.placeholders]

    def has_role(self, role: PlaceholderRole) -> bool:
        return any(p.role == role for p in self.placeholders)

    def placeholders_for(self, role: PlaceholderRole) -> list[Placeholder]:
        """Placeholders with the given role, ordered by placeholder index."""
        matching = [p for p in self.placeholders if p.role == role]
        return sorted(matching, key=lambda p: p.index)


class TemplateStats(BaseModel):
    """Summary counts over an extracted template collection."""

    total: int = 0
    categories: dict[TemplateCategory, int] = Field(default_factory=dict)
    placeholder_types: list[str] = Field(default_factory=list)


class TemplateCollection(BaseModel):
    """Extracted templates for one source presentation."""

    source: str = ""
    templates: list[Template] = Field(default_factory=list)

    def find_by_category(self, category: TemplateCategory) -> list[Template]:
        """Find templates in a given category."""
        return [t for t in self.templates if t.category == category]

    def save(self, path: str | Path) -> None:
        """Serialize the collection to a JSON file."""
        Path(path).write_text(self.model_dump_json(indent=2))

    @classmethod
    def load(cls, path: str | Path) -> "TemplateCollection":
        """Load a collection from a JSON file."""
        return cls.model_validate_json(Path(path).read_text())
