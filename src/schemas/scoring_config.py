"""Pydantic models for matching/scoring configuration.

ScoringConfig captures every number the engine uses: classifier thresholds,
placeholder bonuses and penalties, the (content type x category) base-score
table, confidence cut-offs and the number of alternatives to return. It is
passed explicitly into the engine and never mutated there.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from .content_schema import ContentType
from .template_schema import TemplateCategory


# ---------------------------------------------------------------------------
# Base score table
# ---------------------------------------------------------------------------

def default_base_scores() -> dict[ContentType, dict[TemplateCategory, int]]:
    """Default (content type x category) base scores.

    Content types without a row (agenda, closing) use the general row.
    """
    return {
        ContentType.SECTION: {
            TemplateCategory.SECTION_HEADER: 40,
            TemplateCategory.TITLE_ONLY: 30,
            TemplateCategory.TITLE_AND_BODY: 20,
        },
        ContentType.QUOTE: {
            TemplateCategory.SECTION_HEADER: 35,
            TemplateCategory.TITLE_ONLY: 30,
            TemplateCategory.TITLE_AND_BODY: 25,
        },
        ContentType.IMAGE_FOCUSED: {
            TemplateCategory.BLANK: 40,
            TemplateCategory.TITLE_ONLY: 35,
            TemplateCategory.TITLE_AND_BODY: 20,
        },
        ContentType.COMPARISON: {
            TemplateCategory.TITLE_AND_TWO_COLUMNS: 40,
            TemplateCategory.TITLE_AND_BODY: 25,
            TemplateCategory.BLANK: 20,
        },
        ContentType.LIST_HEAVY: {
            TemplateCategory.TITLE_AND_BODY: 35,
            TemplateCategory.TITLE_AND_TWO_COLUMNS: 30,
            TemplateCategory.BLANK: 20,
        },
        ContentType.GENERAL: {
            TemplateCategory.TITLE_AND_BODY: 35,
            TemplateCategory.TITLE_ONLY: 25,
            TemplateCategory.SECTION_HEADER: 20,
            TemplateCategory.TITLE_AND_TWO_COLUMNS: 15,
            TemplateCategory.BLANK: 10,
        },
    }


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class ClassifierThresholds(BaseModel):
    """Cut-offs used by the content classifier."""

    long_body_chars: int = Field(default=500, description="Body longer than this is 'long'")
    medium_body_chars: int = Field(default=150, description="Body longer than this is at least 'medium'")
    list_heavy_bullets: int = Field(default=5, description="More bullets than this is 'list-heavy'")


class ScoringWeights(BaseModel):
    """Additive bonuses and penalties applied on top of the base score."""

    title_bonus: int = 20
    body_bonus: int = 15
    image_bonus: int = 10
    missing_title_penalty: int = 5
    missing_body_penalty: int = 5
    long_content_title_only_penalty: int = 15
    short_content_two_columns_penalty: int = 10


class ConfidenceThresholds(BaseModel):
    """Best-score cut-offs for the reported confidence level."""

    high: int = Field(default=70, description="Scores above this are 'high'")
    medium: int = Field(default=40, description="Scores above this are 'medium'")


class ScoringConfig(BaseModel):
    """Complete configuration for one matching engine setup."""

    name: str = "Default"
    classifier: ClassifierThresholds = Field(default_factory=ClassifierThresholds)
    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    confidence: ConfidenceThresholds = Field(default_factory=ConfidenceThresholds)
    base_scores: dict[ContentType, dict[TemplateCategory, int]] = Field(
        default_factory=default_base_scores
    )
    max_alternatives: int = Field(default=2, ge=0, le=2)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ScoringConfig":
        """Load scoring configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Scoring config file not found: {path}")
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    def to_yaml(self, path: str | Path) -> None:
        """Save scoring configuration to a YAML file."""
        path = Path(path)
        data = self.model_dump(mode="json")
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
