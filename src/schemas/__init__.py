from .template_schema import (
    Bounds, Placeholder, PlaceholderRole, Template, TemplateCategory,
    TemplateCollection, TemplateStats, role_for_type,
)
from .content_schema import Content, ContentLength, ContentProfile, ContentType, TextFormatting, TextStyle
from .match_schema import (
    AlternativeNote, Confidence, MatchExplanation, MatchResult,
    PlaceholderEdit, RgbColor, TextStylePatch,
)
from .scoring_config import ClassifierThresholds, ConfidenceThresholds, ScoringConfig, ScoringWeights

__all__ = [
    "Bounds",
    "Placeholder",
    "PlaceholderRole",
    "Template",
    "TemplateCategory",
    "TemplateCollection",
    "TemplateStats",
    "role_for_type",
    "Content",
    "ContentLength",
    "ContentProfile",
    "ContentType",
    "TextFormatting",
    "TextStyle",
    "AlternativeNote",
    "Confidence",
    "MatchExplanation",
    "MatchResult",
    "PlaceholderEdit",
    "RgbColor",
    "TextStylePatch",
    "ClassifierThresholds",
    "ConfidenceThresholds",
    "ScoringConfig",
    "ScoringWeights",
]
