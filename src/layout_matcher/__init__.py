"""Content-to-template matching engine.

The two boundary operations are ``extract_templates`` (raw presentation
description -> ordered Templates) and ``find_best_template`` (content +
templates -> MatchResult).
"""

from .template_extractor import extract_templates
from .template_categorizer import (
    categorize_template,
    categorize_templates,
    determine_category,
    template_stats,
)
from .content_classifier import classify_content
from .scoring import base_score, score_template
from .edit_planner import parse_color, plan_placeholder_edits
from .selector import (
    EmptyCandidateSet,
    confidence_for,
    explain_match,
    find_best_template,
    generate_reasoning,
    rank_templates,
)

__all__ = [
    "extract_templates",
    "categorize_template",
    "categorize_templates",
    "determine_category",
    "template_stats",
    "classify_content",
    "base_score",
    "score_template",
    "parse_color",
    "plan_placeholder_edits",
    "EmptyCandidateSet",
    "confidence_for",
    "explain_match",
    "find_best_template",
    "generate_reasoning",
    "rank_templates",
]
