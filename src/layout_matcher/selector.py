"""Template selection: rank scored templates and explain the choice."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from src.schemas.content_schema import Content, ContentProfile, ContentType
from src.schemas.match_schema import (
    AlternativeNote,
    Confidence,
    MatchExplanation,
    MatchResult,
)
from src.schemas.scoring_config import ConfidenceThresholds, ScoringConfig
from src.schemas.template_schema import PlaceholderRole, Template
from src.layout_matcher.content_classifier import classify_content
from src.layout_matcher.edit_planner import plan_placeholder_edits
from src.layout_matcher.scoring import score_template
from src.layout_matcher.template_categorizer import categorize_template

logger = logging.getLogger(__name__)


DEFAULT_SOURCE = "candidate templates"


class EmptyCandidateSet(ValueError):
    """Raised when there are no templates to score."""

    def __init__(self, source: str | None = None):
        self.source = source or DEFAULT_SOURCE
        super().__init__(f"No templates available to score from '{self.source}'")


def confidence_for(score: int, thresholds: ConfidenceThresholds | None = None) -> Confidence:
    """Map the best score to a confidence level."""
    thresholds = thresholds or ConfidenceThresholds()
    if score > thresholds.high:
        return Confidence.HIGH
    if score > thresholds.medium:
        return Confidence.MEDIUM
    return Confidence.LOW


def generate_reasoning(profile: ContentProfile, template: Template) -> str:
    """Human-readable trace of why a template was selected."""
    reasons = []
    category = categorize_template(template)

    if profile.content_type != ContentType.GENERAL:
        reasons.append(
            f"Content type '{profile.content_type.value}' best matches {category.value} layout"
        )
    if profile.has_title and template.has_role(PlaceholderRole.TITLE):
        reasons.append("Layout has title placeholder for provided title")
    if profile.has_body and template.has_role(PlaceholderRole.BODY):
        reasons.append("Layout has body placeholder for provided content")
    if profile.has_image:
        reasons.append("Layout can accommodate image content")

    reasons.append(f"Score: {template.score or 0}/100")
    return "; ".join(reasons)


def rank_templates(
    profile: ContentProfile,
    templates: Sequence[Template],
    config: ScoringConfig | None = None,
) -> list[Template]:
    """Score every template onto a copy and sort best-first.

    The sort is stable, so equal scores keep their extraction order. The
    caller's templates are left untouched.
    """
    config = config or ScoringConfig()
    scored = [
        t.model_copy(update={
            "score": score_template(profile, t, config),
            "category": categorize_template(t),
        })
        for t in templates
    ]
    scored.sort(key=lambda t: t.score, reverse=True)
    return scored


def find_best_template(
    content: Content | Mapping[str, Any] | None,
    templates: Sequence[Template],
    config: ScoringConfig | None = None,
    source: str | None = None,
) -> MatchResult:
    """Pick the best template for a piece of content.

    Args:
        content: Slide content (validated Content or a raw mapping).
        templates: Candidate templates, in extraction order.
        config: Scoring configuration; defaults to ScoringConfig().
        source: Name of the template collection, reported on failure;
            defaults to DEFAULT_SOURCE.

    Returns:
        MatchResult with the best template, up to two alternatives, the
        content profile, reasoning, confidence and the placeholder edit plan.

    Raises:
        EmptyCandidateSet: if ``templates`` is empty.
    """
    if not templates:
        raise EmptyCandidateSet(source)

    config = config or ScoringConfig()
    content = Content.from_raw(content)
    profile = classify_content(content, config.classifier)
    ranked = rank_templates(profile, templates, config)

    best = ranked[0]
    alternatives = ranked[1:1 + config.max_alternatives]

    logger.info(
        f"Selected '{best.display_name}' (score {best.score}) for "
        f"{profile.content_type.value} content out of {len(ranked)} templates"
    )
    return MatchResult(
        best_template=best,
        alternatives=alternatives,
        profile=profile,
        reasoning=generate_reasoning(profile, best),
        confidence=confidence_for(best.score, config.confidence),
        edits=plan_placeholder_edits(content, best),
    )


def explain_match(result: MatchResult) -> MatchExplanation:
    """Expand a MatchResult into content factors, layout factors and runner-up notes."""
    profile = result.profile
    best = result.best_template

    content_factors = []
    if profile.has_title:
        content_factors.append("Contains title text")
    if profile.has_body:
        content_factors.append("Contains body text")
    if profile.has_image:
        content_factors.append("Contains image content")
    if profile.has_bullets:
        content_factors.append("Contains bullet points")
    content_factors.append(f"Content type: {profile.content_type.value}")
    content_factors.append(f"Content length: {profile.content_length.value}")

    layout_factors = [
        f"Layout: {best.display_name}",
        f"Placeholders: {', '.join(p.type for p in best.placeholders)}",
        f"Compatibility score: {best.score or 0}/100",
    ]

    matches = []
    if profile.has_title and best.has_role(PlaceholderRole.TITLE):
        matches.append("title content matches title placeholder")
    if profile.has_body and best.has_role(PlaceholderRole.BODY):
        matches.append("body content matches body placeholder")
    if profile.has_image and best.has_role(PlaceholderRole.IMAGE):
        matches.append("image content matches picture placeholder")
    if matches:
        matching_reason = f"Selected because {' and '.join(matches)}"
    else:
        matching_reason = "Selected as best available option based on scoring algorithm"

    alternatives = [
        AlternativeNote(
            display_name=alt.display_name,
            score=alt.score or 0,
            reason=f"Would work {'well' if (alt.score or 0) > 50 else 'adequately'} for this content",
        )
        for alt in result.alternatives
    ]

    return MatchExplanation(
        content_factors=content_factors,
        layout_factors=layout_factors,
        matching_reason=matching_reason,
        alternatives=alternatives,
    )
