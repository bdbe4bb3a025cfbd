"""Additive, table-driven template scoring.

score = base(content type x category)
      + placeholder alignment bonuses
      - placeholder mismatch penalties
      - length/category friction
clamped to [0, 100].

Every number comes from the ScoringConfig passed in, so identical
(profile, template, config) inputs always reproduce identical scores.
"""

import logging
from collections.abc import Mapping

from src.schemas.content_schema import ContentLength, ContentProfile, ContentType
from src.schemas.scoring_config import ScoringConfig
from src.schemas.template_schema import PlaceholderRole, Template, TemplateCategory
from src.layout_matcher.template_categorizer import categorize_template

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100


def base_score(
    content_type: ContentType,
    category: TemplateCategory,
    table: Mapping[ContentType, Mapping[TemplateCategory, int]],
) -> int:
    """Look up the base score for a (content type, category) pair.

    Content types without a row use the general row; a category missing
    from the selected row scores 0.
    """
    row = table.get(content_type)
    if row is None:
        row = table.get(ContentType.GENERAL, {})
    return row.get(category, 0)


def score_template(
    profile: ContentProfile,
    template: Template,
    config: ScoringConfig | None = None,
) -> int:
    """Compute the 0-100 compatibility score of a template for a content profile."""
    config = config or ScoringConfig()
    weights = config.weights
    category = categorize_template(template)

    has_title_slot = template.has_role(PlaceholderRole.TITLE)
    has_body_slot = template.has_role(PlaceholderRole.BODY)
    has_image_slot = template.has_role(PlaceholderRole.IMAGE)

    score = base_score(profile.content_type, category, config.base_scores)

    # Alignment bonuses
    if profile.has_title and has_title_slot:
        score += weights.title_bonus
    if profile.has_body and has_body_slot:
        score += weights.body_bonus
    if profile.has_image and has_image_slot:
        score += weights.image_bonus

    # Reserved slots the content cannot fill
    if not profile.has_title and has_title_slot:
        score -= weights.missing_title_penalty
    if not profile.has_body and has_body_slot:
        score -= weights.missing_body_penalty

    # Length/category friction
    if profile.content_length == ContentLength.LONG and category == TemplateCategory.TITLE_ONLY:
        score -= weights.long_content_title_only_penalty
    if (
        profile.content_length == ContentLength.SHORT
        and category == TemplateCategory.TITLE_AND_TWO_COLUMNS
    ):
        score -= weights.short_content_two_columns_penalty

    clamped = max(MIN_SCORE, min(MAX_SCORE, score))
    logger.debug(
        f"Scored '{template.display_name}' ({category.value}) "
        f"for {profile.content_type.value} content: {clamped}"
    )
    return clamped
