"""Structural categorization of slide templates.

A template's category is decided from its display name first, since an
authored name like "Title Only" is more reliable than counting placeholders
on an ambiguous layout. Only when the name carries no recognizable token is
the category inferred from the placeholder roles.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Sequence

from src.schemas.template_schema import (
    PlaceholderRole,
    Template,
    TemplateCategory,
    TemplateStats,
)

logger = logging.getLogger(__name__)

# Checked in order; the first token found in the name wins
_NAME_TOKENS: list[tuple[str, TemplateCategory]] = [
    ("title only", TemplateCategory.TITLE_ONLY),
    ("section header", TemplateCategory.SECTION_HEADER),
    ("two columns", TemplateCategory.TITLE_AND_TWO_COLUMNS),
    ("blank", TemplateCategory.BLANK),
]


def _normalize_name(display_name: str | None) -> str:
    return " ".join((display_name or "").lower().replace("_", " ").split())


def category_from_name(display_name: str | None) -> TemplateCategory | None:
    """Return the category named in a display name, if any."""
    name = _normalize_name(display_name)
    for token, category in _NAME_TOKENS:
        if token in name:
            return category
    return None


def category_from_roles(roles: Iterable[PlaceholderRole]) -> TemplateCategory:
    """Infer a category from the multiset of placeholder roles."""
    counts = Counter(roles)
    total = sum(counts.values())
    has_title = counts[PlaceholderRole.TITLE] > 0
    body_count = counts[PlaceholderRole.BODY]
    subtitle_count = counts[PlaceholderRole.SUBTITLE]

    if has_title and body_count == 0 and subtitle_count == 0:
        return TemplateCategory.TITLE_ONLY
    if has_title and body_count + subtitle_count == 1:
        return TemplateCategory.TITLE_AND_BODY
    if has_title and body_count >= 2:
        return TemplateCategory.TITLE_AND_TWO_COLUMNS
    if has_title and subtitle_count > 0:
        return TemplateCategory.SECTION_HEADER
    if total == 0:
        return TemplateCategory.BLANK
    return TemplateCategory.OTHER


def determine_category(
    display_name: str | None,
    roles: Iterable[PlaceholderRole],
) -> TemplateCategory:
    """Pure category decision from (display name, placeholder roles)."""
    named = category_from_name(display_name)
    if named is not None:
        return named
    return category_from_roles(roles)


def categorize_template(template: Template) -> TemplateCategory:
    """Return the template's category, deriving it if it was never assigned."""
    if template.category is not None:
        return template.category
    return determine_category(template.display_name, template.roles)


def categorize_templates(templates: Sequence[Template]) -> dict[TemplateCategory, list[Template]]:
    """Group templates by category, preserving input order within each group.

    Every category is present as a key, possibly with an empty list.
    """
    groups: dict[TemplateCategory, list[Template]] = {c: [] for c in TemplateCategory}
    for template in templates:
        groups[categorize_template(template)].append(template)
    return groups


def template_stats(templates: Sequence[Template]) -> TemplateStats:
    """Count templates per category and collect the placeholder types in use."""
    groups = categorize_templates(templates)
    placeholder_types = {p.type for t in templates for p in t.placeholders}
    stats = TemplateStats(
        total=len(templates),
        categories={category: len(members) for category, members in groups.items()},
        placeholder_types=sorted(placeholder_types),
    )
    logger.debug(f"Template stats: {stats.total} templates, types={stats.placeholder_types}")
    return stats
