"""Rule-based content classification.

Derives a ContentProfile from a Content object. The content type is decided
by the first matching rule, in this fixed priority:

  1. agenda: "agenda" in title or body
  2. quote: "quote" in title, or a double quotation mark in body
  3. section: "section" or "chapter" in title
  4. image-focused: image present and no body text
  5. list-heavy: more bullets than the list-heavy threshold
  6. comparison: comparison flag, or "vs"/"versus" in title
  7. closing: "thank" or "conclusion" in title
  8. general

All text tests are case-insensitive substring checks.
"""

from collections.abc import Mapping
from typing import Any

from src.schemas.content_schema import Content, ContentLength, ContentProfile, ContentType
from src.schemas.scoring_config import ClassifierThresholds

_QUOTE_MARKS = ('"', "“", "”")


def _length_bucket(body: str, thresholds: ClassifierThresholds) -> ContentLength:
    if len(body) > thresholds.long_body_chars:
        return ContentLength.LONG
    if len(body) > thresholds.medium_body_chars:
        return ContentLength.MEDIUM
    return ContentLength.SHORT


def _image_count(content: Content) -> int:
    if content.images:
        return len(content.images)
    return 1 if content.image_url else 0


def determine_content_type(
    content: Content,
    has_image: bool,
    has_body: bool,
    bullet_count: int,
    thresholds: ClassifierThresholds,
) -> ContentType:
    """Apply the priority-ordered tagging rules; the first hit wins."""
    title = content.title.lower()
    body = content.body.lower()

    if "agenda" in title or "agenda" in body:
        return ContentType.AGENDA
    if "quote" in title or any(mark in body for mark in _QUOTE_MARKS):
        return ContentType.QUOTE
    if "section" in title or "chapter" in title:
        return ContentType.SECTION
    if has_image and not has_body:
        return ContentType.IMAGE_FOCUSED
    if bullet_count > thresholds.list_heavy_bullets:
        return ContentType.LIST_HEAVY
    if content.comparison or "vs" in title or "versus" in title:
        return ContentType.COMPARISON
    if "thank" in title or "conclusion" in title:
        return ContentType.CLOSING
    return ContentType.GENERAL


def classify_content(
    content: Content | Mapping[str, Any] | None,
    thresholds: ClassifierThresholds | None = None,
) -> ContentProfile:
    """Build the ContentProfile for a piece of content.

    Accepts a validated Content or a raw mapping; absent fields default to
    false / short / general.
    """
    content = Content.from_raw(content)
    thresholds = thresholds or ClassifierThresholds()

    has_title = bool(content.title.strip())
    has_body = bool(content.body.strip())
    image_count = _image_count(content)
    bullet_count = len(content.bullets)

    return ContentProfile(
        has_title=has_title,
        has_body=has_body,
        has_image=image_count > 0,
        has_bullets=bullet_count > 0,
        has_multiple_columns=len(content.columns) > 1,
        content_length=_length_bucket(content.body, thresholds),
        content_type=determine_content_type(
            content, image_count > 0, has_body, bullet_count, thresholds
        ),
        image_count=image_count,
        bullet_count=bullet_count,
    )
