"""Plan the placeholder-level edits that render content into a template.

The plan is abstract: each PlaceholderEdit names a placeholder and what goes
into it. Turning the plan into concrete presentation-service requests is the
caller's job.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from src.schemas.content_schema import Content, TextStyle
from src.schemas.match_schema import PlaceholderEdit, RgbColor, TextStylePatch
from src.schemas.template_schema import PlaceholderRole, Template

logger = logging.getLogger(__name__)

BULLET_PREFIX = "• "

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")
_RGB_RE = re.compile(r"rgb\((\d+),\s*(\d+),\s*(\d+)\)")


def parse_color(color: str) -> RgbColor:
    """Parse '#rrggbb' or 'rgb(r, g, b)' into 0-1 channels. Anything else is black."""
    color = color.strip()
    match = _HEX_RE.match(color) or _RGB_RE.search(color)
    if match is None:
        logger.debug(f"Unrecognized color '{color}', using black")
        return RgbColor()

    base = 16 if color.startswith("#") else 10
    red, green, blue = (min(255, int(part, base)) / 255 for part in match.groups())
    return RgbColor(red=red, green=green, blue=blue)


def _style_patch(style: TextStyle) -> tuple[TextStylePatch, list[str]]:
    """Resolve a TextStyle and list the fields it actually sets."""
    fields: list[str] = []
    if style.font_size:
        fields.append("fontSize")
    if style.color:
        fields.append("foregroundColor")
    if style.bold is not None:
        fields.append("bold")
    if style.italic is not None:
        fields.append("italic")

    patch = TextStylePatch(
        font_size=style.font_size or None,
        color=parse_color(style.color) if style.color else None,
        bold=style.bold,
        italic=style.italic,
    )
    return patch, fields


def _body_text(content: Content) -> str:
    if content.bullets:
        return "\n".join(f"{BULLET_PREFIX}{bullet}" for bullet in content.bullets)
    return content.body


def plan_placeholder_edits(
    content: Content | Mapping[str, Any] | None,
    template: Template,
) -> list[PlaceholderEdit]:
    """Return the ordered edits needed to render ``content`` into ``template``.

    Order: title, body (bullets replace body text), subtitle, image, extra
    columns into the remaining body placeholders, then text styling.
    """
    content = Content.from_raw(content)
    titles = template.placeholders_for(PlaceholderRole.TITLE)
    bodies = template.placeholders_for(PlaceholderRole.BODY)
    subtitles = template.placeholders_for(PlaceholderRole.SUBTITLE)
    images = template.placeholders_for(PlaceholderRole.IMAGE)

    edits: list[PlaceholderEdit] = []
    free_bodies = list(bodies)

    if content.title.strip() and titles:
        edits.append(PlaceholderEdit(
            kind="insert_text", placeholder_id=titles[0].id,
            role=PlaceholderRole.TITLE, text=content.title,
        ))

    body_text = _body_text(content)
    if body_text.strip() and free_bodies:
        target = free_bodies.pop(0)
        edits.append(PlaceholderEdit(
            kind="insert_text", placeholder_id=target.id,
            role=PlaceholderRole.BODY, text=body_text,
        ))

    if content.subtitle.strip() and subtitles:
        edits.append(PlaceholderEdit(
            kind="insert_text", placeholder_id=subtitles[0].id,
            role=PlaceholderRole.SUBTITLE, text=content.subtitle,
        ))

    image_url = content.image_url or (content.images[0] if content.images else None)
    if image_url and images:
        edits.append(PlaceholderEdit(
            kind="replace_image", placeholder_id=images[0].id,
            role=PlaceholderRole.IMAGE, image_url=image_url,
        ))

    for column_text, target in zip(content.columns, free_bodies):
        edits.append(PlaceholderEdit(
            kind="insert_text", placeholder_id=target.id,
            role=PlaceholderRole.BODY, text=column_text,
        ))
    if len(content.columns) > len(free_bodies):
        logger.debug(
            f"'{template.display_name}' has room for {len(free_bodies)} of "
            f"{len(content.columns)} columns; extra columns dropped"
        )

    formatting = content.formatting
    if formatting is not None:
        for role, style, targets in (
            (PlaceholderRole.TITLE, formatting.title, titles),
            (PlaceholderRole.BODY, formatting.body, bodies),
        ):
            if style is None:
                continue
            patch, fields = _style_patch(style)
            if not fields:
                continue
            for target in targets:
                edits.append(PlaceholderEdit(
                    kind="update_text_style", placeholder_id=target.id,
                    role=role, style=patch, fields=fields,
                ))

    logger.debug(f"Planned {len(edits)} edits for '{template.display_name}'")
    return edits
