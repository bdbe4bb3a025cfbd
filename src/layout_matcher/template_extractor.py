"""Extract normalized Template records from a raw presentation description.

The raw description follows the Slides API presentation resource shape:

    {"layouts": [
        {"objectId": "...",
         "layoutProperties": {"displayName": "Title and body"},
         "pageElements": [
             {"objectId": "...",
              "size": {"width": {"magnitude": ...}, "height": {"magnitude": ...}},
              "transform": {"translateX": ..., "translateY": ...},
              "shape": {"placeholder": {"type": "TITLE", "index": 0}}}]}]}

Local .pptx files are converted into the same shape by
``src.parsers.pptx_layouts``. Missing or malformed input is treated as "no
templates" and never raises.
"""

import logging
from collections.abc import Mapping
from typing import Any

from src.schemas.template_schema import Bounds, Placeholder, Template, role_for_type
from src.layout_matcher.template_categorizer import categorize_template

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_NAME = "Unnamed Layout"


def _number(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return 0.0


def _magnitude(dimension: Any) -> float:
    if isinstance(dimension, Mapping):
        return _number(dimension.get("magnitude"))
    return 0.0


def _extract_bounds(element: Mapping) -> Bounds | None:
    """Geometry is only captured when both size and transform are present."""
    size = element.get("size")
    transform = element.get("transform")
    if not isinstance(size, Mapping) or not isinstance(transform, Mapping):
        return None
    return Bounds(
        x=_number(transform.get("translateX")),
        y=_number(transform.get("translateY")),
        width=_magnitude(size.get("width")),
        height=_magnitude(size.get("height")),
    )


def extract_placeholders(layout: Mapping) -> list[Placeholder]:
    """Build placeholders from page elements that declare a placeholder role."""
    elements = layout.get("pageElements")
    if not isinstance(elements, list):
        return []

    placeholders: list[Placeholder] = []
    for position, element in enumerate(elements):
        if not isinstance(element, Mapping):
            continue
        shape = element.get("shape")
        if not isinstance(shape, Mapping):
            continue
        info = shape.get("placeholder")
        if not isinstance(info, Mapping):
            continue

        raw_type = str(info.get("type") or "NONE")
        index = info.get("index")
        placeholders.append(
            Placeholder(
                id=str(element.get("objectId") or f"placeholder-{position}"),
                type=raw_type,
                role=role_for_type(raw_type),
                index=index if isinstance(index, int) else 0,
                bounds=_extract_bounds(element),
            )
        )
    return placeholders


def _display_name(layout: Mapping) -> str:
    props = layout.get("layoutProperties")
    if not isinstance(props, Mapping):
        return DEFAULT_DISPLAY_NAME
    for key in ("displayName", "name"):
        value = props.get(key)
        if isinstance(value, str) and value:
            return value
    return DEFAULT_DISPLAY_NAME


def extract_templates(raw_presentation: Any) -> list[Template]:
    """Parse a raw presentation description into an ordered list of Templates.

    Input order is preserved and each template is categorized once here.
    Absent or malformed input yields an empty list.
    """
    if not isinstance(raw_presentation, Mapping):
        logger.debug("Presentation description is not a mapping; no templates extracted")
        return []

    layouts = raw_presentation.get("layouts")
    if not isinstance(layouts, list):
        logger.debug("Presentation has no layouts list; no templates extracted")
        return []

    templates: list[Template] = []
    for position, layout in enumerate(layouts):
        if not isinstance(layout, Mapping):
            logger.warning(f"Skipping malformed layout entry at position {position}")
            continue

        template = Template(
            id=str(layout.get("objectId") or f"layout-{position}"),
            display_name=_display_name(layout),
            placeholders=extract_placeholders(layout),
        )
        template.category = categorize_template(template)
        templates.append(template)

    logger.info(f"Extracted {len(templates)} templates from {len(layouts)} layouts")
    return templates
