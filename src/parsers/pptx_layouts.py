"""Read slide layouts from a local .pptx file using python-pptx.

Produces the same raw presentation description the Slides API returns
(``layouts`` / ``layoutProperties`` / ``pageElements``), so a local file can
be fed straight into ``extract_templates``.
"""

from pathlib import Path
from typing import Any

from pptx.enum.shapes import PP_PLACEHOLDER

# python-pptx placeholder type -> Slides API placeholder type
_TYPE_NAMES = {
    PP_PLACEHOLDER.TITLE: "TITLE",
    PP_PLACEHOLDER.VERTICAL_TITLE: "TITLE",
    PP_PLACEHOLDER.CENTER_TITLE: "CENTERED_TITLE",
    PP_PLACEHOLDER.SUBTITLE: "SUBTITLE",
    PP_PLACEHOLDER.BODY: "BODY",
    PP_PLACEHOLDER.VERTICAL_BODY: "BODY",
    PP_PLACEHOLDER.OBJECT: "OBJECT",
    PP_PLACEHOLDER.VERTICAL_OBJECT: "OBJECT",
    PP_PLACEHOLDER.PICTURE: "PICTURE",
    PP_PLACEHOLDER.BITMAP: "PICTURE",
    PP_PLACEHOLDER.CHART: "CHART",
    PP_PLACEHOLDER.TABLE: "TABLE",
    PP_PLACEHOLDER.DATE: "DATE_AND_TIME",
    PP_PLACEHOLDER.FOOTER: "FOOTER",
    PP_PLACEHOLDER.SLIDE_NUMBER: "SLIDE_NUMBER",
    PP_PLACEHOLDER.HEADER: "HEADER",
}


def _placeholder_type_name(ph_type) -> str:
    name = _TYPE_NAMES.get(ph_type)
    if name is not None:
        return name
    return getattr(ph_type, "name", None) or "NONE"


def _layout_id(layout, fallback: str) -> str:
    """Use the layout part name (e.g. 'slideLayout3') as a stable object id."""
    try:
        return layout.part.partname.filename.rsplit(".", 1)[0]
    except AttributeError:
        return fallback


def _page_element(layout_id: str, placeholder) -> dict[str, Any]:
    fmt = placeholder.placeholder_format
    element: dict[str, Any] = {
        "objectId": f"{layout_id}:{placeholder.shape_id}",
        "shape": {
            "placeholder": {
                "type": _placeholder_type_name(fmt.type),
                "index": fmt.idx,
            }
        },
    }

    geometry = (placeholder.left, placeholder.top, placeholder.width, placeholder.height)
    if all(v is not None for v in geometry):
        left, top, width, height = (int(v) for v in geometry)
        element["size"] = {
            "width": {"magnitude": width, "unit": "EMU"},
            "height": {"magnitude": height, "unit": "EMU"},
        }
        element["transform"] = {"translateX": left, "translateY": top, "unit": "EMU"}
    return element


def read_pptx_layouts(path: str | Path) -> dict[str, Any]:
    """Describe every slide layout of every master in a .pptx file."""
    from pptx import Presentation

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if path.suffix.lower() != ".pptx":
        raise ValueError(f"Expected a .pptx file, got: {path.suffix}")

    prs = Presentation(str(path))
    layouts: list[dict[str, Any]] = []

    for master_idx, master in enumerate(prs.slide_masters):
        for layout_idx, layout in enumerate(master.slide_layouts):
            layout_id = _layout_id(layout, f"master{master_idx}-layout{layout_idx}")
            layouts.append({
                "objectId": layout_id,
                "layoutProperties": {"displayName": layout.name, "name": layout.name},
                "pageElements": [_page_element(layout_id, ph) for ph in layout.placeholders],
            })

    return {"presentationId": path.stem, "layouts": layouts}
