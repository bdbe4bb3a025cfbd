"""Tests for template extraction from raw presentation descriptions."""

import pytest

from src.layout_matcher.template_extractor import extract_placeholders, extract_templates
from src.schemas.template_schema import PlaceholderRole, TemplateCategory


def _element(object_id, ph_type, index=0, geometry=True):
    element = {
        "objectId": object_id,
        "shape": {"shapeType": "TEXT_BOX", "placeholder": {"type": ph_type, "index": index}},
    }
    if geometry:
        element["size"] = {
            "width": {"magnitude": 3000000, "unit": "EMU"},
            "height": {"magnitude": 500000, "unit": "EMU"},
        }
        element["transform"] = {"scaleX": 1, "scaleY": 1, "translateX": 311700, "translateY": 744575}
    return element


def _presentation():
    return {
        "presentationId": "deck-1",
        "layouts": [
            {
                "objectId": "p2",
                "layoutProperties": {"name": "TITLE_AND_BODY", "displayName": "Title and body"},
                "pageElements": [
                    _element("p2_i0", "TITLE"),
                    _element("p2_i1", "BODY", index=1),
                    {"objectId": "p2_i2", "shape": {"shapeType": "RECTANGLE"}},
                ],
            },
            {
                "objectId": "p3",
                "layoutProperties": {"displayName": "Title only"},
                "pageElements": [_element("p3_i0", "TITLE")],
            },
            {
                "objectId": "p4",
                "layoutProperties": {"displayName": "Blank"},
            },
        ],
    }


class TestExtractTemplates:
    @pytest.mark.parametrize("raw", [None, [], "deck", 42, {}, {"layouts": None}, {"layouts": "x"}])
    def test_malformed_input_yields_empty(self, raw):
        assert extract_templates(raw) == []

    def test_zero_layouts(self):
        assert extract_templates({"layouts": []}) == []

    def test_preserves_order(self):
        templates = extract_templates(_presentation())
        assert [t.id for t in templates] == ["p2", "p3", "p4"]
        assert [t.display_name for t in templates] == ["Title and body", "Title only", "Blank"]

    def test_assigns_categories(self):
        templates = extract_templates(_presentation())
        assert [t.category for t in templates] == [
            TemplateCategory.TITLE_AND_BODY,
            TemplateCategory.TITLE_ONLY,
            TemplateCategory.BLANK,
        ]
        assert all(t.score is None for t in templates)

    def test_ignores_non_placeholder_elements(self):
        template = extract_templates(_presentation())[0]
        assert [p.id for p in template.placeholders] == ["p2_i0", "p2_i1"]
        assert [p.role for p in template.placeholders] == [PlaceholderRole.TITLE, PlaceholderRole.BODY]
        assert template.placeholders[1].index == 1

    def test_layout_without_page_elements(self):
        template = extract_templates(_presentation())[2]
        assert template.placeholders == []

    def test_missing_names_and_ids(self):
        raw = {"layouts": [{"pageElements": [_element("x", "TITLE")]}, {"objectId": "b", "layoutProperties": {}}]}
        templates = extract_templates(raw)
        assert templates[0].id == "layout-0"
        assert templates[0].display_name == "Unnamed Layout"
        assert templates[1].display_name == "Unnamed Layout"

    def test_falls_back_to_layout_name(self):
        raw = {"layouts": [{"objectId": "a", "layoutProperties": {"name": "SECTION_HEADER"}}]}
        template = extract_templates(raw)[0]
        assert template.display_name == "SECTION_HEADER"
        assert template.category == TemplateCategory.SECTION_HEADER

    def test_skips_malformed_entries(self):
        raw = {"layouts": ["oops", {"objectId": "ok", "layoutProperties": {"displayName": "Blank"}}]}
        templates = extract_templates(raw)
        assert [t.id for t in templates] == ["ok"]

    @pytest.mark.parametrize("props, expected", [
        ({"displayName": 5}, "Unnamed Layout"),
        ({"displayName": ["Blank"]}, "Unnamed Layout"),
        ({"displayName": 5, "name": "TITLE_ONLY"}, "TITLE_ONLY"),
        ({"displayName": None, "name": {"en": "Blank"}}, "Unnamed Layout"),
    ])
    def test_non_string_names_fall_back(self, props, expected):
        templates = extract_templates({"layouts": [{"objectId": "a", "layoutProperties": props}]})
        assert [t.display_name for t in templates] == [expected]


class TestExtractPlaceholders:
    def test_geometry_captured(self):
        placeholders = extract_placeholders({"pageElements": [_element("a", "TITLE")]})
        bounds = placeholders[0].bounds
        assert bounds.x == 311700
        assert bounds.y == 744575
        assert bounds.width == 3000000
        assert bounds.height == 500000

    def test_geometry_requires_size_and_transform(self):
        element = _element("a", "TITLE")
        del element["transform"]
        placeholders = extract_placeholders({"pageElements": [element, _element("b", "BODY", geometry=False)]})
        assert placeholders[0].bounds is None
        assert placeholders[1].bounds is None

    def test_missing_translate_defaults_to_zero(self):
        element = _element("a", "TITLE")
        element["transform"] = {"scaleX": 1}
        bounds = extract_placeholders({"pageElements": [element]})[0].bounds
        assert bounds.x == 0
        assert bounds.y == 0

    def test_centered_title_and_missing_index(self):
        element = {"objectId": "c", "shape": {"placeholder": {"type": "CENTERED_TITLE"}}}
        placeholder = extract_placeholders({"pageElements": [element]})[0]
        assert placeholder.role == PlaceholderRole.TITLE
        assert placeholder.type == "CENTERED_TITLE"
        assert placeholder.index == 0

    def test_picture_placeholder(self):
        placeholder = extract_placeholders({"pageElements": [_element("p", "PICTURE")]})[0]
        assert placeholder.role == PlaceholderRole.IMAGE
