"""Tests for Pydantic schema models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.schemas.content_schema import Content, ContentProfile, ContentType
from src.schemas.scoring_config import ScoringConfig, ScoringWeights
from src.schemas.template_schema import (
    Placeholder,
    PlaceholderRole,
    Template,
    TemplateCategory,
    TemplateCollection,
    role_for_type,
)


class TestContentSchema:
    def test_defaults(self):
        content = Content()
        assert content.title == ""
        assert content.body == ""
        assert content.image_url is None
        assert content.bullets == []
        assert content.columns == []
        assert content.comparison is False
        assert content.formatting is None

    def test_from_raw_none(self):
        assert Content.from_raw(None) == Content()

    def test_from_raw_non_mapping(self):
        assert Content.from_raw(["not", "content"]) == Content()

    def test_from_raw_returns_existing_instance(self):
        content = Content(title="Hi")
        assert Content.from_raw(content) is content

    def test_camel_case_aliases(self):
        content = Content.from_raw({
            "imageUrl": "https://example.com/a.png",
            "bulletPoints": ["One", "Two"],
        })
        assert content.image_url == "https://example.com/a.png"
        assert content.bullets == ["One", "Two"]

    def test_nulls_and_unknown_keys_fall_back(self):
        content = Content.from_raw({"title": None, "bullets": None, "layoutHint": "wide"})
        assert content.title == ""
        assert content.bullets == []

    def test_loose_values_coerced(self):
        content = Content.from_raw({"title": 2024, "bullets": "Only one", "columns": ["a", None, 3]})
        assert content.title == "2024"
        assert content.bullets == ["Only one"]
        assert content.columns == ["a", "3"]

    def test_formatting_aliases(self):
        content = Content.from_raw({"formatting": {"title": {"fontSize": 32, "bold": True}}})
        assert content.formatting.title.font_size == 32
        assert content.formatting.title.bold is True
        assert content.formatting.body is None

    def test_profile_is_frozen(self):
        profile = ContentProfile()
        assert profile.content_type == ContentType.GENERAL
        with pytest.raises(ValidationError):
            profile.has_title = True


class TestTemplateSchema:
    def test_role_for_type(self):
        assert role_for_type("TITLE") == PlaceholderRole.TITLE
        assert role_for_type("CENTERED_TITLE") == PlaceholderRole.TITLE
        assert role_for_type("body") == PlaceholderRole.BODY
        assert role_for_type("OBJECT") == PlaceholderRole.BODY
        assert role_for_type("SUBTITLE") == PlaceholderRole.SUBTITLE
        assert role_for_type("PICTURE") == PlaceholderRole.IMAGE
        assert role_for_type("SLIDE_NUMBER") == PlaceholderRole.OTHER
        assert role_for_type(None) == PlaceholderRole.OTHER

    def test_template_defaults(self):
        template = Template(id="t1")
        assert template.display_name == "Unnamed Layout"
        assert template.placeholders == []
        assert template.category is None
        assert template.score is None

    def test_placeholders_for_sorted_by_index(self):
        template = Template(
            id="t1",
            placeholders=[
                Placeholder(id="b2", type="BODY", role=PlaceholderRole.BODY, index=2),
                Placeholder(id="t", type="TITLE", role=PlaceholderRole.TITLE, index=0),
                Placeholder(id="b1", type="BODY", role=PlaceholderRole.BODY, index=1),
            ],
        )
        assert [p.id for p in template.placeholders_for(PlaceholderRole.BODY)] == ["b1", "b2"]
        assert template.has_role(PlaceholderRole.TITLE)
        assert not template.has_role(PlaceholderRole.IMAGE)

    def test_collection_save_load(self, tmp_path):
        collection = TemplateCollection(
            source="deck.pptx",
            templates=[
                Template(id="a", display_name="Blank", category=TemplateCategory.BLANK),
                Template(id="b", display_name="Title only", category=TemplateCategory.TITLE_ONLY),
            ],
        )
        path = tmp_path / "templates.json"
        collection.save(path)
        loaded = TemplateCollection.load(path)
        assert loaded.source == "deck.pptx"
        assert [t.id for t in loaded.templates] == ["a", "b"]
        assert loaded.find_by_category(TemplateCategory.BLANK)[0].id == "a"


class TestScoringConfig:
    def test_defaults(self):
        config = ScoringConfig()
        assert config.weights.title_bonus == 20
        assert config.classifier.long_body_chars == 500
        assert config.classifier.list_heavy_bullets == 5
        assert config.base_scores[ContentType.COMPARISON][TemplateCategory.TITLE_AND_TWO_COLUMNS] == 40
        assert ContentType.AGENDA not in config.base_scores
        assert config.max_alternatives == 2

    def test_custom_weights_keep_other_defaults(self):
        config = ScoringConfig(weights=ScoringWeights(title_bonus=30))
        assert config.weights.title_bonus == 30
        assert config.weights.body_bonus == 15

    def test_yaml_roundtrip(self, tmp_path):
        config = ScoringConfig(name="Strict", weights=ScoringWeights(image_bonus=25))
        path = tmp_path / "scoring.yaml"
        config.to_yaml(path)
        loaded = ScoringConfig.from_yaml(path)
        assert loaded == config

    def test_load_default_yaml(self):
        path = Path(__file__).parent.parent / "scoring" / "default.yaml"
        assert ScoringConfig.from_yaml(path) == ScoringConfig()

    def test_missing_yaml(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ScoringConfig.from_yaml(tmp_path / "missing.yaml")
