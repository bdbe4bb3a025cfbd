#!/usr/bin/env python3
"""Match slide content to the best template and plan the placeholder edits.

Templates can come from a Slides API presentation JSON export, a .pptx file,
or a templates JSON written by extract_templates.py.

Usage:
    python scripts/match_template.py content.json presentation.json \
        -o workspace/match.json [--scoring-config scoring/default.yaml]
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.layout_matcher import EmptyCandidateSet, explain_match, extract_templates, find_best_template
from src.parsers import load_presentation, parse_content
from src.schemas.scoring_config import ScoringConfig
from src.schemas.template_schema import TemplateCollection
from src.utils.file_utils import save_json

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def _load_templates(path: Path):
    raw = load_presentation(path)
    # Output of extract_templates.py
    if isinstance(raw, dict) and "templates" in raw:
        return TemplateCollection.model_validate(raw).templates
    return extract_templates(raw)


def main():
    parser = argparse.ArgumentParser(description="Match content to the best slide template")
    parser.add_argument("content", type=Path, help="Content file (.json, .yaml, .md, .txt)")
    parser.add_argument("templates", type=Path, help="Presentation JSON, .pptx, or templates JSON")
    parser.add_argument(
        "-o", "--output", type=Path,
        default=Path("workspace/match.json"),
        help="Output match result JSON path",
    )
    parser.add_argument(
        "--scoring-config", type=Path, default=None,
        help="Scoring config YAML (default: built-in weights)",
    )
    args = parser.parse_args()

    for label, path in (("Content", args.content), ("Templates", args.templates)):
        if not path.exists():
            print(f"Error: {label} file not found: {path}", file=sys.stderr)
            sys.exit(1)

    config = ScoringConfig.from_yaml(args.scoring_config) if args.scoring_config else ScoringConfig()

    try:
        content = parse_content(args.content)
        templates = _load_templates(args.templates)
        result = find_best_template(content, templates, config=config, source=args.templates.name)
    except EmptyCandidateSet as e:
        print(f"Error: {e}. Check that {e.source} defines slide layouts.", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    explanation = explain_match(result)
    save_json(
        {
            "match": result.model_dump(mode="json"),
            "explanation": explanation.model_dump(mode="json"),
        },
        args.output,
    )

    best = result.best_template
    print(f"Written to: {args.output}")
    print(f"\nBest: {best.display_name} [{best.category.value}] score={best.score} ({result.confidence.value})")
    for alt in result.alternatives:
        print(f"  Alt: {alt.display_name} [{alt.category.value}] score={alt.score}")
    print(f"Reasoning: {result.reasoning}")
    print(f"Edits planned: {len(result.edits)}")


if __name__ == "__main__":
    main()
