#!/usr/bin/env python3
"""Extract and categorize slide templates from a presentation.

Reads either a Slides API presentation JSON export or a local .pptx file and
writes the normalized templates (with categories) plus summary stats.

Usage:
    python scripts/extract_templates.py presentation.json -o workspace/templates.json
    python scripts/extract_templates.py deck.pptx -o workspace/templates.json
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.layout_matcher import extract_templates, template_stats
from src.parsers import load_presentation
from src.schemas.template_schema import TemplateCollection
from src.utils.file_utils import ensure_directory

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def main():
    parser = argparse.ArgumentParser(description="Extract slide templates from a presentation")
    parser.add_argument("presentation", type=Path, help="Presentation JSON export or .pptx file")
    parser.add_argument(
        "-o", "--output", type=Path,
        default=Path("workspace/templates.json"),
        help="Output templates JSON path",
    )
    args = parser.parse_args()

    if not args.presentation.exists():
        print(f"Error: Presentation not found: {args.presentation}", file=sys.stderr)
        sys.exit(1)

    try:
        raw = load_presentation(args.presentation)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    templates = extract_templates(raw)
    collection = TemplateCollection(source=args.presentation.name, templates=templates)

    ensure_directory(args.output.parent)
    collection.save(args.output)

    stats = template_stats(templates)
    print(f"Written to: {args.output}")
    print(f"\n{stats.total} templates by category:")
    for category, count in stats.categories.items():
        print(f"  {category.value:24s}: {count}")
    if stats.placeholder_types:
        print(f"Placeholder types: {', '.join(stats.placeholder_types)}")


if __name__ == "__main__":
    main()
