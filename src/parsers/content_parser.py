"""Load slide content from JSON, YAML or Markdown files."""

import re
from pathlib import Path

from src.schemas.content_schema import Content
from src.utils.file_utils import load_json, load_yaml

_IMAGE_RE = re.compile(r"!\[[^\]]*\]\(([^)\s]+)[^)]*\)")
_BULLET_RE = re.compile(r"^\s*[-*+]\s+(.*)$")


def parse_markdown_content(text: str) -> Content:
    """Build Content from a Markdown snippet.

    The first '# ' heading is the title, the first '## ' heading the
    subtitle, list items become bullets, the first image link becomes the
    image, and remaining non-blank lines form the body.
    """
    title = ""
    subtitle = ""
    image_url = None
    bullets: list[str] = []
    body_lines: list[str] = []

    for line in text.splitlines():
        stripped = line.strip()
        if not stripped:
            if body_lines and body_lines[-1] != "":
                body_lines.append("")
            continue

        if stripped.startswith("## ") and not subtitle:
            subtitle = stripped[3:].strip()
            continue
        if stripped.startswith("# ") and not title:
            title = stripped[2:].strip()
            continue

        image = _IMAGE_RE.search(stripped)
        if image and image_url is None:
            image_url = image.group(1)
            rest = _IMAGE_RE.sub("", stripped).strip()
            if not rest:
                continue
            stripped = rest

        bullet = _BULLET_RE.match(stripped)
        if bullet:
            bullets.append(bullet.group(1).strip())
            continue

        body_lines.append(stripped)

    return Content(
        title=title,
        subtitle=subtitle,
        body="\n".join(body_lines).strip(),
        image_url=image_url,
        bullets=bullets,
    )


def parse_content(path: str | Path) -> Content:
    """Load a Content object from a .json, .yaml/.yml, .md or .txt file."""
    path = Path(path)
    ext = path.suffix.lower()
    if ext == ".json":
        return Content.from_raw(load_json(path))
    if ext in (".yaml", ".yml"):
        return Content.from_raw(load_yaml(path))
    if ext in (".md", ".txt"):
        if not path.exists():
            raise FileNotFoundError(f"Content file not found: {path}")
        return parse_markdown_content(path.read_text(encoding="utf-8"))
    raise ValueError(f"Unsupported content format '{ext}'. Supported: .json, .md, .txt, .yaml, .yml")
