from pathlib import Path
from typing import Any

from src.utils.file_utils import load_json

from .content_parser import parse_content, parse_markdown_content
from .pptx_layouts import read_pptx_layouts

_PRESENTATION_READERS = {
    ".json": load_json,
    ".pptx": read_pptx_layouts,
}


def load_presentation(path: str | Path) -> Any:
    """Load a raw presentation description from a file.

    Dispatches on file extension: .json exports are returned as parsed,
    .pptx files are described via python-pptx.
    """
    path = Path(path)
    ext = path.suffix.lower()
    reader = _PRESENTATION_READERS.get(ext)
    if reader is None:
        supported = ", ".join(sorted(_PRESENTATION_READERS.keys()))
        raise ValueError(f"Unsupported presentation format '{ext}'. Supported: {supported}")
    return reader(path)


__all__ = ["load_presentation", "parse_content", "parse_markdown_content", "read_pptx_layouts"]
