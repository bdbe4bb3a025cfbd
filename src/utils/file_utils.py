"""File I/O helpers for presentation exports, content drafts and results."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Slides exports saved from some editors carry a UTF-8 byte order mark.
_READ_ENCODING = "utf-8-sig"


def ensure_directory(path: str | Path) -> Path:
    """Ensure a directory exists, creating it if necessary."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def _read_text(path: Path, kind: str) -> str:
    if not path.exists():
        raise FileNotFoundError(f"{kind} file not found: {path}")
    return path.read_text(encoding=_READ_ENCODING)


def load_yaml(path: str | Path) -> Any:
    """Load a YAML file; an empty document loads as an empty dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        ValueError: if the file is not valid YAML.
    """
    path = Path(path)
    try:
        return yaml.safe_load(_read_text(path, "YAML")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def load_json(path: str | Path) -> Any:
    """Load a JSON file such as a presentation export or content draft.

    Raises:
        FileNotFoundError: if the file does not exist.
        ValueError: if the file is not valid JSON.
    """
    path = Path(path)
    try:
        return json.loads(_read_text(path, "JSON"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: line {e.lineno}, column {e.colno}: {e.msg}") from e


def save_json(data: Any, path: str | Path, indent: int = 2) -> None:
    """Save data to a JSON file, creating parent directories."""
    path = Path(path)
    ensure_directory(path.parent)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, default=str, ensure_ascii=False)
    logger.debug(f"Wrote {path}")
