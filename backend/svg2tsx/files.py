"""File helpers for callers that read SVG from disk and save TSX output."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from svg2tsx.errors import FileIOError

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[A-Za-z0-9]+")


def read_svg_file(path: str | Path) -> str:
    path = Path(path)
    if not path.name.lower().endswith(".svg"):
        raise FileIOError("Only SVG files are allowed")
    if not path.exists():
        raise FileIOError("File not found")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileIOError(f"Failed to read file: {e}") from e


def save_tsx_file(path: str | Path, content: str) -> None:
    path = Path(path)
    if not path.name.lower().endswith(".tsx"):
        raise FileIOError("File must have .tsx extension")
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileIOError(f"Failed to write file: {e}") from e
    logger.info("Saved %s (%d chars)", path, len(content))


def derive_component_name(path: str | Path, fallback: str = "Icon") -> str:
    """PascalCase component name from a file stem: ``arrow-left.svg`` → ``ArrowLeft``."""
    words = _WORD_RE.findall(Path(path).stem)
    if not words:
        return fallback
    name = "".join(word[:1].upper() + word[1:] for word in words)
    # JS identifiers cannot start with a digit
    if name[0].isdigit():
        name = fallback + name
    return name
