"""Frontmatter extraction: split a `+++`-delimited TOML header from the body"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Optional

from mkweb.core.models import Document, DocumentKind
from mkweb.errors import io_error


logger = logging.getLogger(__name__)

OPEN = "+++\n"
CLOSE = "\n+++\n"


def parse(raw: str) -> tuple[Optional[dict[str, Any]], str]:
    """Return (frontmatter, content) for raw document text.

    Text that does not start with the opening delimiter, or that never closes
    it, comes back unchanged as content with no frontmatter. A block that is
    not valid TOML also yields no frontmatter, but its body is still dropped.
    """
    if not raw.startswith(OPEN):
        return None, raw
    end = raw.find(CLOSE, len(OPEN))
    if end == -1:
        return None, raw
    return _decode(raw[len(OPEN):end]), raw[end + len(CLOSE):]


def _decode(block: str) -> Optional[dict[str, Any]]:
    try:
        return tomllib.loads(block)
    except tomllib.TOMLDecodeError as e:
        logger.warning("Ignoring invalid frontmatter: %s", e)
        return None


def read_document(path: Path) -> Document:
    """Read path as UTF-8 and split it into frontmatter and content."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise io_error(e, path) from e
    frontmatter, content = parse(raw)
    return Document(
        path=path,
        kind=DocumentKind.from_path(path),
        raw=raw,
        frontmatter=frontmatter,
        content=content,
    )
