"""Per-build data models: documents, their kind, and the build report"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class DocumentKind(Enum):
    MARKDOWN = "md"
    HTML = "html"
    UNSUPPORTED = None

    @classmethod
    def from_path(cls, path: Path) -> "DocumentKind":
        """Classify path by its extension (case-sensitive, as on disk)."""
        ext = extension(path)
        if ext == cls.MARKDOWN.value:
            return cls.MARKDOWN
        if ext == cls.HTML.value:
            return cls.HTML
        return cls.UNSUPPORTED


def extension(path: Path) -> str:
    """Return the extension of path without its dot; '' when it has none."""
    return path.suffix[1:]


@dataclass
class Document:
    """A source document read for one build pass; never persisted."""
    path:        Path
    kind:        DocumentKind
    raw:         str                        # full file text, frontmatter included
    frontmatter: Optional[dict[str, Any]]   # None when the document has no block
    content:     str                        # body after the closing delimiter


@dataclass
class BuildReport:
    """What one build pass did, as (source, output) pairs."""
    rendered: list[tuple[Path, Path]] = field(default_factory=list)
    copied:   list[tuple[Path, Path]] = field(default_factory=list)
    skipped:  list[tuple[Path, Path]] = field(default_factory=list)
