"""Build orchestration: walk the site root and render changed documents into public/"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from jinja2 import Template

from mkweb.config import Settings
from mkweb.core.assets import sync_assets
from mkweb.core.convert import Converter, make_converter, to_html
from mkweb.core.frontmatter import read_document
from mkweb.core.models import BuildReport, Document, DocumentKind, extension
from mkweb.core.staleness import needs_update
from mkweb.core.template import bind, load_template
from mkweb.core.utils.fs import ensure_dir, is_under, mirror
from mkweb.errors import BuildError, io_error, output_collision, unrecognised_extension


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Site:
    """A site root with its output/asset locations, page template, and converter.

    The template and converter are created once and shared, read-only, by
    every document of a build.
    """
    root:        Path
    public_path: Path
    assets_path: Path
    template:    Template
    converter:   Converter
    html_suffix: bool = False

    @classmethod
    def open(
        cls,
        root: Path,
        settings: Optional[Settings] = None,
        converter: Optional[Converter] = None,
        ) -> "Site":
        """Resolve paths, create public/, and load the template. Fails before any build step."""
        settings = settings or Settings()
        root = Path(root)
        public_path = root / settings.public_dir
        ensure_dir(public_path)
        return cls(
            root=root,
            public_path=public_path,
            assets_path=root / settings.assets_dir,
            template=load_template(root / settings.template_file),
            converter=converter or make_converter(settings.converter, settings.pandoc_path),
            html_suffix=settings.html_suffix,
        )

    def output_path(self, source: Path) -> Path:
        """Where the rendered form of source is written."""
        dest = mirror(source, self.root, self.public_path)
        if self.html_suffix and DocumentKind.from_path(source) is DocumentKind.MARKDOWN:
            dest = dest.with_suffix(".html")
        return dest

    def build(self) -> BuildReport:
        """Sync assets, then render every changed document under root."""
        report = BuildReport()
        report.copied, report.skipped = sync_assets(
            self.assets_path, mirror(self.assets_path, self.root, self.public_path),
        )

        claimed: dict[Path, Path] = {}
        for dirpath, dirnames, filenames in os.walk(self.root):
            current = Path(dirpath)
            # Prune generated output and raw assets so they are never read as sources.
            dirnames[:] = [
                d for d in dirnames
                if not is_under(current / d, self.public_path, self.assets_path)
            ]
            ensure_dir(mirror(current, self.root, self.public_path))

            for name in filenames:
                source = current / name
                if DocumentKind.from_path(source) is DocumentKind.UNSUPPORTED:
                    continue
                output = self.output_path(source)
                if output in claimed:
                    raise output_collision(claimed[output], source, output)
                claimed[output] = source
                if not needs_update(source, output):
                    report.skipped.append((source, output))
                    continue
                self.write(output, self.render_file(source))
                report.rendered.append((source, output))
        return report

    def render_file(self, path: Path) -> str:
        """Read, parse, and render one document; its extension picks the route."""
        if DocumentKind.from_path(path) is DocumentKind.UNSUPPORTED:
            raise unrecognised_extension(extension(path), path)
        try:
            return self.render_document(read_document(path))
        except BuildError as e:
            if e.path is None:
                e.path = path
            raise

    def render_document(self, doc: Document) -> str:
        if doc.kind is DocumentKind.MARKDOWN:
            content = to_html(self.converter, doc.content)
        elif doc.kind is DocumentKind.HTML:
            content = doc.content
        else:
            raise unrecognised_extension(extension(doc.path), doc.path)
        return bind(self.template, doc.frontmatter, content)

    @staticmethod
    def write(path: Path, rendered: str) -> None:
        logger.debug("Writing %s", path)
        try:
            path.write_text(rendered + "\n", encoding="utf-8")
        except OSError as e:
            raise io_error(e, path) from e


def build_site(
    root: Path,
    settings: Optional[Settings] = None,
    converter: Optional[Converter] = None,
    ) -> BuildReport:
    """Open the site at root and run one build pass."""
    return Site.open(root, settings, converter).build()
