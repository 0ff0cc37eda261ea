"""Page template: compile once, then bind frontmatter + content into it"""

from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, StrictUndefined, Template, TemplateError, TemplateSyntaxError

from mkweb.errors import io_error, template_compile_error, template_render_error


CONTENT_KEY = "content"


def _environment() -> Environment:
    # `content` is already HTML, so nothing is escaped.
    return Environment(undefined=StrictUndefined, autoescape=False, keep_trailing_newline=True)


def compile_template(source: str, path: Optional[Path] = None) -> Template:
    """Compile template source; syntax errors become template-compile errors."""
    try:
        return _environment().from_string(source)
    except TemplateSyntaxError as e:
        raise template_compile_error(e, path) from e


def load_template(path: Path) -> Template:
    """Read and compile the page template at path."""
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise io_error(e, path) from e
    return compile_template(source, path)


def build_context(frontmatter: Optional[dict[str, Any]], content: str) -> dict[str, Any]:
    """Copy frontmatter (or start empty) and bind content under the reserved key.

    A frontmatter field named `content` is overwritten.
    """
    context = dict(frontmatter) if frontmatter is not None else {}
    context[CONTENT_KEY] = content
    return context


def bind(template: Template, frontmatter: Optional[dict[str, Any]], content: str) -> str:
    """Render template with the frontmatter fields and content."""
    try:
        return template.render(build_context(frontmatter, content))
    except (TemplateError, TypeError) as e:
        raise template_render_error(e) from e
