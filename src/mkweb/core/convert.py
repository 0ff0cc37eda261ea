"""Markdown -> HTML conversion behind a narrow, injectable converter interface"""

import logging
import subprocess
from dataclasses import dataclass
from typing import Any, Protocol

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml
from mdit_py_plugins.dollarmath import dollarmath_plugin

from mkweb.errors import conversion_error


logger = logging.getLogger(__name__)

CONVERTERS = ("markdown-it", "pandoc")


@dataclass(frozen=True)
class ConvertOptions:
    from_format: str = "markdown"
    to_format:   str = "html5"
    math:        bool = True
    extra_args:  tuple[str, ...] = ()


HTML_OPTIONS = ConvertOptions()


class Converter(Protocol):
    def convert(self, text: str, options: ConvertOptions) -> str: ...


def _mathjax(content: str, config: dict[str, Any]) -> str:
    """Wrap TeX in MathJax delimiters, matching pandoc's --mathjax output."""
    if config.get("display_mode"):
        return rf"\[{escapeHtml(content)}\]"
    return rf"\({escapeHtml(content)}\)"


class MarkdownItConverter:
    """In-process conversion with markdown-it-py and the dollar-math plugin."""

    def __init__(self, preset: str = "commonmark"):
        self.preset = preset

    def _parser(self, options: ConvertOptions) -> MarkdownIt:
        md = MarkdownIt(self.preset, options_update={"linkify": False})
        if options.math:
            md.use(dollarmath_plugin, renderer=_mathjax)
        return md

    def convert(self, text: str, options: ConvertOptions) -> str:
        if (options.from_format, options.to_format) != ("markdown", "html5"):
            raise ValueError(
                f"markdown-it cannot convert {options.from_format} to {options.to_format}"
            )
        return self._parser(options).render(text)


class PandocConverter:
    """Pipe text through the pandoc executable (stdin -> stdout)."""

    def __init__(self, executable: str = "pandoc"):
        self.executable = executable

    def command(self, options: ConvertOptions) -> list[str]:
        cmd = [self.executable, "-f", options.from_format, "-t", options.to_format]
        if options.math:
            cmd.append("--mathjax")
        cmd.extend(options.extra_args)
        return cmd

    def convert(self, text: str, options: ConvertOptions) -> str:
        cmd = self.command(options)
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, input=text, capture_output=True, text=True, check=True)
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise RuntimeError(
                f"pandoc exited with status {e.returncode}" + (f": {stderr}" if stderr else "")
            ) from e
        return result.stdout


def make_converter(name: str, pandoc_path: str = "pandoc") -> Converter:
    """Return the converter registered under name."""
    if name == "markdown-it":
        return MarkdownItConverter()
    if name == "pandoc":
        return PandocConverter(pandoc_path)
    raise ValueError(f"Unknown converter {name!r}; expected one of {', '.join(CONVERTERS)}")


def to_html(converter: Converter, text: str) -> str:
    """Convert markdown text to HTML5 with math enabled; failures become conversion errors."""
    try:
        html = converter.convert(text, HTML_OPTIONS)
    except Exception as e:
        raise conversion_error(e) from e
    if not isinstance(html, str):
        raise conversion_error(TypeError(f"converter returned {type(html).__name__}, expected str"))
    return html
