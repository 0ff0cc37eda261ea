"""Build error: one tagged exception for every failure the pipeline can raise"""

from enum import Enum
from pathlib import Path
from typing import Optional


class ErrorKind(str, Enum):
    IO = "io"
    TEMPLATE_COMPILE = "template-compile"
    TEMPLATE_RENDER = "template-render"
    CONVERSION = "conversion"
    UNRECOGNISED_EXTENSION = "unrecognised-extension"


class BuildError(Exception):
    """A fatal build failure tagged with the collaborator it came from.

    `detail` carries the originating error's message (or the offending file
    extension); the originating exception itself is chained as `__cause__`.
    """

    def __init__(self, kind: ErrorKind, detail: str, path: Optional[Path] = None):
        super().__init__(kind, detail, path)
        self.kind = kind
        self.detail = detail
        self.path = path

    def __str__(self) -> str:
        return describe(self)


def describe(error: BuildError) -> str:
    """Return the display text for error, chosen by its kind."""
    kind, detail = error.kind, error.detail
    if kind is ErrorKind.UNRECOGNISED_EXTENSION:
        text = f"Unrecognised file type: {detail}"
    elif kind is ErrorKind.CONVERSION:
        text = f"Conversion error: {detail}"
    elif kind is ErrorKind.TEMPLATE_COMPILE:
        text = f"Template error: {detail}"
    elif kind is ErrorKind.TEMPLATE_RENDER:
        text = f"Render error: {detail}"
    else:
        text = detail
    if error.path is not None:
        text = f"{error.path}: {text}"
    return text


def io_error(cause: Exception, path: Optional[Path] = None) -> BuildError:
    detail = getattr(cause, "strerror", None) or str(cause)
    return BuildError(ErrorKind.IO, detail, path or _filename(cause))


def template_compile_error(cause: Exception, path: Optional[Path] = None) -> BuildError:
    return BuildError(ErrorKind.TEMPLATE_COMPILE, str(cause), path)


def template_render_error(cause: Exception, path: Optional[Path] = None) -> BuildError:
    return BuildError(ErrorKind.TEMPLATE_RENDER, str(cause), path)


def conversion_error(cause: Exception, path: Optional[Path] = None) -> BuildError:
    return BuildError(ErrorKind.CONVERSION, str(cause) or type(cause).__name__, path)


def unrecognised_extension(extension: str, path: Optional[Path] = None) -> BuildError:
    return BuildError(ErrorKind.UNRECOGNISED_EXTENSION, extension, path)


def _filename(cause: Exception) -> Optional[Path]:
    filename = getattr(cause, "filename", None)
    return Path(filename) if filename else None


def output_collision(first: Path, second: Path, output: Path) -> BuildError:
    return BuildError(ErrorKind.IO, f"both {first} and {second} render to this path", output)
