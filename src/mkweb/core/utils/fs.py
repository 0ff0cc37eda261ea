"""Filesystem helpers shared by the asset sync and the content walk"""

from pathlib import Path

from mkweb.errors import io_error


def is_under(path: Path, *parents: Path) -> bool:
    """True if path equals or lies below any of parents (component-wise)."""
    return any(path == p or path.is_relative_to(p) for p in parents)


def mirror(path: Path, source_root: Path, dest_root: Path) -> Path:
    """Map path below source_root onto the same relative location below dest_root."""
    return dest_root / path.relative_to(source_root)


def ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise io_error(e, path) from e
