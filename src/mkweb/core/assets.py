"""Static asset mirroring: byte-for-byte copies of changed files only"""

import os
import shutil
from pathlib import Path

from mkweb.core.staleness import needs_update
from mkweb.core.utils.fs import ensure_dir, mirror
from mkweb.errors import io_error


def sync_assets(
    assets_dir: Path,
    public_assets_dir: Path,
    ) -> tuple[list[tuple[Path, Path]], list[tuple[Path, Path]]]:
    """Mirror assets_dir into public_assets_dir. Returns (copied, skipped) pairs.

    Every file is considered regardless of extension; a missing assets_dir
    copies nothing.
    """
    copied, skipped = [], []
    if not assets_dir.is_dir():
        return copied, skipped

    for dirpath, _, filenames in os.walk(assets_dir):
        current = Path(dirpath)
        ensure_dir(mirror(current, assets_dir, public_assets_dir))
        for name in filenames:
            src = current / name
            dest = mirror(src, assets_dir, public_assets_dir)
            if not needs_update(src, dest):
                skipped.append((src, dest))
                continue
            try:
                shutil.copyfile(src, dest)
            except OSError as e:
                raise io_error(e, src) from e
            copied.append((src, dest))
    return copied, skipped
