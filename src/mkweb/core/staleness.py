"""Modification-time comparison deciding whether an output must be regenerated"""

import logging
from pathlib import Path
from typing import Optional

from mkweb.errors import io_error


logger = logging.getLogger(__name__)


def is_stale(source_modified: int, output_exists: bool, output_modified: Optional[int]) -> bool:
    """True when the output is missing or strictly older than its source."""
    if not output_exists:
        return True
    return output_modified < source_modified


def needs_update(source: Path, output: Path) -> bool:
    """Stat source and output and decide; logs a notice when output is skipped."""
    try:
        source_modified = source.stat().st_mtime_ns
        output_exists = output.exists()
        output_modified = output.stat().st_mtime_ns if output_exists else None
    except OSError as e:
        raise io_error(e) from e

    if is_stale(source_modified, output_exists, output_modified):
        return True
    logger.info("%s is not older than source: skipping.", output)
    return False
