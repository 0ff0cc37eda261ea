"""Unit tests for core/staleness.py"""

import logging

import pytest

from mkweb.core.staleness import is_stale, needs_update
from mkweb.errors import BuildError, ErrorKind


def test_is_stale_when_output_missing():
    """A missing output always needs generating."""
    assert is_stale(100, False, None) is True


def test_is_stale_output_newer():
    assert is_stale(100, True, 200) is False


def test_is_stale_equal_timestamps_is_up_to_date():
    """Equal modification times count as up to date."""
    assert is_stale(100, True, 100) is False


def test_is_stale_output_older():
    assert is_stale(200, True, 100) is True


def test_needs_update_missing_output(tmp_path):
    src = tmp_path / "a.md"
    src.write_text("a")
    assert needs_update(src, tmp_path / "out.md") is True


def test_needs_update_equal_mtime_skips_with_notice(tmp_path, set_mtime, caplog):
    """An output as new as its source is skipped, and the skip is logged by path."""
    caplog.set_level(logging.INFO, logger="mkweb")
    src, out = tmp_path / "a.md", tmp_path / "out.md"
    src.write_text("a")
    out.write_text("b")
    set_mtime(src, 1_700_000_000_000_000_000)
    set_mtime(out, 1_700_000_000_000_000_000)

    assert needs_update(src, out) is False
    assert f"{out} is not older than source: skipping." in caplog.text


def test_needs_update_older_output(tmp_path, set_mtime, caplog):
    """A strictly older output is regenerated without a notice."""
    caplog.set_level(logging.INFO, logger="mkweb")
    src, out = tmp_path / "a.md", tmp_path / "out.md"
    src.write_text("a")
    out.write_text("b")
    set_mtime(src, 1_700_000_000_000_000_001)
    set_mtime(out, 1_700_000_000_000_000_000)

    assert needs_update(src, out) is True
    assert "skipping" not in caplog.text


def test_needs_update_missing_source(tmp_path):
    """A source that cannot be stat'ed is an I/O build error."""
    with pytest.raises(BuildError) as exc:
        needs_update(tmp_path / "gone.md", tmp_path / "out.md")
    assert exc.value.kind is ErrorKind.IO
