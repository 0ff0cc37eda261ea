"""Root test configuration: a fake converter, a scratch site layout, and mtime pinning"""

import os

import pytest


class FakeConverter:
    """Stands in for the markdown converter; wraps text in a paragraph and records calls."""

    def __init__(self):
        self.calls = []

    def convert(self, text, options):
        self.calls.append((text, options))
        return f"<p>{text}</p>\n"


@pytest.fixture(name="converter")
def converter_fixture():
    return FakeConverter()


@pytest.fixture(name="set_mtime")
def set_mtime_fixture():
    """Return a helper pinning a path's access and modification time to ns."""
    def _set(path, ns):
        os.utime(path, ns=(ns, ns))
    return _set


@pytest.fixture(name="site_root")
def site_root_fixture(tmp_path):
    """A site root holding only a minimal template."""
    root = tmp_path / "site"
    root.mkdir()
    (root / "template.hbs").write_text("{{content}}")
    return root
