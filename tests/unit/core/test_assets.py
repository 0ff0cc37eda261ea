"""Unit tests for core/assets.py"""

from mkweb.core.assets import sync_assets


def test_sync_assets_copies_tree(tmp_path):
    """Every file is mirrored byte-for-byte, whatever its extension."""
    assets = tmp_path / "assets"
    (assets / "img").mkdir(parents=True)
    (assets / "style.css").write_text("body {}")
    (assets / "img" / "logo.png").write_bytes(b"\x89PNG\x00\x01")
    (assets / "notes.md").write_text("+++\ntitle = 1\n+++\nnot rendered")
    out = tmp_path / "public" / "assets"

    copied, skipped = sync_assets(assets, out)

    assert len(copied) == 3
    assert skipped == []
    assert (out / "style.css").read_text() == "body {}"
    assert (out / "img" / "logo.png").read_bytes() == b"\x89PNG\x00\x01"
    assert (out / "notes.md").read_text() == "+++\ntitle = 1\n+++\nnot rendered"


def test_sync_assets_mirrors_empty_directories(tmp_path):
    assets = tmp_path / "assets"
    (assets / "fonts" / "empty").mkdir(parents=True)
    out = tmp_path / "public" / "assets"
    sync_assets(assets, out)
    assert (out / "fonts" / "empty").is_dir()


def test_sync_assets_skips_up_to_date(tmp_path, set_mtime):
    """A second sync copies nothing; an asset touched since is copied again."""
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "a.css").write_text("a")
    (assets / "b.css").write_text("b")
    out = tmp_path / "out"
    sync_assets(assets, out)

    copied, skipped = sync_assets(assets, out)
    assert copied == []
    assert {s.name for s, _ in skipped} == {"a.css", "b.css"}

    (assets / "b.css").write_text("bb")
    set_mtime(out / "b.css", 1_000_000_000)
    copied, _ = sync_assets(assets, out)
    assert [s.name for s, _ in copied] == ["b.css"]
    assert (out / "b.css").read_text() == "bb"


def test_sync_assets_missing_dir_is_noop(tmp_path):
    out = tmp_path / "out"
    assert sync_assets(tmp_path / "assets", out) == ([], [])
    assert not out.exists()
