# Tests for browsing (entry lister).
# Created: 2026-10-19

import os
from unittest.mock import patch

import pytest

from fileexplorer.core import EntryKind, Err, ErrorKind, Ok, browse


def _by_name(listing):
    return {e.name: e for e in listing.entries}


class TestBrowse:
    def test_docs_listing(self, ctx):
        result = browse(ctx, "docs")
        assert isinstance(result, Ok)
        listing = result.value
        assert listing.path == "docs"
        assert listing.file_count == 1
        assert listing.folder_count == 1
        assert listing.total_size == 5

        entries = _by_name(listing)
        assert entries["a.txt"].kind is EntryKind.FILE
        assert entries["a.txt"].size == 2
        assert entries["a.txt"].rel_path == os.path.join("docs", "a.txt")
        assert entries["sub"].kind is EntryKind.DIRECTORY
        assert entries["sub"].size == 3
        assert entries["sub"].rel_path == os.path.join("docs", "sub")

    def test_root_listing(self, ctx):
        listing = browse(ctx, "").value
        assert listing.path == ""
        assert [e.name for e in listing.entries] == ["docs"]
        assert listing.entries[0].rel_path == "docs"
        assert listing.total_size == 5

    def test_missing_directory(self, ctx):
        result = browse(ctx, "missing")
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.NOT_FOUND

    def test_file_is_not_a_directory(self, ctx):
        result = browse(ctx, "docs/a.txt")
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.NOT_FOUND

    def test_traversal_forbidden(self, ctx):
        result = browse(ctx, "../etc")
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.FORBIDDEN

    def test_empty_directory(self, ctx, home):
        (home / "empty").mkdir()
        listing = browse(ctx, "empty").value
        assert listing.entries == []
        assert (listing.file_count, listing.folder_count, listing.total_size) == (0, 0, 0)

    def test_sum_law_holds(self, ctx, home):
        (home / "docs" / "sub" / "deeper").mkdir()
        (home / "docs" / "sub" / "deeper" / "c.bin").write_bytes(b"x" * 100)
        (home / "docs" / "d.bin").write_bytes(b"y" * 7)

        listing = browse(ctx, "docs").value
        assert listing.total_size == sum(e.size for e in listing.entries) == 112
        assert listing.file_count + listing.folder_count == len(listing.entries)

    def test_entry_invariants(self, ctx):
        for entry in browse(ctx, "docs").value.entries:
            assert entry.size >= 0
            assert entry.name == os.path.basename(entry.rel_path)
            assert (ctx.root / entry.rel_path).resolve().is_relative_to(ctx.root)

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlinked_directory_listed_as_file(self, ctx, home, tmp_path):
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "big.bin").write_bytes(b"x" * 1000)
        os.symlink(outside, home / "docs" / "link")

        entries = _by_name(browse(ctx, "docs").value)
        assert entries["link"].kind is EntryKind.FILE
        assert entries["link"].size < 1000

    def test_unreadable_subdirectory_counts_partially(self, ctx, home):
        real_scandir = os.scandir
        blocked = os.fspath(home / "docs" / "sub")

        def fake_scandir(path):
            if os.fspath(path) == blocked:
                raise PermissionError(13, "Permission denied", blocked)
            return real_scandir(path)

        with patch("fileexplorer.core.sizes.os.scandir", side_effect=fake_scandir):
            result = browse(ctx, "docs")

        assert isinstance(result, Ok)
        assert _by_name(result.value)["sub"].size == 0
        assert result.value.total_size == 2

    def test_unreadable_target_is_internal_error(self, ctx):
        with patch(
            "fileexplorer.core.listing.os.scandir",
            side_effect=PermissionError(13, "Permission denied"),
        ):
            result = browse(ctx, "docs")
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.INTERNAL
        assert str(ctx.root) not in result.message
