"""Tests for path normalization and pairing."""

from pathlib import Path

import pytest

from fscopy.errors import PreconditionError
from fscopy.paths import as_path_list, is_within, pair_paths, path_expand, path_tidy, rebase


class TestPathExpand:
    def test_makes_relative_paths_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert path_expand("foo") == tmp_path / "foo"

    def test_collapses_dot_segments(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert path_expand("a/./b/../c") == tmp_path / "a" / "c"

    def test_expands_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert path_expand("~/x") == tmp_path / "x"

    def test_does_not_resolve_links(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "real").mkdir()
        (tmp_path / "alias").symlink_to("real")
        assert path_expand("alias") == tmp_path / "alias"

    def test_idempotent(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        once = path_expand("x/../y")
        assert path_expand(once) == once


class TestPathLists:
    def test_single_string_becomes_list(self):
        assert as_path_list("foo") == ["foo"]

    def test_path_object_becomes_list(self):
        assert as_path_list(Path("foo")) == [Path("foo")]

    def test_tidy_keeps_order(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert path_tidy(["b", "a"]) == [tmp_path / "b", tmp_path / "a"]


class TestPairPaths:
    def test_pairs_by_index(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert pair_paths(["a", "b"], ["c", "d"]) == [
            (tmp_path / "a", tmp_path / "c"),
            (tmp_path / "b", tmp_path / "d"),
        ]

    def test_broadcasts_single_source(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        pairs = pair_paths("a", ["c", "d"])
        assert [src for src, _ in pairs] == [tmp_path / "a", tmp_path / "a"]

    def test_rejects_many_sources_to_one_destination(self):
        with pytest.raises(PreconditionError):
            pair_paths(["a", "b"], "c")

    def test_rejects_empty_sources(self):
        with pytest.raises(PreconditionError):
            pair_paths([], [])


class TestRebase:
    def test_root_maps_to_new_root(self):
        assert rebase(Path("/src/a"), Path("/src/a"), Path("/dst/z")) == Path("/dst/z")

    def test_nested_entry(self):
        assert rebase(Path("/src/a/b/c"), Path("/src/a"), Path("/dst/z")) == Path("/dst/z/b/c")

    def test_repeated_root_name(self):
        assert rebase(Path("/a/a/a"), Path("/a"), Path("/z")) == Path("/z/a/a")


class TestIsWithin:
    def test_same_path(self):
        assert is_within(Path("/a/b"), Path("/a/b"))

    def test_child(self):
        assert is_within(Path("/a/b/c"), Path("/a/b"))

    def test_sibling_with_shared_prefix(self):
        assert not is_within(Path("/a/bc"), Path("/a/b"))
