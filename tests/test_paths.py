"""Tests for destination → source path mapping."""

import os
from pathlib import Path

import pytest

from leafsync._paths import is_within, relative_key, same_path, source_path


class TestRelativeKey:
    def test_root_is_empty_key(self, tmp_path):
        assert relative_key(tmp_path, tmp_path) == ""

    def test_nested(self, tmp_path):
        assert relative_key(tmp_path, tmp_path / "A" / "Album1") == "A/Album1"

    def test_trailing_separator_on_root(self, tmp_path):
        root = str(tmp_path) + os.sep
        assert relative_key(root, tmp_path / "A") == "A"

    def test_not_under_root(self, tmp_path):
        with pytest.raises(ValueError):
            relative_key(tmp_path / "music", tmp_path / "orig" / "A")

    def test_string_prefix_is_not_enough(self, tmp_path):
        # /x/music is a string prefix of /x/musicals but not a parent
        with pytest.raises(ValueError):
            relative_key(tmp_path / "music", tmp_path / "musicals" / "A")

    def test_dotdot_normalized(self, tmp_path):
        leaf = tmp_path / "music" / "A" / ".." / "B"
        assert relative_key(tmp_path / "music", leaf) == "B"


class TestSourcePath:
    def test_swaps_roots(self, tmp_path):
        src, dest = tmp_path / "orig", tmp_path / "music"
        leaf = dest / "B" / "Album2"
        assert source_path(src, dest, leaf) == src / "B" / "Album2"

    def test_root_maps_to_source_root(self, tmp_path):
        src, dest = tmp_path / "orig", tmp_path / "music"
        assert source_path(src, dest, dest) == src

    def test_accepts_strings(self, tmp_path):
        src, dest = str(tmp_path / "orig"), str(tmp_path / "music")
        leaf = os.path.join(dest, "A", "Album1")
        assert source_path(src, dest, leaf) == Path(src) / "A" / "Album1"

    def test_leaf_outside_dest(self, tmp_path):
        with pytest.raises(ValueError):
            source_path(tmp_path / "orig", tmp_path / "music", tmp_path / "other")


class TestIsWithin:
    def test_self(self, tmp_path):
        assert is_within(tmp_path, tmp_path) is True

    def test_child(self, tmp_path):
        assert is_within(tmp_path, tmp_path / "a" / "b") is True

    def test_parent(self, tmp_path):
        assert is_within(tmp_path / "a", tmp_path) is False

    def test_same_path_normalizes(self, tmp_path):
        assert same_path(tmp_path / "a" / "..", tmp_path) is True
