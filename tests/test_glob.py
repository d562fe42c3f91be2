"""Tests for file-name matching and matching directory listings."""

import pytest

from leafsync._glob import _filter_names, _glob_match
from leafsync._io import list_matching


class TestGlobMatch:
    @pytest.mark.parametrize("name", ["folder.jpg", "Folder.png", "holder.txt"])
    def test_default_pattern_matches(self, name):
        assert _glob_match("?older.*", name) is True

    @pytest.mark.parametrize("name", ["folders.jpg", "older.jpg", "cover.jpg", "folder"])
    def test_default_pattern_rejects(self, name):
        assert _glob_match("?older.*", name) is False

    def test_case_sensitive(self):
        assert _glob_match("*.flac", "song.flac") is True
        assert _glob_match("*.FLAC", "song.flac") is False

    def test_star_matches_dotfiles(self):
        assert _glob_match("*.jpg", ".folder.jpg") is True

    def test_character_class(self):
        assert _glob_match("[fF]older.jpg", "Folder.jpg") is True
        assert _glob_match("[fF]older.jpg", "golder.jpg") is False

    def test_empty_pattern(self):
        assert _glob_match("", "anything") is False

    def test_filter_names_sorted(self):
        names = ["b.jpg", "a.png", "a.jpg", "c.txt"]
        assert _filter_names("*.jpg", names) == ["a.jpg", "b.jpg"]


class TestListMatching:
    def test_only_matching_files(self, tmp_path, touch):
        touch(tmp_path / "folder.jpg")
        touch(tmp_path / "song.flac")
        (tmp_path / "xolder.d").mkdir()
        result = list_matching(tmp_path, "?older.*")
        assert result.ok
        assert result.files == ["folder.jpg"]
        assert result.dirs == []

    def test_sorted(self, tmp_path, touch):
        for n in ("c.jpg", "a.jpg", "b.jpg"):
            touch(tmp_path / n)
        assert list_matching(tmp_path, "*.jpg").files == ["a.jpg", "b.jpg", "c.jpg"]

    def test_missing_directory(self, tmp_path):
        result = list_matching(tmp_path / "nope", "*")
        assert not result.ok
        assert result.missing
        assert result.files == []
