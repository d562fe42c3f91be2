"""Shared fixtures for leafsync tests."""

import os

import pytest
from click.testing import CliRunner


# 2020-01-01 and 2021-01-01, UTC
OLD = 1577836800
NEW = 1609459200


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def touch():
    """Return a helper that writes a file (creating parents) with an optional mtime."""
    def _touch(path, data="data", mtime=None):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(data)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path
    return _touch


@pytest.fixture
def trees(tmp_path):
    """Empty source and destination roots: (orig, music)."""
    src = tmp_path / "orig"
    dest = tmp_path / "music"
    src.mkdir()
    dest.mkdir()
    return src, dest


@pytest.fixture
def library(trees, touch):
    """A small music library with matching source art.

    Destination:
        A/Album1/            (empty)
        A/Album2/song.flac
        B/Album3/song.flac, folder.jpg (old)
        C/Album4/song.flac

    Source:
        A/Album1/folder.jpg
        A/Album2/folder.jpg
        B/Album3/folder.jpg (new)
        C/Album4/cover.png
    """
    src, dest = trees
    (dest / "A" / "Album1").mkdir(parents=True)
    touch(dest / "A" / "Album2" / "song.flac")
    touch(dest / "B" / "Album3" / "song.flac")
    touch(dest / "B" / "Album3" / "folder.jpg", "small", mtime=OLD)
    touch(dest / "C" / "Album4" / "song.flac")

    touch(src / "A" / "Album1" / "folder.jpg", "art1")
    touch(src / "A" / "Album2" / "folder.jpg", "art2")
    touch(src / "B" / "Album3" / "folder.jpg", "large", mtime=NEW)
    touch(src / "C" / "Album4" / "cover.png", "png")
    return src, dest
