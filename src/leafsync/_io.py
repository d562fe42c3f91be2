"""Filesystem queries and the file copy used by the sync engine."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from ._glob import _filter_names


# ---------------------------------------------------------------------------
# Directory listing
# ---------------------------------------------------------------------------

@dataclass
class DirListing:
    """Direct children of one directory, or the error that prevented listing.

    Attributes:
        path: The directory that was listed.
        files: Names of regular files (symlinks to files included).
        dirs: Names of real subdirectories.
        dir_links: Names of symlinks pointing at directories.
        other: Names of anything else (broken links, sockets, ...).
        error: The ``OSError`` raised by the listing, or ``None``.
    """
    path: Path
    files: list[str] = field(default_factory=list)
    dirs: list[str] = field(default_factory=list)
    dir_links: list[str] = field(default_factory=list)
    other: list[str] = field(default_factory=list)
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def missing(self) -> bool:
        """True if listing failed because the directory does not exist."""
        return isinstance(self.error, (FileNotFoundError, NotADirectoryError))

    @property
    def has_subdirs(self) -> bool:
        return bool(self.dirs or self.dir_links)

    @property
    def names(self) -> list[str]:
        return sorted(self.files + self.dirs + self.dir_links + self.other)

    @property
    def is_empty(self) -> bool:
        """True only for a successful listing with no entries at all."""
        return self.ok and not self.names


def _is_dir(entry: os.DirEntry, *, follow_symlinks: bool) -> bool:
    try:
        return entry.is_dir(follow_symlinks=follow_symlinks)
    except OSError:
        return False


def _is_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def list_dir(path: str | Path) -> DirListing:
    """List the direct children of *path*, sorted by name within each kind.

    Never raises for listing failures: the error is stored on the result
    so callers can tell an empty directory from an unreadable one.
    """
    listing = DirListing(path=Path(path))
    try:
        with os.scandir(path) as it:
            for entry in it:
                if _is_dir(entry, follow_symlinks=False):
                    listing.dirs.append(entry.name)
                elif _is_dir(entry, follow_symlinks=True):
                    listing.dir_links.append(entry.name)
                elif _is_file(entry):
                    listing.files.append(entry.name)
                else:
                    listing.other.append(entry.name)
    except OSError as exc:
        return DirListing(path=Path(path), error=exc)
    listing.files.sort()
    listing.dirs.sort()
    listing.dir_links.sort()
    listing.other.sort()
    return listing


def list_matching(path: str | Path, pattern: str) -> DirListing:
    """List *path* keeping only regular files whose names match *pattern*."""
    listing = list_dir(path)
    if not listing.ok:
        return listing
    return DirListing(path=listing.path, files=_filter_names(pattern, listing.files))


# ---------------------------------------------------------------------------
# Copy
# ---------------------------------------------------------------------------

_COPY_CHUNK_SIZE = 1024 * 1024


def mtime_ns(path: str | Path) -> int | None:
    """Modification time of *path* in nanoseconds, ``None`` if it does not exist.

    Other ``OSError``\\ s propagate.
    """
    try:
        return os.stat(path).st_mtime_ns
    except FileNotFoundError:
        return None


def copy_file(src: str | Path, dst: str | Path, *, preserve_mtime: bool = False) -> None:
    """Copy the contents of *src* over *dst*, creating or truncating it.

    Both handles are closed on every exit path.  When *preserve_mtime* is
    set, *dst* gets the access and modification times of *src*.
    """
    with open(src, "rb") as fsrc, open(dst, "wb") as fdst:
        shutil.copyfileobj(fsrc, fdst, _COPY_CHUNK_SIZE)
    if preserve_mtime:
        st = os.stat(src)
        os.utime(dst, ns=(st.st_atime_ns, st.st_mtime_ns))
