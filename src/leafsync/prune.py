"""Cascading removal of empty destination directories.

Removing a leaf can leave its parent empty, which in turn can leave the
grandparent empty.  :class:`DirPruner` removes a directory and then walks
upward removing each newly empty ancestor, stopping at the first one that
still has entries and never touching the destination root itself.
"""

from __future__ import annotations

import errno
import os
from pathlib import Path

from ._io import list_dir
from ._paths import _norm, is_within, same_path


class DirPruner:
    """Remove empty directories below *root*, cascading upward.

    Only empty directories are ever removed (``os.rmdir``); there is no
    recursive delete.  With *dry_run* nothing is removed, but directories
    that would have been removed are remembered so that a parent whose
    only entries are such directories is treated as empty.
    """

    def __init__(self, root: str | Path, *, dry_run: bool = False) -> None:
        self.root = Path(root)
        self.dry_run = dry_run
        self._removed: set[Path] = set()

    def __repr__(self) -> str:
        return f"DirPruner({str(self.root)!r}, dry_run={self.dry_run})"

    def is_removed(self, path: str | Path) -> bool:
        """True if *path* was removed (or, in a dry run, would have been)."""
        return _norm(path) in self._removed

    def prune(self, path: str | Path) -> list[Path]:
        """Remove *path* if empty, then each empty ancestor below the root.

        Returns the removed directories, deepest first.  Returns an empty
        list when *path* is the root.  Raises ``NotADirectoryError`` when
        *path* is not a directory, and re-raises the ``OSError`` from the
        first removal (typically ``ENOTEMPTY``).  A failure further up only
        ends the cascade.
        """
        path = Path(path)
        if self.is_removed(path) or not path.is_dir():
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(path))

        removed: list[Path] = []
        current = path
        while is_within(self.root, current) and not same_path(current, self.root):
            try:
                self._rmdir(current)
            except OSError:
                if not removed:
                    raise
                break
            removed.append(current)
            current = current.parent
        return removed

    def _rmdir(self, path: Path) -> None:
        if not self.dry_run:
            os.rmdir(path)
            self._removed.add(_norm(path))
            return
        listing = list_dir(path)
        if not listing.ok:
            raise listing.error
        remaining = [n for n in listing.names if not self.is_removed(path / n)]
        if remaining:
            raise OSError(errno.ENOTEMPTY, os.strerror(errno.ENOTEMPTY), str(path))
        self._removed.add(_norm(path))
