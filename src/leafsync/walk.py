"""Destination tree walk and the freshen entry point."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from ._io import list_dir
from ._paths import relative_key, same_path
from ._types import RunReport, SyncConfig
from .exceptions import TraversalError
from .prune import DirPruner
from .sync import Progress, sync_leaf

if TYPE_CHECKING:
    from ._exclude import ExcludeFilter


def iter_leaves(
    dest: str | Path,
    *,
    exclude: ExcludeFilter | None = None,
    onerror: Callable[[OSError], None] | None = None,
    pruner: DirPruner | None = None,
) -> Iterator[Path]:
    """Yield the leaf directories under *dest*, depth-first in name order.

    A leaf is a directory with no subdirectories (a symlink to a directory
    counts as one).  Directories are listed only when they are reached, so
    changes made by the caller between yields are seen by the rest of the
    walk.  Symlinked directories are never descended into.

    A subdirectory that cannot be listed is reported through *onerror* and
    then yielded as a leaf.  One that has vanished, or that *pruner* has
    removed, is skipped.  Raises :class:`TraversalError` if *dest* itself
    cannot be listed.
    """
    root = Path(dest)
    listing = list_dir(root)
    if not listing.ok:
        raise TraversalError(str(root), listing.error.strerror or str(listing.error))

    stack: list[Path] = [root]
    while stack:
        current = stack.pop()
        if pruner is not None and pruner.is_removed(current):
            continue
        if not same_path(current, root):
            listing = list_dir(current)
            if listing.missing:
                continue
            if not listing.ok:
                if onerror is not None:
                    onerror(listing.error)
                yield current
                continue

        if not listing.has_subdirs:
            yield current
            continue

        children = []
        for name in listing.dirs:
            child = current / name
            if exclude is not None and exclude.is_excluded(relative_key(root, child)):
                continue
            children.append(child)
        stack.extend(reversed(children))


def freshen(config: SyncConfig, *, progress: Progress | None = None) -> RunReport:
    """Walk ``config.dest`` and sync every leaf from ``config.source``.

    Returns a :class:`RunReport` with the run's counters.  Raises
    :class:`TraversalError` when the destination root cannot be walked and
    ``ValueError`` when source and destination are the same directory.
    """
    if same_path(config.source, config.dest):
        raise ValueError("Source and destination are the same directory")

    report = RunReport()
    pruner = DirPruner(config.dest, dry_run=config.dry_run)

    # An unreadable directory is yielded as a leaf; sync_leaf lists it again
    # and records the warning.
    for leaf in iter_leaves(config.dest, exclude=config.exclude, pruner=pruner):
        sync_leaf(config, leaf, report, progress=progress, pruner=pruner)
    return report
