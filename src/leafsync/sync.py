"""Per-leaf sync: decide, copy, and clean up one destination leaf.

For a leaf directory under the destination root, the matching source
directory is found by swapping the destination root for the source root.
Files in the source directory whose names match the configured pattern
are copied into the leaf when the leaf has no such file yet, or when its
copy is older (unless ``maintain_original`` is set).
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from ._io import copy_file, list_dir, list_matching, mtime_ns
from ._paths import source_path
from ._types import (
    ChangeError,
    EventKind,
    LeafResult,
    LeafStatus,
    RunReport,
    SyncConfig,
    SyncEvent,
)
from .prune import DirPruner

Progress = Callable[[SyncEvent], None]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _emit(progress: Progress | None, kind: EventKind, path, count: int = 0,
          message: str | None = None) -> None:
    if progress is not None:
        progress(SyncEvent(kind=kind, path=str(path), count=count, message=message))


def _error_text(exc: OSError) -> str:
    return exc.strerror or str(exc)


def _record_warning(report: RunReport, progress: Progress | None, path,
                    exc: OSError) -> None:
    """Record a listing failure that was degraded instead of aborting."""
    report.warnings.append(ChangeError(path=str(path), error=_error_text(exc)))
    _emit(progress, EventKind.WARNING, path, message=_error_text(exc))


def _record_failure(report: RunReport, progress: Progress | None, path,
                    exc: OSError) -> None:
    report.failed += 1
    report.errors.append(ChangeError(path=str(path), error=_error_text(exc)))
    _emit(progress, EventKind.ERROR, path, message=_error_text(exc))


def should_copy(src_mtime: int, dst_mtime: int | None, *,
                maintain_original: bool = False) -> bool:
    """Decide whether a source file replaces its destination counterpart.

    A missing target (*dst_mtime* is ``None``) is always copied.  An
    existing target is replaced only when *maintain_original* is off and
    it is strictly older than the source; equal times never copy.
    """
    if dst_mtime is None:
        return True
    if maintain_original:
        return False
    return dst_mtime < src_mtime


def _delete_leaf(leaf: Path, pruner: DirPruner, report: RunReport,
                 progress: Progress | None) -> bool:
    """Run the deletion cascade on *leaf*; True if *leaf* itself was removed."""
    try:
        removed = pruner.prune(leaf)
    except OSError:
        return False
    for d in removed:
        report.deleted += 1
        _emit(progress, EventKind.DELETED, d)
    return bool(removed)


def _copy_candidate(config: SyncConfig, src: Path, target: Path,
                    report: RunReport, progress: Progress | None) -> bool:
    """Copy *src* to *target* if needed.  Returns True if a copy was made."""
    try:
        src_mtime = os.stat(src).st_mtime_ns
        dst_mtime = mtime_ns(target)
    except OSError as exc:
        _record_failure(report, progress, target, exc)
        return False

    if not should_copy(src_mtime, dst_mtime, maintain_original=config.maintain_original):
        return False

    if not config.dry_run:
        try:
            copy_file(src, target, preserve_mtime=config.preserve_mtime)
        except OSError as exc:
            _record_failure(report, progress, target, exc)
            return False

    report.copied += 1
    _emit(progress, EventKind.FILE, target)
    return True


# ---------------------------------------------------------------------------
# Leaf sync
# ---------------------------------------------------------------------------

def sync_leaf(
    config: SyncConfig,
    leaf: str | Path,
    report: RunReport,
    *,
    progress: Progress | None = None,
    pruner: DirPruner | None = None,
) -> LeafResult:
    """Freshen one destination leaf directory and classify it.

    Updates *report* in place and returns the :class:`LeafResult` that was
    appended to ``report.leaves``.  Every call records exactly one status.

    Args:
        config: Run settings.
        leaf: A directory under ``config.dest`` with no subdirectories.
        report: Report to update.
        progress: Optional callable receiving :class:`SyncEvent`\\ s.
        pruner: Deletion cascade to use; one is created for ``config.dest``
            when omitted.
    """
    leaf = Path(leaf)
    if pruner is None:
        pruner = DirPruner(config.dest, dry_run=config.dry_run)
    src_dir = source_path(config.source, config.dest, leaf)

    existing = list_dir(leaf)
    if not existing.ok:
        # Unreadable is not the same as empty: fall through to the copy pass.
        _record_warning(report, progress, leaf, existing.error)
    elif config.delete_empty_before and existing.is_empty:
        if _delete_leaf(leaf, pruner, report, progress):
            return report.record(str(leaf), LeafStatus.DELETED)
        _emit(progress, EventKind.KEPT_EMPTY, leaf)
        return report.record(str(leaf), LeafStatus.SKIPPED)

    candidates = list_matching(src_dir, config.pattern)
    if not candidates.ok and not candidates.missing:
        _record_warning(report, progress, src_dir, candidates.error)

    if not candidates.files:
        if config.delete_empty and _delete_leaf(leaf, pruner, report, progress):
            return report.record(str(leaf), LeafStatus.DELETED)
        _emit(progress, EventKind.NO_MATCH, leaf)
        return report.record(str(leaf), LeafStatus.NO_MATCH)

    tally = 0
    for name in candidates.files:
        if _copy_candidate(config, src_dir / name, leaf / name, report, progress):
            tally += 1

    if tally:
        _emit(progress, EventKind.COPIED, leaf, count=tally)
        return report.record(str(leaf), LeafStatus.COPIED, copied=tally)

    if config.delete_empty and _delete_leaf(leaf, pruner, report, progress):
        return report.record(str(leaf), LeafStatus.DELETED)
    _emit(progress, EventKind.SKIPPED, leaf)
    return report.record(str(leaf), LeafStatus.SKIPPED)
