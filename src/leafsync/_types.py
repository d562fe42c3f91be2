"""Data structures for freshen runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._exclude import ExcludeFilter


DEFAULT_PATTERN = "?older.*"


@dataclass(frozen=True)
class SyncConfig:
    """Settings for one freshen run.

    Attributes:
        source: Root of the source tree (files are read from here).
        dest: Root of the destination tree (the tree that is walked).
        pattern: Glob matched against file names in each source leaf.
        delete_empty: Remove destination leaves that end up with nothing
            new copied into them, if they are empty.
        delete_empty_before: Remove destination leaves that are empty
            before any copy is attempted.
        maintain_original: Never overwrite an existing destination file.
        dry_run: Report what would happen without touching the disk.
        preserve_mtime: Give copied files the source modification time.
        exclude: Optional :class:`~leafsync.ExcludeFilter` for destination
            directories that should not be walked.
    """
    source: str
    dest: str
    pattern: str = DEFAULT_PATTERN
    delete_empty: bool = False
    delete_empty_before: bool = False
    maintain_original: bool = False
    dry_run: bool = False
    preserve_mtime: bool = False
    exclude: ExcludeFilter | None = None


class LeafStatus(str, Enum):
    """How a leaf directory was classified at the end of its visit.

    Members: ``COPIED``, ``SKIPPED``, ``NO_MATCH``, ``DELETED``.
    """
    COPIED = "copied"
    SKIPPED = "skipped"
    NO_MATCH = "no_match"
    DELETED = "deleted"

    def __str__(self) -> str:          # noqa: D105
        return self.value


class EventKind(str, Enum):
    """Kind of progress event passed to a ``progress`` callable."""
    COPIED = "copied"
    SKIPPED = "skipped"
    NO_MATCH = "no_match"
    DELETED = "deleted"
    KEPT_EMPTY = "kept_empty"
    FILE = "file"
    ERROR = "error"
    WARNING = "warning"

    def __str__(self) -> str:          # noqa: D105
        return self.value


@dataclass
class SyncEvent:
    """A progress notification.

    Attributes:
        kind: :class:`EventKind` value.
        path: Leaf directory, removed directory, or copied file.
        count: Files copied (``COPIED`` only), otherwise 0.
        message: Error text for ``ERROR`` / ``WARNING``, otherwise ``None``.
    """
    kind: EventKind
    path: str
    count: int = 0
    message: str | None = None


@dataclass
class ChangeError:
    """A path that failed during a run.

    Attributes:
        path: The path that caused the error.
        error: Human-readable error message.
    """
    path: str
    error: str


@dataclass
class LeafResult:
    """Outcome of visiting one leaf directory."""
    path: str
    status: LeafStatus
    copied: int = 0


@dataclass
class RunReport:
    """Result of a freshen run.

    Attributes:
        copied: Files copied (or that would be copied in a dry run).
        skipped: Leaves where nothing needed copying.
        no_match: Leaves whose source directory had no matching file.
        deleted: Directories removed, including cascaded parents.
        failed: Files whose copy raised an error.
        leaves: One :class:`LeafResult` per visited leaf, in visit order.
        errors: Per-file copy errors.
        warnings: Listing failures that were degraded rather than fatal.
    """
    copied: int = 0
    skipped: int = 0
    no_match: int = 0
    deleted: int = 0
    failed: int = 0
    leaves: list[LeafResult] = field(default_factory=list)
    errors: list[ChangeError] = field(default_factory=list)
    warnings: list[ChangeError] = field(default_factory=list)

    def record(self, leaf: str, status: LeafStatus, copied: int = 0) -> LeafResult:
        """Add the final classification of *leaf* to the report."""
        result = LeafResult(path=leaf, status=status, copied=copied)
        self.leaves.append(result)
        if status == LeafStatus.SKIPPED:
            self.skipped += 1
        elif status == LeafStatus.NO_MATCH:
            self.no_match += 1
        return result

    def summary(self) -> str:
        """Return the one-line counter summary."""
        line = (f"Copied: {self.copied}    Skipped: {self.skipped}    "
                f"No Match Found: {self.no_match}    Deleted: {self.deleted}")
        if self.failed:
            line += f"    Failed: {self.failed}"
        return line
