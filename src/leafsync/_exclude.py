"""Exclude-filter support for the destination walk.

Combines ``--exclude`` patterns and ``--exclude-from`` files into a single
predicate checked against each directory's path relative to the
destination root.  Excluded directories are neither synced nor descended
into.

Pattern syntax follows gitignore rules (implemented by
``dulwich.ignore.IgnoreFilter``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from dulwich.ignore import IgnoreFilter


class ExcludeFilter:
    """Combines --exclude patterns and --exclude-from files."""

    def __init__(
        self,
        *,
        patterns: Sequence[str] | None = None,
        exclude_from: str | None = None,
    ) -> None:
        lines: list[bytes] = []
        for p in patterns or ():
            lines.append(p.encode("utf-8"))
        if exclude_from is not None:
            path = Path(exclude_from)
            for raw in path.read_bytes().splitlines():
                line = raw.strip()
                if line and not line.startswith(b"#"):
                    lines.append(line)
        self._patterns = lines
        self._filter: IgnoreFilter | None = IgnoreFilter(lines) if lines else None

    def __repr__(self) -> str:
        return f"ExcludeFilter({[p.decode('utf-8', 'replace') for p in self._patterns]!r})"

    @property
    def active(self) -> bool:
        """True if any pattern is configured."""
        return self._filter is not None

    def is_excluded(self, rel_path: str) -> bool:
        """Check the directory *rel_path* (forward slashes, relative to the root)."""
        if self._filter is None or not rel_path:
            return False
        return self._filter.is_ignored(rel_path + "/") is True
