"""File-name glob matching within a single directory."""

from __future__ import annotations

from fnmatch import fnmatchcase as _fnmatchcase


def _glob_match(pattern: str, name: str) -> bool:
    """Match a file *name* (never a path) against a glob *pattern*.

    ``*``, ``?`` and ``[...]`` are supported.  Matching is case-sensitive
    on every platform and wildcards do match a leading ``.``.
    """
    if not pattern:
        return False
    return _fnmatchcase(name, pattern)


def _filter_names(pattern: str, names) -> list[str]:
    """Return the names matching *pattern*, sorted."""
    return sorted(n for n in names if _glob_match(pattern, n))
