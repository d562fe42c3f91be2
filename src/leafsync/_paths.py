"""Structural mapping between the destination and source trees."""

from __future__ import annotations

import os
from pathlib import Path


def _norm(path: str | Path) -> Path:
    return Path(os.path.abspath(path))


def relative_key(root: str | Path, path: str | Path) -> str:
    """Return *path* relative to *root* with forward slashes.

    The root itself maps to ``""``.  Raises ``ValueError`` when *path*
    is not *root* or below it.
    """
    try:
        rel = _norm(path).relative_to(_norm(root))
    except ValueError:
        raise ValueError(f"{path} is not under {root}") from None
    key = rel.as_posix()
    return "" if key == "." else key


def source_path(source_root: str | Path, dest_root: str | Path,
                leaf: str | Path) -> Path:
    """Map a destination *leaf* to the same relative location under *source_root*."""
    key = relative_key(dest_root, leaf)
    base = Path(source_root)
    return base.joinpath(*key.split("/")) if key else base


def is_within(root: str | Path, path: str | Path) -> bool:
    """True if *path* is *root* or one of its descendants."""
    try:
        relative_key(root, path)
    except ValueError:
        return False
    return True


def same_path(a: str | Path, b: str | Path) -> bool:
    """Compare two paths after making them absolute and normalized."""
    return _norm(a) == _norm(b)
