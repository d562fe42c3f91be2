"""leafsync: freshen the leaf directories of one tree from a parallel tree."""

from ._exclude import ExcludeFilter
from ._types import (
    DEFAULT_PATTERN,
    ChangeError,
    EventKind,
    LeafResult,
    LeafStatus,
    RunReport,
    SyncConfig,
    SyncEvent,
)
from .exceptions import TraversalError
from .prune import DirPruner
from .sync import should_copy, sync_leaf
from .walk import freshen, iter_leaves

__version__ = "0.1.0"

__all__ = [
    "freshen", "iter_leaves", "sync_leaf", "should_copy", "DirPruner",
    "SyncConfig", "RunReport", "LeafResult", "LeafStatus",
    "SyncEvent", "EventKind", "ChangeError", "ExcludeFilter",
    "TraversalError", "DEFAULT_PATTERN",
]
