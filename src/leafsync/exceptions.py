"""Exceptions for leafsync."""


class TraversalError(Exception):
    """Raised when the destination tree cannot be walked at all.

    This aborts the whole run.  Failures confined to a single leaf are
    recorded on the :class:`~leafsync.RunReport` instead.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot walk {path}: {reason}")
        self.path = path
        self.reason = reason
