"""leafsync CLI: freshen leaf directories from a parallel tree."""

from ._freshen import main  # noqa: F401  entry point
