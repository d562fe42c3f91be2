"""Shared helpers and option decorators for the CLI."""

from __future__ import annotations

import click

from .._exclude import ExcludeFilter
from .._types import EventKind, SyncEvent


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj.get("verbose"):
        click.echo(msg, err=True)


def _missing_root(ctx, option: str, what: str):
    """Print the usage hint for a missing root option and exit with status 1."""
    click.echo(
        f"No {what} folder specified. Use the \"--{option}\" option to set, "
        f"or \"--help\" for help. Exiting..."
    )
    ctx.exit(1)


def _build_exclude(exclude, exclude_from) -> ExcludeFilter | None:
    """Build an ExcludeFilter from --exclude / --exclude-from.

    Returns None when no pattern is left, e.g. an exclude file holding only
    comments.
    """
    if not exclude and not exclude_from:
        return None
    try:
        ef = ExcludeFilter(patterns=exclude, exclude_from=exclude_from)
    except OSError as exc:
        raise click.ClickException(f"Cannot read exclude file: {exc}")
    return ef if ef.active else None


_LEAF_MESSAGES = {
    EventKind.SKIPPED: "Already contains matching file(s): {path}",
    EventKind.NO_MATCH: "No matching file(s) found: {path}",
    EventKind.DELETED: "Deleted empty folder: {path}",
    EventKind.KEPT_EMPTY: "Empty folder not deleted: {path}",
}


def progress_cb(ctx):
    """Return a progress callable that prints per-leaf lines as they happen."""
    prefix = "[dry-run] " if ctx.obj.get("dry_run") else ""

    def _progress(event: SyncEvent) -> None:
        if event.kind == EventKind.COPIED:
            click.echo(f"{prefix}Copied {event.count} file(s): {event.path}")
        elif event.kind in _LEAF_MESSAGES:
            click.echo(prefix + _LEAF_MESSAGES[event.kind].format(path=event.path))
        elif event.kind == EventKind.FILE:
            _status(ctx, f"{prefix}+ {event.path}")
        elif event.kind == EventKind.ERROR:
            click.echo(f"ERROR: {event.path}: {event.message}", err=True)
        elif event.kind == EventKind.WARNING:
            click.echo(f"WARNING: {event.path}: {event.message}", err=True)

    return _progress


# ---------------------------------------------------------------------------
# Option decorators
# ---------------------------------------------------------------------------

def _dry_run_option(f):
    """Shared -n/--dry-run flag."""
    return click.option(
        "-n", "--dry-run", "dry_run", is_flag=True, default=False,
        help="Show what would be copied and deleted without changing anything.",
    )(f)


def _exclude_options(f):
    """Shared --exclude / --exclude-from options."""
    f = click.option("--exclude-from", "exclude_from", type=click.Path(exists=True, dir_okay=False),
                     help="Read exclude patterns from file.")(f)
    f = click.option("--exclude", multiple=True,
                     help="Skip destination directories matching pattern "
                          "(gitignore syntax, repeatable).")(f)
    return f
