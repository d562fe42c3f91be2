"""The leafsync command."""

from __future__ import annotations

import click

from .. import __version__
from .._types import DEFAULT_PATTERN, RunReport, SyncConfig
from ..exceptions import TraversalError
from ..walk import freshen
from ._helpers import (
    _build_exclude,
    _dry_run_option,
    _exclude_options,
    _missing_root,
    _status,
    progress_cb,
)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--source", type=click.Path(file_okay=False), envvar="LEAFSYNC_SOURCE",
              help="Root of the source tree (or set LEAFSYNC_SOURCE). "
                   "Must have the same hierarchy as --dest.")
@click.option("--dest", type=click.Path(file_okay=False), envvar="LEAFSYNC_DEST",
              help="Root of the destination tree (or set LEAFSYNC_DEST). "
                   "Only its leaf directories receive files.")
@click.option("--ext", "pattern", default=DEFAULT_PATTERN, show_default=True,
              help="Glob matched against file names in each source leaf.")
@click.option("--delete", "delete_empty", is_flag=True, default=False,
              help="Delete destination leaves that are still empty after the copy pass.")
@click.option("--before", "delete_empty_before", is_flag=True, default=False,
              help="Delete destination leaves that are empty before copying.")
@click.option("--maintain", "maintain_original", is_flag=True, default=False,
              help="Never overwrite files that already exist in the destination.")
@_dry_run_option
@click.option("--preserve-times", "preserve_times", is_flag=True, default=False,
              help="Give copied files the modification time of their source.")
@_exclude_options
@click.option("-v", "--verbose", is_flag=True, help="Verbose output on stderr.")
@click.version_option(__version__, prog_name="leafsync")
@click.pass_context
def main(ctx, source, dest, pattern, delete_empty, delete_empty_before,
         maintain_original, dry_run, preserve_times, exclude, exclude_from, verbose):
    """Copy matching files from SOURCE leaves into the DEST tree.

    Both trees must share the same structure.  Every leaf directory of
    the destination (one with no subdirectories) is matched to the same
    relative directory in the source, and source files whose names match
    --ext are copied in when missing or newer.

    \b
    Example:
      leafsync --source /orig --dest /music --ext "*.flac" --delete
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["dry_run"] = dry_run

    if not source:
        _missing_root(ctx, "source", "source")
    if not dest:
        _missing_root(ctx, "dest", "destination")

    config = SyncConfig(
        source=source,
        dest=dest,
        pattern=pattern,
        delete_empty=delete_empty,
        delete_empty_before=delete_empty_before,
        maintain_original=maintain_original,
        dry_run=dry_run,
        preserve_mtime=preserve_times,
        exclude=_build_exclude(exclude, exclude_from),
    )
    _status(ctx, f"Freshening {dest} from {source} ({pattern})")

    try:
        report = freshen(config, progress=progress_cb(ctx))
    except ValueError as exc:
        raise click.ClickException(str(exc))
    except TraversalError as exc:
        click.echo(f"An error occurred: {exc}")
        report = RunReport()

    click.echo(report.summary())
