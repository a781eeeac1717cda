"""GPX file commands."""

from __future__ import annotations

from pathlib import Path

import click
from loguru import logger
from pydantic import ValidationError

from ..common.errors import GPXDecodeError, GPXEncodeError
from ..common.settings import CodecSettings
from .parser import parse_file, write_file
from .summary import summarize

_FILE_ARGUMENT = click.Path(exists=True, dir_okay=False, path_type=Path)


def _load(path: Path):
    try:
        return parse_file(path)
    except GPXDecodeError as exc:
        raise click.ClickException(f"{path}: {exc}") from exc
    except OSError as exc:
        raise click.ClickException(f"Cannot read {path}: {exc}") from exc


@click.group()
def gpx():
    """Inspect, check and rewrite GPX files"""
    pass


@gpx.command()
@click.argument("path", type=_FILE_ARGUMENT)
def inspect(path: Path):
    """Print element counts and the time span of a GPX file."""
    summary = summarize(_load(path))

    click.echo(f"File:         {path}")
    click.echo(f"Version:      {summary.version or '-'}")
    click.echo(f"Creator:      {summary.creator or '-'}")
    if summary.name:
        click.echo(f"Name:         {summary.name}")
    click.echo(f"Waypoints:    {summary.waypoints}")
    click.echo(f"Routes:       {summary.routes} ({summary.route_points} points)")
    click.echo(
        f"Tracks:       {summary.tracks} "
        f"({summary.segments} segments, {summary.track_points} points)"
    )
    if summary.start_time and summary.end_time:
        click.echo(f"Start:        {summary.start_time.isoformat()}")
        click.echo(f"End:          {summary.end_time.isoformat()}")
        click.echo(f"Duration:     {summary.duration_seconds:.0f}s")


@gpx.command()
@click.argument("path", type=_FILE_ARGUMENT)
def check(path: Path):
    """Exit with an error unless PATH decodes as a GPX document."""
    _load(path)
    logger.info(f"{path} is a readable GPX document")
    click.echo("OK")


@gpx.command()
@click.argument("path", type=_FILE_ARGUMENT)
@click.option(
    "-o",
    "--output",
    "output",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to write the re-encoded document",
)
@click.option("--compact", is_flag=True, help="Write without indentation")
def reformat(path: Path, output: Path, compact: bool):
    """Decode PATH and write it back out in canonical GPX 1.1 form.

    Elements gpxkit does not model (other vendor extensions, for example)
    are dropped.
    """
    document = _load(path)
    try:
        settings = CodecSettings()
    except ValidationError as exc:
        raise click.ClickException(f"Invalid GPXKIT_* settings: {exc}") from exc
    if compact:
        settings = settings.model_copy(update={"pretty_print": False})

    try:
        written = write_file(document, output, settings)
    except GPXEncodeError as exc:
        raise click.ClickException(str(exc)) from exc
    except OSError as exc:
        raise click.ClickException(f"Cannot write {output}: {exc}") from exc

    logger.info(f"Wrote {written}")
