"""
Main CLI entry point for gpxkit
"""

import logging

import click
from loguru import logger

from . import __version__
from .gpx.cli import gpx


class InterceptHandler(logging.Handler):
    """Redirect standard logging records to loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


@click.group()
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output (DEBUG level logging).",
)
@click.version_option(version=__version__)
def cli(verbose: bool):
    """gpxkit - read and write GPX 1.1 files

    Decode GPX documents into typed records and write them back out.
    """
    logger.remove()  # Remove default handler
    log_level = "DEBUG" if verbose else "INFO"

    logging_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(handlers=[InterceptHandler()], level=logging_level, force=True)

    logger.add(
        lambda msg: click.echo(msg, err=True, nl=False),
        format="{time:YYYY-MM-DD HH:mm:ss}  [<level>{level:<8}</level>]  {message}",
        level=log_level,
        colorize=True,
    )


cli.add_command(gpx)


if __name__ == "__main__":
    cli()
