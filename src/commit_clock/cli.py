"""Command-line entry point."""

from __future__ import annotations

import asyncio
import logging
import os
import sys

import click
from dotenv import load_dotenv
from rich.logging import RichHandler

from . import __version__
from .config import Settings
from .errors import ConfigError
from .orchestrator import run


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _load_env_file(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    # Runs before the env-backed options are resolved; real env vars win.
    if value and os.path.isfile(value):
        load_dotenv(value)
    return value


@click.command()
@click.option("--env-file", default=".env", show_default=True, is_eager=True, expose_value=False,
              callback=_load_env_file, type=click.Path(dir_okay=False),
              help="Read GH_TOKEN, GIST_ID and TIMEZONE from this file if it exists.")
@click.option("--token", envvar=["GH_TOKEN", "GITHUB_TOKEN"], required=True, help="GitHub token (or GH_TOKEN env var).")
@click.option("--gist-id", envvar="GIST_ID", default=None, help="Gist to overwrite (or GIST_ID env var).")
@click.option("--timezone", "timezone_name", envvar="TIMEZONE", default=None,
              help="IANA timezone, e.g. Asia/Seoul (or TIMEZONE env var). Defaults to local time.")
@click.option("--dry-run", is_flag=True, default=False, help="Render the report locally without updating the gist.")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Preview format for --dry-run.")
@click.option("--output", "output_file", default=None, help="Save the --dry-run preview to a file.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.version_option(version=__version__)
def main(
    token: str,
    gist_id: str | None,
    timezone_name: str | None,
    dry_run: bool,
    output_format: str,
    output_file: str | None,
    verbose: bool,
) -> None:
    """Publish the time of day you commit code to a GitHub gist."""
    settings = Settings(token=token, gist_id=gist_id, timezone=timezone_name or None)
    try:
        settings.validate(require_gist=not dry_run)
    except ConfigError as e:
        raise click.UsageError(str(e)) from e

    _configure_logging(verbose)

    status = asyncio.run(run(
        settings,
        dry_run=dry_run,
        output_format=output_format,
        output_file=output_file,
    ))
    sys.exit(status)
