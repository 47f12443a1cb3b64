"""grabber CLI — download every URL in a list file into a directory.

Usage:
    grabber --src urls.txt --dst pages/

Each non-blank line of ``--src`` is fetched in parallel and saved as
``<dst>/<domain-label>.html``.  ``--dst ./`` writes into ``./list``.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from grabber.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
import time

import typer

from grabber.batch import grab_all, read_urls
from grabber.config import settings
from grabber.scraper import ensure_destination, resolve_destination

USAGE_ERROR = (
    "Error: Source file path and destination directory path must be specified. "
    "Use --src and --dst flags to specify them."
)

app = typer.Typer(
    name="grabber",
    help="Download a list of URLs concurrently, one HTML file per domain.",
    add_completion=False,
)


def _setup_logging() -> None:
    """Send log records to stderr, timestamped."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
        stream=sys.stderr,
    )


@app.command()
def grab(
    ctx: typer.Context,
    src: str = typer.Option("", "--src", help="Source file path (one URL per line)."),
    dst: str = typer.Option("", "--dst", help="Destination directory path."),
) -> None:
    """Fetch every URL listed in SRC and save the bodies under DST."""
    start = time.perf_counter()

    if not src or not dst:
        typer.echo(USAGE_ERROR, err=True)
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit(code=2)

    _setup_logging()

    try:
        urls = read_urls(src)
    except OSError as exc:
        typer.echo(f"Error opening source file: {exc}", err=True)
        raise typer.Exit(code=1)

    destination = resolve_destination(dst)
    try:
        ensure_destination(destination)
    except OSError as exc:
        typer.echo(f"Error creating folder {destination}: {exc}", err=True)
        raise typer.Exit(code=1)

    grab_all(urls, destination)

    elapsed = time.perf_counter() - start
    typer.echo(f"\nProgram execution time: {elapsed:.3f}s")


if __name__ == "__main__":
    app()
