"""Writing downloaded pages to the destination directory."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from grabber.errors import SaveError

# Exactly ``--dst ./`` is redirected into ``./list``; ``.`` and other spellings
# are used as given.
CURRENT_DIR_TARGET = "./"
CURRENT_DIR_REDIRECT = Path("list")

PAGE_SUFFIX = ".html"


def resolve_destination(dst: str) -> Path:
    """Map the ``--dst`` value to the directory pages are written to."""
    if dst == CURRENT_DIR_TARGET:
        return CURRENT_DIR_REDIRECT
    return Path(dst)


def ensure_destination(destination: Path) -> None:
    """Create *destination* (and parents) if missing.

    Several units of work may call this at once; an existing directory is
    not an error.
    """
    destination.mkdir(parents=True, exist_ok=True)


def save_page(label: str, destination: Path, chunks: Iterable[bytes]) -> Path:
    """Copy *chunks* into ``<destination>/<label>.html`` and return its path.

    The file is created or truncated.  If the copy fails half-way the
    partial file is left on disk.

    Raises:
        SaveError: If the directory or file cannot be created or written.
    """
    path = destination / f"{label}{PAGE_SUFFIX}"
    try:
        ensure_destination(destination)
        with open(path, "wb") as fh:
            for chunk in chunks:
                fh.write(chunk)
    except OSError as exc:
        raise SaveError(path, exc) from exc
    return path
