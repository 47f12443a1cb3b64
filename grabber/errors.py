"""Errors raised while grabbing a single URL.

Each of these aborts only the unit of work that raised it; the batch runner
logs it and carries on with the other URLs.  Network failures are not
wrapped: they surface as ``httpx.HTTPError``.
"""

from __future__ import annotations

from pathlib import Path


class GrabberError(Exception):
    """Base class for per-URL failures."""


class InvalidURLError(GrabberError):
    """The URL could not be parsed or has no host to name the file after."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        message = f"Error: no such site with name: {url}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnexpectedStatusError(GrabberError):
    """The server answered with something other than ``200 OK``."""

    def __init__(self, url: str, status_code: int) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Unexpected status code for URL {url}: {status_code}")


class SaveError(GrabberError):
    """The response body could not be written to disk."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Error saving to {path}: {cause}")
