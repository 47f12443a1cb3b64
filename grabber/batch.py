"""Batch grabbing: one unit of work per URL, all of them in parallel.

Public functions
----------------
``read_urls`` — load the URL list, skipping blank lines.
``grab_url``  — fetch one URL and save its body under its domain label.
``grab_all``  — fan out ``grab_url`` over every URL and wait for all of them.

The thread pool is sized to the URL list, so every request is in flight at
once.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Union

import httpx

from grabber.config import Settings
from grabber.errors import GrabberError, InvalidURLError
from grabber.scraper import build_client, domain_label, open_page, save_page
from grabber.scraper.models import GrabResult

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "File copied successfully to {path}"


def read_urls(path: Union[str, Path]) -> list[str]:
    """Return the trimmed, non-blank lines of *path* in file order.

    Bytes that are not valid UTF-8 are replaced with U+FFFD, so a stray byte
    only affects its own line.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    urls: list[str] = []
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        for line in fh:
            line = line.strip()
            if line:
                urls.append(line)
    return urls


def grab_url(client: httpx.Client, url: str, destination: Path) -> Path:
    """Fetch *url* and write its body to ``<destination>/<label>.html``.

    Raises:
        InvalidURLError: If no domain label can be derived from *url*.
        UnexpectedStatusError: If the response is not ``200 OK``.
        SaveError: If the file cannot be written.
        httpx.HTTPError: On network failure.
    """
    label = domain_label(url)
    with open_page(client, url) as response:
        path = save_page(label, destination, response.iter_bytes())
    print(SUCCESS_MESSAGE.format(path=path))
    return path


def _failed(url: str, exc: BaseException) -> GrabResult:
    """Build the result for a failed URL, keeping its label when it has one."""
    try:
        label = domain_label(url)
    except InvalidURLError:
        label = None
    return GrabResult(url=url, label=label, error=exc)


def grab_all(
    urls: list[str],
    destination: Path,
    settings: Settings | None = None,
) -> list[GrabResult]:
    """Grab every URL in *urls* concurrently and return one result per URL.

    Results come back in completion order.  A failing URL is logged and
    recorded; it never stops the others.
    """
    results: list[GrabResult] = []

    with build_client(settings) as client:
        with ThreadPoolExecutor(max_workers=len(urls) or 1) as pool:
            future_to_url = {
                pool.submit(grab_url, client, url, destination): url for url in urls
            }
            for future in as_completed(future_to_url):
                url = future_to_url[future]
                try:
                    path = future.result()
                except GrabberError as exc:
                    logger.error("%s", exc)
                    results.append(_failed(url, exc))
                except httpx.HTTPError as exc:
                    logger.error("Error fetching URL %s: %s", url, exc)
                    results.append(_failed(url, exc))
                except Exception as exc:
                    logger.error("Unexpected error for %s: %s", url, exc)
                    results.append(_failed(url, exc))
                else:
                    results.append(GrabResult(url=url, label=path.stem, path=path))

    return results
