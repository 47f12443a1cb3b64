"""HTTP fetching: one shared client per batch, one GET per URL."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import httpx

from grabber.config import Settings, settings as default_settings
from grabber.errors import UnexpectedStatusError


def build_client(settings: Settings | None = None) -> httpx.Client:
    """Return an ``httpx.Client`` configured from *settings*.

    The connection pool is left uncapped: every URL in a batch gets its own
    connection, however many there are.
    """
    settings = settings or default_settings
    return httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=httpx.Timeout(settings.request_timeout),
        follow_redirects=True,
        max_redirects=settings.max_redirects,
        limits=httpx.Limits(max_connections=None, max_keepalive_connections=None),
    )


@contextmanager
def open_page(client: httpx.Client, url: str) -> Iterator[httpx.Response]:
    """Issue a streamed GET for *url* and yield the response.

    The body has not been read when the response is yielded; callers pull it
    with ``response.iter_bytes()`` while the context is open.

    Raises:
        UnexpectedStatusError: If the final status is anything but ``200``.
        httpx.HTTPError: On connection, timeout or protocol failures.
    """
    with client.stream("GET", url) as response:
        if response.status_code != httpx.codes.OK:
            raise UnexpectedStatusError(url, response.status_code)
        yield response
