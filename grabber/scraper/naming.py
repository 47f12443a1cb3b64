"""Domain labels: the file stem each downloaded page is saved under."""

from __future__ import annotations

import httpx

from grabber.errors import InvalidURLError

_WWW_PREFIX = "www."


def domain_label(url: str) -> str:
    """Return the domain label for *url*.

    The host is taken from the parsed URL, a leading ``www.`` is dropped and
    everything from the first remaining dot onwards is cut off, so
    ``https://www.example.com/page`` becomes ``example``.  A host without a
    dot (``http://localhost``) is returned whole.  The port is not part of
    the label, and the host is compared lowercased, so ``WWW.Example.com``
    also gives ``example``.

    Raises:
        InvalidURLError: If *url* cannot be parsed, has no host, or its host
            starts with a dot.
    """
    try:
        host = httpx.URL(url).host
    except httpx.InvalidURL as exc:
        raise InvalidURLError(url, str(exc)) from exc

    if host.startswith(_WWW_PREFIX):
        host = host[len(_WWW_PREFIX):]
    if not host:
        raise InvalidURLError(url)

    label = host.split(".", 1)[0]
    if not label:
        raise InvalidURLError(url, "empty domain label")
    return label
