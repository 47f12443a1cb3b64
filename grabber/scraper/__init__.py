"""Scraper package — URL naming, fetch & page storage."""

from grabber.scraper.fetcher import build_client, open_page
from grabber.scraper.models import GrabResult
from grabber.scraper.naming import domain_label
from grabber.scraper.storage import ensure_destination, resolve_destination, save_page

__all__ = [
    "build_client",
    "open_page",
    "domain_label",
    "resolve_destination",
    "ensure_destination",
    "save_page",
    "GrabResult",
]
