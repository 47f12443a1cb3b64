"""Data models for the grab pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class GrabResult:
    """The outcome of one unit of work (a single URL).

    ``label`` is set whenever one could be derived from the URL, failed
    fetches included; ``path`` only on success.
    """

    url: str
    label: Optional[str] = None
    path: Optional[Path] = None
    error: Optional[BaseException] = None

    @property
    def success(self) -> bool:
        return self.error is None and self.path is not None
