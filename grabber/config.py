"""Centralised settings for grabber.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _optional_float(raw: str | None) -> Optional[float]:
    """Parse *raw* as a float, treating unset/blank values as ``None``."""
    if raw is None or not raw.strip():
        return None
    return float(raw)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP client
    # ------------------------------------------------------------------
    # ``None`` means requests never time out.
    request_timeout: Optional[float] = field(
        default_factory=lambda: _optional_float(os.environ.get("GRABBER_REQUEST_TIMEOUT"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("GRABBER_USER_AGENT", "grabber/1.0")
    )
    max_redirects: int = field(
        default_factory=lambda: int(os.environ.get("GRABBER_MAX_REDIRECTS", "10"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("GRABBER_LOG_LEVEL", "INFO").upper()
    )


# Module-level singleton — import this everywhere:
#   from grabber.config import settings
settings = Settings()
