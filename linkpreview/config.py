"""Centralised settings for the link preview service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux i686; rv:112.0) Gecko/20100101 Firefox/112.0"
)


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP server
    # ------------------------------------------------------------------
    host: str = field(
        default_factory=lambda: os.environ.get("LINKPREVIEW_HOST", "localhost")
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("LINKPREVIEW_PORT", "3001"))
    )
    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.environ.get("CORS_ORIGINS", "*"))
    )

    # ------------------------------------------------------------------
    # Outbound fetch
    # ------------------------------------------------------------------
    default_user_agent: str = field(
        default_factory=lambda: os.environ.get("DEFAULT_USER_AGENT", DEFAULT_USER_AGENT)
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "10.0"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )

    @property
    def fetch_timeout(self) -> Optional[float]:
        """Timeout handed to the HTTP client; ``None`` when disabled (``0``)."""
        return self.request_timeout if self.request_timeout > 0 else None


# Module-level singleton, import this everywhere:
#   from linkpreview.config import settings
settings = Settings()
