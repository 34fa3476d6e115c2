"""Data models for the preview pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class MetadataResult:
    """Preview fields extracted from one page.

    Every field is independently optional; a page without any recognisable
    metadata still yields a valid, all-``None`` result.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    domain: Optional[str] = None
    favicon: Optional[str] = None
    image: Optional[str] = None
    canonical_url: Optional[str] = None
    site_name: Optional[str] = None
    content_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Return the JSON response mapping (``og_url``, ``sitename``, ``type``)."""
        return {
            "title": self.title,
            "description": self.description,
            "domain": self.domain,
            "favicon": self.favicon,
            "image": self.image,
            "og_url": self.canonical_url,
            "sitename": self.site_name,
            "type": self.content_type,
        }
