"""Request-level failures raised by the preview pipeline.

Field-level absence is never an error; only these three kinds abort a
request, and the HTTP layer maps each to its own status code.
"""

from __future__ import annotations

from typing import Optional


class PreviewError(Exception):
    """Base class for every failure that aborts a preview request."""


class InvalidInput(PreviewError):
    """The requested URL is missing or not an absolute http(s) URL."""


class FetchFailure(PreviewError):
    """The target page could not be retrieved (transport error or non-2xx)."""

    def __init__(self, url: str, detail: str, status_code: Optional[int] = None) -> None:
        super().__init__(f"Failed to fetch {url}: {detail}")
        self.url = url
        self.detail = detail
        self.status_code = status_code


class ParseFailure(PreviewError):
    """The fetched body could not be turned into a document tree at all."""
