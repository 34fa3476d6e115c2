"""Fetch-and-extract pipeline for a single preview request.

``handle_preview`` orchestrates one request end to end:

    validate URL → fetch → parse → extract fields → MetadataResult
"""

from __future__ import annotations

import logging
from typing import Optional

from linkpreview.scraper.extractor import extract_metadata
from linkpreview.scraper.fetcher import Fetcher
from linkpreview.scraper.models import MetadataResult
from linkpreview.scraper.query import parse_document
from linkpreview.scraper.urls import parse_target_url

logger = logging.getLogger(__name__)


async def handle_preview(
    fetcher: Fetcher,
    requested_url: Optional[str],
    user_agent: Optional[str] = None,
) -> MetadataResult:
    """Fetch *requested_url* and extract its preview metadata.

    Pipeline:
        1. :func:`~linkpreview.scraper.urls.parse_target_url` — reject bad
           input before any network I/O.
        2. :meth:`~linkpreview.scraper.fetcher.Fetcher.fetch` — exactly one
           GET, identified as *user_agent* or the fetcher's default.
        3. :func:`~linkpreview.scraper.query.parse_document`.
        4. :func:`~linkpreview.scraper.extractor.extract_metadata`.

    Raises:
        InvalidInput: *requested_url* is not an absolute http(s) URL.
        FetchFailure: The page could not be retrieved.
        ParseFailure: The body could not be parsed at all.
    """
    target_url = parse_target_url(requested_url)

    raw = await fetcher.fetch(target_url, user_agent=user_agent)
    doc = parse_document(raw.html)
    result = extract_metadata(doc, target_url)

    fields = result.to_dict()
    found = sum(value is not None for value in fields.values())
    logger.info("Extracted %d/%d preview fields from %s", found, len(fields), target_url)
    return result
