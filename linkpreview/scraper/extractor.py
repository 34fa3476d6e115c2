"""Metadata extraction: turns a parsed page into a :class:`MetadataResult`.

Every field has its own extractor ``(doc, target_url) -> str | None``.
Extractors are independent of each other and never raise; a missing tag,
a missing attribute or an unresolvable URL simply leaves the field empty.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from bs4 import BeautifulSoup

from linkpreview.scraper.models import MetadataResult
from linkpreview.scraper.option import Option
from linkpreview.scraper.query import attr_of_first_match, first_match, inner_text
from linkpreview.scraper.urls import canonical_host, resolve

FieldExtractor = Callable[[BeautifulSoup, str], Optional[str]]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _og(doc: BeautifulSoup, prop: str) -> Option[str]:
    """``content`` of the first ``<meta property="og:{prop}">``."""
    return attr_of_first_match(doc, f"meta[property='og:{prop}']", "content")


def _absolute(target_url: str) -> Callable[[str], Option[str]]:
    return lambda reference: Option.of(resolve(target_url, reference))


# ---------------------------------------------------------------------------
# Field extractors
# ---------------------------------------------------------------------------

def extract_title(doc: BeautifulSoup, target_url: str) -> Optional[str]:
    """``og:title``, falling back to the text of the ``<title>`` element."""
    return (
        _og(doc, "title")
        .or_else(lambda: first_match(doc, "title").map(inner_text))
        .get()
    )


def extract_description(doc: BeautifulSoup, target_url: str) -> Optional[str]:
    return _og(doc, "description").get()


def extract_domain(doc: BeautifulSoup, target_url: str) -> Optional[str]:
    """Display host of the requested URL; the document is not consulted."""
    return canonical_host(target_url)


def extract_favicon(doc: BeautifulSoup, target_url: str) -> Optional[str]:
    return (
        attr_of_first_match(doc, "link[rel='icon']", "href")
        .bind(_absolute(target_url))
        .get()
    )


def extract_image(doc: BeautifulSoup, target_url: str) -> Optional[str]:
    return _og(doc, "image").bind(_absolute(target_url)).get()


def extract_canonical_url(doc: BeautifulSoup, target_url: str) -> Optional[str]:
    """``og:url`` exactly as written in the page, relative or not."""
    return _og(doc, "url").get()


def extract_site_name(doc: BeautifulSoup, target_url: str) -> Optional[str]:
    return _og(doc, "site_name").get()


def extract_content_type(doc: BeautifulSoup, target_url: str) -> Optional[str]:
    return _og(doc, "type").get()


# Keyed by MetadataResult field name.
FIELD_EXTRACTORS: Dict[str, FieldExtractor] = {
    "title": extract_title,
    "description": extract_description,
    "domain": extract_domain,
    "favicon": extract_favicon,
    "image": extract_image,
    "canonical_url": extract_canonical_url,
    "site_name": extract_site_name,
    "content_type": extract_content_type,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_metadata(doc: BeautifulSoup, target_url: str) -> MetadataResult:
    """Run every field extractor over *doc* and assemble the result.

    Args:
        doc: Parsed page, see :func:`~linkpreview.scraper.query.parse_document`.
        target_url: The URL that was requested; base for relative references
            and the sole source of ``domain``.
    """
    fields = {name: extractor(doc, target_url) for name, extractor in FIELD_EXTRACTORS.items()}
    return MetadataResult(**fields)
