"""Scraper package — page fetch, document queries & metadata extraction."""

from linkpreview.scraper.extractor import extract_metadata
from linkpreview.scraper.fetcher import Fetcher
from linkpreview.scraper.models import MetadataResult, RawPage
from linkpreview.scraper.query import parse_document

__all__ = ["Fetcher", "extract_metadata", "parse_document", "MetadataResult", "RawPage"]
