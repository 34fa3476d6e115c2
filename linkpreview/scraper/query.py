"""Document queries over a parsed HTML tree.

Selectors are plain CSS (``title``, ``meta[property='og:title']``) evaluated
by BeautifulSoup's soupsieve backend.  Lookups return an
:class:`~linkpreview.scraper.option.Option` so extractors can chain them.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from linkpreview.errors import ParseFailure
from linkpreview.scraper.option import Option


def parse_document(markup: str) -> BeautifulSoup:
    """Parse *markup* into a queryable tree.

    Multi-valued attributes (``rel``, ``class``) are kept as plain strings so
    that ``link[rel='icon']`` only matches an exact ``rel="icon"``.

    Raises:
        ParseFailure: If the parser rejects the markup outright.
    """
    try:
        return BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)
    except ParserRejectedMarkup as exc:
        raise ParseFailure(f"Could not parse document: {exc}") from exc


def first_match(doc: BeautifulSoup, selector: str) -> Option[Tag]:
    """Return the first element in document order matching *selector*."""
    return Option.of(doc.select_one(selector))


def attribute(element: Tag, name: str) -> Option[str]:
    """Return the decoded value of attribute *name* on *element*."""
    value = element.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return Option.of(value)


def inner_text(element: Tag) -> str:
    """Return all descendant text of *element* concatenated in document order."""
    return element.get_text()


def attr_of_first_match(doc: BeautifulSoup, selector: str, name: str) -> Option[str]:
    """``attribute(first_match(doc, selector), name)`` with short-circuiting."""
    return first_match(doc, selector).bind(lambda element: attribute(element, name))
