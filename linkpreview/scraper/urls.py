"""URL helpers: target validation, reference resolution and display hosts."""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urljoin, urlsplit

import httpx

from linkpreview.errors import InvalidInput

_FETCHABLE_SCHEMES = frozenset({"http", "https"})
# Browsers drop ASCII tab and newlines anywhere inside a URL before parsing.
_TAB_OR_NEWLINE = re.compile(r"[\t\r\n]")


def parse_target_url(value: Optional[str]) -> str:
    """Validate a caller-supplied target URL and return it.

    Raises:
        InvalidInput: If *value* is missing, blank, unparsable, not http(s),
            has no host, or is not accepted by the HTTP client.
    """
    if value is None or not value.strip():
        raise InvalidInput("Missing required query parameter 'url'.")

    url = value.strip()
    try:
        parts = urlsplit(url)
        # Accessing .port validates it (non-numeric or out of range raises).
        parts.port
    except ValueError as exc:
        raise InvalidInput(f"Malformed URL {url!r}: {exc}") from exc

    if parts.scheme.lower() not in _FETCHABLE_SCHEMES:
        raise InvalidInput(f"URL must be absolute http(s), got {url!r}.")
    if not parts.hostname:
        raise InvalidInput(f"URL has no host: {url!r}.")
    try:
        httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise InvalidInput(f"Malformed URL {url!r}: {exc}") from exc
    return url


def resolve(base: str, reference: str) -> Optional[str]:
    """Resolve *reference* against *base* and return an absolute URL.

    Returns ``None`` when the reference cannot be resolved (malformed input)
    or the result would not be absolute.  Never touches the network.
    """
    cleaned = _TAB_OR_NEWLINE.sub("", reference).strip()
    try:
        joined = urljoin(base, cleaned)
        parts = urlsplit(joined)
    except ValueError:
        return None
    if not parts.scheme:
        return None
    return joined


def canonical_host(url: str) -> Optional[str]:
    """Return the host of *url* with one leading ``www.`` label removed.

    The match is literal and case-sensitive; nothing else is normalised, so
    ``shop.www.example.com`` comes back unchanged.
    """
    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        return None

    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        host = host[: host.find("]") + 1] if "]" in host else host
    else:
        host = host.partition(":")[0]

    if not host:
        return None
    if host.startswith("www."):
        host = host[len("www."):]
    return host or None
