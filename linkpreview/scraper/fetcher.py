"""HTTP fetch capability shared by every in-flight preview request."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from linkpreview.errors import FetchFailure, InvalidInput
from linkpreview.scraper.models import RawPage

logger = logging.getLogger(__name__)


class Fetcher:
    """Fetches pages through one pooled :class:`httpx.AsyncClient`.

    Build it once at startup and share it.  The client is never reconfigured
    after construction: the per-request user agent travels as a request
    header, so concurrent requests cannot see each other's settings.

    Args:
        default_user_agent: Sent when the caller does not supply one.
        timeout: Client timeout in seconds; ``None`` disables it.
        client: Optional pre-built client (tests, custom transports).  A
            client passed in is not closed by :meth:`aclose`.
    """

    def __init__(
        self,
        default_user_agent: str,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.default_user_agent = default_user_agent
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
        )

    async def fetch(self, url: str, user_agent: Optional[str] = None) -> RawPage:
        """GET *url* once and return its body as a :class:`RawPage`.

        Raises:
            InvalidInput: If *user_agent* cannot be sent as a Latin-1 header.
            FetchFailure: On any transport error, a non-2xx final status or a
                URL (including a redirect target) the client cannot build.
        """
        agent = user_agent or self.default_user_agent
        try:
            # Latin-1 bytes: forwarded exactly as the incoming header was decoded.
            headers = {"User-Agent": agent.encode("latin-1")}
        except UnicodeEncodeError as exc:
            raise InvalidInput(f"User-Agent is not a valid header value: {agent!r}") from exc
        try:
            response = await self._client.get(url, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("Fetch of %s returned HTTP %s", url, status)
            raise FetchFailure(url, f"HTTP {status}", status_code=status) from exc
        except httpx.InvalidURL as exc:
            logger.warning("Fetch of %s rejected by client: %s", url, exc)
            raise FetchFailure(url, f"Invalid URL: {exc}") from exc
        except httpx.HTTPError as exc:
            logger.warning("Fetch of %s failed: %r", url, exc)
            raise FetchFailure(url, str(exc) or type(exc).__name__) from exc

        logger.debug(
            "Fetched %s -> HTTP %s (%d bytes)",
            url,
            response.status_code,
            len(response.content),
        )
        return RawPage(url=url, html=response.text, status_code=response.status_code)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
