"""Preview endpoint.

Routes
------
GET /?url=<percent-encoded absolute URL>
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Header, HTTPException, Request
from pydantic import BaseModel

from linkpreview.errors import FetchFailure, InvalidInput, ParseFailure
from linkpreview.service import handle_preview

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class PreviewResponse(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    domain: Optional[str] = None
    favicon: Optional[str] = None
    image: Optional[str] = None
    og_url: Optional[str] = None
    sitename: Optional[str] = None
    type: Optional[str] = None


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.get("/", response_model=PreviewResponse)
async def preview(
    request: Request,
    url: Optional[str] = None,
    user_agent: Optional[str] = Header(default=None),
) -> dict[str, Any]:
    """Fetch *url* and return its preview metadata.

    The caller's ``User-Agent`` header is forwarded to the target site; the
    configured default is used when it is absent.

    Status codes: 400 for a missing or malformed ``url``, 502 when the page
    cannot be fetched, 422 when its body cannot be parsed.
    """
    fetcher = request.app.state.fetcher
    try:
        result = await handle_preview(fetcher, url, user_agent=user_agent)
    except InvalidInput as exc:
        logger.warning("Rejected preview request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except FetchFailure as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except ParseFailure as exc:
        logger.warning("Unparseable document at %s: %s", url, exc)
        raise HTTPException(
            status_code=422, detail=f"Upstream content could not be parsed: {exc}"
        ) from exc
    return result.to_dict()
