"""Link preview CLI — entry-point for running and exercising the service.

Usage:
    python cli/main.py --help

Commands:
    serve   → run the HTTP API under uvicorn
    fetch   → preview a single URL and print the JSON result
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linkpreview.xxx
# import ...` works when the CLI is invoked as `python cli/main.py` from any
# working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import json
from typing import Optional

import typer

from linkpreview.config import settings
from linkpreview.errors import PreviewError
from linkpreview.logging_setup import configure_logging
from linkpreview.scraper.fetcher import Fetcher
from linkpreview.scraper.models import MetadataResult
from linkpreview.service import handle_preview

app = typer.Typer(
    name="linkpreview",
    help="Link preview service CLI.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    hostname: str = typer.Option(settings.host, help="Interface to bind."),
    port: int = typer.Option(settings.port, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Restart on code changes (development)."),
) -> None:
    """Run the preview API with uvicorn."""
    import uvicorn

    configure_logging(settings.log_level)
    typer.echo(f"[serve] Listening on http://{hostname}:{port}/")
    uvicorn.run(
        "linkpreview.api.app:app",
        host=hostname,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


# ---------------------------------------------------------------------------
# One-off preview
# ---------------------------------------------------------------------------
async def _preview_once(url: str, user_agent: Optional[str]) -> MetadataResult:
    fetcher = Fetcher(
        default_user_agent=settings.default_user_agent,
        timeout=settings.fetch_timeout,
    )
    try:
        return await handle_preview(fetcher, url, user_agent=user_agent)
    finally:
        await fetcher.aclose()


@app.command("fetch")
def fetch(
    url: str = typer.Option(..., help="Absolute http(s) URL to preview."),
    user_agent: Optional[str] = typer.Option(
        None, "--user-agent", help="User-Agent to send instead of the default."
    ),
) -> None:
    """Fetch a URL and print its preview metadata as JSON."""
    try:
        result = asyncio.run(_preview_once(url, user_agent))
    except PreviewError as exc:
        typer.echo(f"[fetch] {type(exc).__name__}: {exc}", err=True)
        raise typer.Exit(1)
    typer.echo(json.dumps(result.to_dict(), indent=2))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
