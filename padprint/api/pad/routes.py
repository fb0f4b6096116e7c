from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, HTTPException, Request, Response
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from padprint.core.config import settings
from padprint.services.pad.service import DisallowedSourceError, PadService
from padprint.workers.fetcher import FetchError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pad"])

templates = Jinja2Templates(
    directory=str(Path(__file__).resolve().parent.parent.parent / "templates")
)

DISALLOWED_MESSAGE = "Ce domaine n'est pas autorisé."
MISSING_URL_MESSAGE = "Veuillez indiquer l'adresse d'un pad."


# ---------------------------------------------------------------------------
# Dependency
# ---------------------------------------------------------------------------


def _get_service() -> PadService:
    """FastAPI dependency that builds a ``PadService`` for each request."""
    return PadService(settings)


def _index(request: Request, error: str | None = None) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "seo": request.app.state.seo,
            "base_pad_url": settings.base_pad_url,
            "error": error,
        },
    )


# ---------------------------------------------------------------------------
# GET /
# ---------------------------------------------------------------------------


@router.get("/", response_class=HTMLResponse, summary="Pad submission form")
async def index(request: Request) -> HTMLResponse:
    return _index(request)


# ---------------------------------------------------------------------------
# POST /
# ---------------------------------------------------------------------------


@router.post("/", response_class=HTMLResponse, summary="Submit a pad URL")
async def submit(
    request: Request,
    url: str = Form(""),
    service: PadService = Depends(_get_service),
) -> Response:
    """Redirect to the print page of an allowed pad.

    - **302**: URL allowed, redirect to ``/print/{url}``
    - **200**: form shown again with an error message
    """
    cleaned_url = url.strip()
    if not cleaned_url:
        return _index(request, error=MISSING_URL_MESSAGE)
    if not service.is_allowed(cleaned_url):
        logger.info("Rejected pad submission for %s", cleaned_url)
        return _index(request, error=DISALLOWED_MESSAGE)
    return RedirectResponse(f"/print/{cleaned_url}", status_code=302)


# ---------------------------------------------------------------------------
# GET /print/{url}
# ---------------------------------------------------------------------------


@router.get("/print/{url:path}", response_class=HTMLResponse, summary="Print a pad")
async def print_pad(
    request: Request,
    url: str,
    service: PadService = Depends(_get_service),
) -> Response:
    """Fetch, clean up and render the pad at *url*.

    - **200**: rendered print page
    - **500**: URL outside the allowlist (empty body)
    - **502**: the pad body or metadata could not be fetched
    """
    try:
        result = await service.render_pad(url)
    except DisallowedSourceError:
        logger.warning("GET /print rejected source %s", url)
        return Response(status_code=500)
    except FetchError as exc:
        logger.warning("GET /print fetch error for %s: %s", url, exc)
        raise HTTPException(status_code=502, detail=str(exc))

    return templates.TemplateResponse(
        request,
        "print.html",
        {
            "seo": request.app.state.seo,
            "base_pad_url": settings.base_pad_url,
            "url": result.url,
            "metadata": result.metadata,
            "raw_body": result.raw_body,
            "html": result.html,
        },
    )
