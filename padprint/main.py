from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from padprint.api.router import router
from padprint.core.config import settings
from padprint.core.seo import load_seo_metadata
from padprint.workers.fetcher import close_http_client

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Send ``padprint.*`` records to stderr at ``settings.log_level``.

    Runs at import so messages logged before the server starts (SEO loading,
    a missing ``BASE_PAD_URL``) are formatted the same way as request logs.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
    )
    pad_log = logging.getLogger("padprint")
    pad_log.setLevel(level)
    if not pad_log.handlers:
        pad_log.addHandler(handler)
    # Server loggers stay separate; no duplicate lines through the root logger.
    pad_log.propagate = False


_configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    app.state.seo = load_seo_metadata(settings)
    if not settings.base_pad_url:
        logger.warning("BASE_PAD_URL is not set; every pad will be rejected.")
    yield
    # The shared pad client outlives requests; release its connections last.
    await close_http_client()


app = FastAPI(
    title="Pad Print",
    description="Fetches a collaborative pad and renders it as a printable page.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    return {"status": "ok"}
