"""``padprint`` console script: serve the app with uvicorn."""

from __future__ import annotations

import uvicorn

from padprint.core.config import settings


def main() -> None:
    uvicorn.run(
        "padprint.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
