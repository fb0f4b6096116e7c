from __future__ import annotations

import json
import logging

from padprint.core.config import Settings
from padprint.models.seo import SeoMetadata

logger = logging.getLogger(__name__)

#: Placeholder URL replaced with the project's public hostname.
DEFAULT_URL_PLACEHOLDER = "glitch-default"


def load_seo_metadata(settings: Settings) -> SeoMetadata:
    """Read the SEO JSON file named by ``settings.seo_path``.

    Called once at startup.  A missing file yields the defaults; a file that
    exists but cannot be parsed is a configuration error and raises.
    """
    path = settings.seo_path
    if not path.is_file():
        logger.warning("SEO file %s not found, using defaults.", path)
        seo = SeoMetadata()
    else:
        seo = SeoMetadata.model_validate(json.loads(path.read_text(encoding="utf-8")))

    if seo.url == DEFAULT_URL_PLACEHOLDER:
        url = f"https://{settings.project_domain}.glitch.me" if settings.project_domain else ""
        seo = seo.model_copy(update={"url": url})
    return seo
