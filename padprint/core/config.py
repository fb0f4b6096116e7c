from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    # Pad source
    base_pad_url: str = ""

    # HTTP fetcher
    http_verify_ssl: bool = True  # set False behind corporate SSL-inspection proxies
    http_follow_redirects: bool = True
    http_user_agent: str = "PadPrint/1.0"

    # SEO
    seo_path: Path = _PACKAGE_DIR / "seo.json"
    project_domain: str = ""

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Logging
    log_level: str = "INFO"


settings = Settings()
