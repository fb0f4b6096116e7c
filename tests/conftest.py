from __future__ import annotations

import os

os.environ["BASE_PAD_URL"] = "https://pad.example.org/"

from unittest.mock import AsyncMock, patch  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from padprint.core.config import Settings  # noqa: E402
from padprint.main import app  # noqa: E402

BASE_PAD_URL = "https://pad.example.org/"


@pytest.fixture
def pad_settings() -> Settings:
    return Settings(base_pad_url=BASE_PAD_URL)


@pytest.fixture
def client():
    """TestClient with the HTTP client shutdown hook mocked."""
    with patch(
        "padprint.main.close_http_client",
        new_callable=AsyncMock,
    ):
        with TestClient(app) as c:
            yield c
