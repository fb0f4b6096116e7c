from __future__ import annotations

from unittest.mock import patch

from padprint.cli import main
from padprint.core.config import Settings


def test_main_serves_the_app_with_uvicorn():
    with (
        patch("padprint.cli.settings", Settings(host="127.0.0.1", port=8080, log_level="DEBUG")),
        patch("padprint.cli.uvicorn.run") as mock_run,
    ):
        main()
    mock_run.assert_called_once_with(
        "padprint.main:app", host="127.0.0.1", port=8080, log_level="debug"
    )

