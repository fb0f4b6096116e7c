from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from padprint.core.config import Settings
from padprint.core.seo import load_seo_metadata
from padprint.models.seo import SeoMetadata


class TestLoadSeoMetadata:
    def test_reads_json_file(self, tmp_path):
        path = tmp_path / "seo.json"
        path.write_text(
            json.dumps({"title": "T", "description": "D", "url": "https://x.org", "image": "i.png"}),
            encoding="utf-8",
        )
        seo = load_seo_metadata(Settings(seo_path=path))
        assert seo == SeoMetadata(title="T", description="D", url="https://x.org", image="i.png")

    def test_placeholder_url_uses_project_domain(self, tmp_path):
        path = tmp_path / "seo.json"
        path.write_text(json.dumps({"url": "glitch-default"}), encoding="utf-8")
        seo = load_seo_metadata(Settings(seo_path=path, project_domain="my-pads"))
        assert seo.url == "https://my-pads.glitch.me"

    def test_placeholder_url_without_domain_is_dropped(self, tmp_path):
        path = tmp_path / "seo.json"
        path.write_text(json.dumps({"url": "glitch-default"}), encoding="utf-8")
        seo = load_seo_metadata(Settings(seo_path=path, project_domain=""))
        assert seo.url == ""

    def test_missing_file_gives_defaults(self, tmp_path):
        seo = load_seo_metadata(Settings(seo_path=tmp_path / "absent.json"))
        assert seo == SeoMetadata()

    def test_packaged_file_loads(self):
        seo = load_seo_metadata(Settings(project_domain=""))
        assert seo.title == "Pad Print"


def test_settings_are_immutable():
    settings = Settings(base_pad_url="https://pad.example.org/")
    with pytest.raises(ValidationError):
        settings.base_pad_url = "https://evil.example/"
