from __future__ import annotations

import pytest

from padprint.core.allowlist import is_allowed_url

BASE = "https://pad.example.org/"


class TestIsAllowedUrl:
    @pytest.mark.parametrize(
        "candidate",
        [
            "https://pad.example.org/",
            "https://pad.example.org/p/abc",
            "https://pad.example.org/p/abc?edit=1",
            "HTTPS://PAD.EXAMPLE.ORG/p/abc",
            "Https://Pad.Example.Org/P/Abc",
        ],
    )
    def test_prefix_matches_in_any_case(self, candidate):
        assert is_allowed_url(candidate, BASE) is True

    @pytest.mark.parametrize(
        "candidate",
        [
            "",
            "https://pad.example.org",
            "http://pad.example.org/p/abc",
            "https://evil.example/https://pad.example.org/",
            " https://pad.example.org/p/abc",
            "https://pad.example.org.evil.example/",
            "https://padXexample.org/",
        ],
    )
    def test_rejects_anything_not_starting_with_base(self, candidate):
        assert is_allowed_url(candidate, BASE) is False

    @pytest.mark.parametrize("candidate", [None, 42, b"https://pad.example.org/", ["x"]])
    def test_non_string_is_rejected(self, candidate):
        assert is_allowed_url(candidate, BASE) is False

    def test_empty_base_allows_nothing(self):
        assert is_allowed_url("https://pad.example.org/p/abc", "") is False

    def test_base_is_not_a_pattern(self):
        assert is_allowed_url("https://padXexample.org/", "https://pad.example.org/") is False
        assert is_allowed_url("https://pad.example.org/", "https://pad.*") is False

    def test_only_ascii_case_is_folded(self):
        base = "https://pad.example.org/é"
        assert is_allowed_url("https://PAD.example.org/é/x", base) is True
        assert is_allowed_url("https://pad.example.org/É/x", base) is False
