"""
tests/test_config.py
====================
Environment overrides and defaults in tvmazex._config.
"""

import pytest

from tvmazex import _config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TVMAZEX_BASE_URL", "TVMAZEX_PLACEHOLDER_IMAGE", "TVMAZEX_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


class TestBaseUrl:

    def test_default_is_encrypted_endpoint(self):
        assert _config.base_url() == "https://api.tvmaze.com"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TVMAZEX_BASE_URL", "http://localhost:9000/")
        assert _config.base_url() == "http://localhost:9000"

    def test_argument_beats_env(self, monkeypatch):
        monkeypatch.setenv("TVMAZEX_BASE_URL", "http://env")
        assert _config.base_url("http://arg") == "http://arg"


class TestPlaceholder:

    def test_default(self):
        assert _config.placeholder_image() == "https://tinyurl.com/tv-missing"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TVMAZEX_PLACEHOLDER_IMAGE", "https://x/none.png")
        assert _config.placeholder_image() == "https://x/none.png"


class TestTimeout:

    def test_default(self):
        assert _config.timeout() == 15.0

    def test_env_value(self, monkeypatch):
        monkeypatch.setenv("TVMAZEX_TIMEOUT", "4.5")
        assert _config.timeout() == 4.5

    def test_zero_disables(self, monkeypatch):
        monkeypatch.setenv("TVMAZEX_TIMEOUT", "0")
        assert _config.timeout() is None
        assert _config.timeout(0) is None

    def test_argument_beats_env(self, monkeypatch):
        monkeypatch.setenv("TVMAZEX_TIMEOUT", "30")
        assert _config.timeout(2) == 2.0

    def test_malformed_env_raises(self, monkeypatch):
        monkeypatch.setenv("TVMAZEX_TIMEOUT", "soon")
        with pytest.raises(ValueError):
            _config.timeout()
