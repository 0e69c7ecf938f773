"""
Unit tests for environment-driven configuration.
"""

from app.config import (
    DEFAULT_API_URL,
    get_api_base_url,
    get_log_file,
    get_log_level,
    get_request_timeout,
)


class TestConfig:
    """Tests for app.config getters."""

    def test_default_base_url(self, monkeypatch):
        monkeypatch.delenv("MOVIE_API_URL", raising=False)
        assert get_api_base_url() == DEFAULT_API_URL

    def test_base_url_override_strips_slash(self, monkeypatch):
        monkeypatch.setenv("MOVIE_API_URL", "http://localhost:5000/")
        assert get_api_base_url() == "http://localhost:5000"

    def test_empty_override_uses_default(self, monkeypatch):
        monkeypatch.setenv("MOVIE_API_URL", "")
        assert get_api_base_url() == DEFAULT_API_URL

    def test_timeout(self, monkeypatch):
        monkeypatch.delenv("MOVIE_API_TIMEOUT", raising=False)
        assert get_request_timeout() == 10.0
        monkeypatch.setenv("MOVIE_API_TIMEOUT", "3")
        assert get_request_timeout() == 3.0

    def test_logging_settings(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.delenv("LOG_FILE", raising=False)
        assert get_log_level() == "DEBUG"
        assert get_log_file() is None
        monkeypatch.setenv("LOG_FILE", "ui.log")
        assert get_log_file() == "ui.log"
