"""Tests for environment-driven settings."""

from grabber.config import Settings


def test_defaults(monkeypatch):
    for name in (
        "GRABBER_REQUEST_TIMEOUT",
        "GRABBER_USER_AGENT",
        "GRABBER_MAX_REDIRECTS",
        "GRABBER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings()
    assert s.request_timeout is None
    assert s.user_agent == "grabber/1.0"
    assert s.max_redirects == 10
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GRABBER_REQUEST_TIMEOUT", "7.5")
    monkeypatch.setenv("GRABBER_USER_AGENT", "custom/2.0")
    monkeypatch.setenv("GRABBER_MAX_REDIRECTS", "2")
    monkeypatch.setenv("GRABBER_LOG_LEVEL", "debug")

    s = Settings()
    assert s.request_timeout == 7.5
    assert s.user_agent == "custom/2.0"
    assert s.max_redirects == 2
    assert s.log_level == "DEBUG"


def test_blank_timeout_means_none(monkeypatch):
    monkeypatch.setenv("GRABBER_REQUEST_TIMEOUT", "  ")
    assert Settings().request_timeout is None
