"""Tests for environment-driven configuration."""

import pytest

from rest_mcp.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    HACKER_NEWS_API_URL,
    HACKMD_API_URL,
    resolve_hacker_news_url,
    resolve_hackmd_token,
    resolve_hackmd_url,
    resolve_host,
    resolve_port,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "HACKMD_API_URL",
        "HACKMD_API_TOKEN",
        "HACKER_NEWS_API_URL",
        "MCP_HOST",
        "MCP_PORT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_unset() -> None:
    assert resolve_hackmd_url() == HACKMD_API_URL == "https://api.hackmd.io"
    assert resolve_hackmd_token() == ""
    assert resolve_hacker_news_url() == HACKER_NEWS_API_URL
    assert resolve_host() == DEFAULT_HOST
    assert resolve_port() == DEFAULT_PORT


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HACKMD_API_URL", "http://localhost:9000")
    monkeypatch.setenv("HACKMD_API_TOKEN", " abc123\n")
    monkeypatch.setenv("MCP_PORT", "3001")

    assert resolve_hackmd_url() == "http://localhost:9000"
    assert resolve_hackmd_token() == "abc123"
    assert resolve_port() == 3001


def test_empty_url_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HACKMD_API_URL", "")

    assert resolve_hackmd_url() == HACKMD_API_URL
