"""Configuration constants for the upstream API servers."""

import os

# Upstream defaults, used when the matching environment variable is unset or empty.
HACKER_NEWS_API_URL: str = "https://hacker-news.firebaseio.com"
HACKMD_API_URL: str = "https://api.hackmd.io"

# Applied to every upstream request.
REQUEST_TIMEOUT: float = 5.0
MAX_REDIRECTS: int = 5

# Listener defaults for the network transports.
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000


def resolve_hacker_news_url() -> str:
    """Return the Hacker News API base URL."""
    return os.environ.get("HACKER_NEWS_API_URL") or HACKER_NEWS_API_URL


def resolve_hackmd_url() -> str:
    """Return the HackMD API base URL."""
    return os.environ.get("HACKMD_API_URL") or HACKMD_API_URL


def resolve_hackmd_token() -> str:
    """Return the HackMD API token, or an empty string if none is configured."""
    return os.environ.get("HACKMD_API_TOKEN", "").strip()


def resolve_host() -> str:
    return os.environ.get("MCP_HOST") or DEFAULT_HOST


def resolve_port() -> int:
    port = os.environ.get("MCP_PORT")
    return int(port) if port else DEFAULT_PORT
