"""HTTP client bound to a single upstream REST API."""

import logging
from typing import Any

import requests

from rest_mcp.config import MAX_REDIRECTS, REQUEST_TIMEOUT


class UpstreamApi:
    """Pre-configured session for one upstream base URL.

    Safe to share between concurrent tool calls: the only state is the
    session configuration (base URL, default headers, timeout, redirect limit).
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout: float = REQUEST_TIMEOUT,
        max_redirects: int = MAX_REDIRECTS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.sess = requests.Session()
        self.sess.max_redirects = max_redirects
        self.sess.headers["Accept"] = "application/json"
        if token is not None:
            self.sess.headers["Authorization"] = f"Bearer {token}"
        self.logger = logging.getLogger("api")

        self.logger.debug(
            f"API ready: base_url {self.base_url!r}, timeout {self.timeout!r}, "
            f"max_redirects {max_redirects!r}, authorized {token is not None!r}"
        )

    def request(self, method: str, path: str, body: dict[str, Any] | None = None) -> Any:
        """Invoke the upstream API, return the decoded JSON body.

        An empty body (e.g. 204 No Content) decodes to None. Transport errors,
        non-2xx statuses and undecodable bodies raise requests.RequestException.
        """
        self.logger.debug(f"Making request: {method} {path!r} {repr(body)[:32]}")

        r = self.sess.request(method, self.base_url + path, json=body, timeout=self.timeout)
        r.raise_for_status()
        if not r.content.strip():
            return None
        return r.json()

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, body: dict[str, Any]) -> Any:
        return self.request("POST", path, body)

    def patch(self, path: str, body: dict[str, Any]) -> Any:
        return self.request("PATCH", path, body)

    def close(self) -> None:
        self.sess.close()
