"""Protocols for dependency injection in the tool handlers."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ApiProtocol(Protocol):
    """Protocol for upstream REST API clients."""

    def get(self, path: str) -> Any:
        """Issue a GET and return the decoded JSON body (None if empty)."""
        ...

    def post(self, path: str, body: dict[str, Any]) -> Any:
        """Issue a POST with a JSON body and return the decoded response."""
        ...

    def patch(self, path: str, body: dict[str, Any]) -> Any:
        """Issue a PATCH with a JSON body and return the decoded response."""
        ...

    def close(self) -> None:
        """Release the underlying connections."""
        ...
