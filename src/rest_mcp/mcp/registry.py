"""Explicit tool registry shared by the MCP servers.

Each server declares its tools as a tuple of ToolSpec. Input schemas come
from the handler signature, output schemas from its return annotation.
"""

import json
from collections.abc import AsyncIterator, Awaitable, Callable, Iterable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from dataclasses import dataclass
from typing import Any

from loguru import logger
from mcp.server.fastmcp import Context, FastMCP
from mcp.types import CallToolResult, TextContent

from rest_mcp.protocols import ApiProtocol

Transport = str  # "stdio", "sse" or "streamable-http"
TRANSPORTS: tuple[Transport, ...] = ("stdio", "sse", "streamable-http")


@dataclass(frozen=True)
class ToolSpec:
    """A named, described tool bound to its async handler."""

    name: str
    description: str
    handler: Callable[..., Awaitable[Any]]


@dataclass
class ServerContext:
    """Shared resources for the MCP server lifetime."""

    api: ApiProtocol


def make_lifespan(
    api_factory: Callable[[], ApiProtocol],
) -> Callable[[FastMCP], AbstractAsyncContextManager[ServerContext]]:
    """Build a lifespan that opens one upstream client and closes it on shutdown."""

    @asynccontextmanager
    async def server_lifespan(server: FastMCP) -> AsyncIterator[ServerContext]:
        api = api_factory()
        logger.debug("Upstream client for {} ready", server.name)
        try:
            yield ServerContext(api=api)
        finally:
            api.close()

    return server_lifespan


def api_from(mcp_ctx: Context) -> ApiProtocol:
    ctx: ServerContext = mcp_ctx.request_context.lifespan_context  # type: ignore[assignment]
    return ctx.api


def json_result(value: Any) -> CallToolResult:
    """Wrap a JSON value as one text block plus structured {"result": value}.

    FastMCP would otherwise render a list as one text block per element.
    """
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(value))],
        structuredContent={"result": value},
    )


def install_tools(server: FastMCP, tools: Iterable[ToolSpec]) -> None:
    """Register every tool on the server, rejecting duplicate names."""
    seen: set[str] = set()
    for spec in tools:
        if spec.name in seen:
            msg = f"Duplicate tool name: {spec.name!r}"
            raise ValueError(msg)
        seen.add(spec.name)
        server.add_tool(
            spec.handler,
            name=spec.name,
            description=spec.description,
            structured_output=True,
        )


def build_server(
    name: str,
    *,
    instructions: str,
    api_factory: Callable[[], ApiProtocol],
    tools: Iterable[ToolSpec],
) -> FastMCP:
    """Create a FastMCP server with its lifespan and tools installed.

    SSE is served at /sse and streamable HTTP at /mcp.
    """
    server = FastMCP(
        name,
        instructions=instructions,
        lifespan=make_lifespan(api_factory),
        sse_path="/sse",
        streamable_http_path="/mcp",
    )
    install_tools(server, tools)
    return server


def run_server(
    server: FastMCP,
    *,
    transport: Transport = "streamable-http",
    host: str | None = None,
    port: int | None = None,
) -> None:
    """Run the server on the given transport (blocks until shutdown)."""
    if transport not in TRANSPORTS:
        msg = f"Unknown transport {transport!r}, expected one of {TRANSPORTS!r}"
        raise ValueError(msg)
    if host is not None:
        server.settings.host = host
    if port is not None:
        server.settings.port = port
    if transport == "stdio":
        logger.info("Serving {} on stdio", server.name)
    else:
        logger.info(
            "Serving {} over {} on {}:{}",
            server.name,
            transport,
            server.settings.host,
            server.settings.port,
        )
    server.run(transport=transport)  # type: ignore[arg-type]
