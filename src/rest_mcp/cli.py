"""CLI for serving the upstream APIs as MCP tool servers."""

from typing import Annotated

import typer
from loguru import logger

from rest_mcp.config import resolve_host, resolve_port
from rest_mcp.logging_config import configure_logging
from rest_mcp.mcp.registry import TRANSPORTS

app = typer.Typer(help="Serve Hacker News and HackMD as MCP tool servers.")

TransportOption = Annotated[
    str,
    typer.Option("--transport", "-t", help="One of: stdio, sse, streamable-http"),
]
HostOption = Annotated[
    str | None,
    typer.Option("--host", help="Listen address (default: $MCP_HOST or 127.0.0.1)"),
]
PortOption = Annotated[
    int | None,
    typer.Option("--port", "-p", help="Listen port (default: $MCP_PORT or 8000)"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _check_transport(transport: str) -> None:
    if transport not in TRANSPORTS:
        logger.error("Unknown transport {!r}, expected one of {}", transport, ", ".join(TRANSPORTS))
        raise typer.Exit(1)


@app.command(name="hacker-news")
def hacker_news(
    transport: TransportOption = "streamable-http",
    host: HostOption = None,
    port: PortOption = None,
) -> None:
    """Start the Hacker News MCP server."""
    _check_transport(transport)
    from rest_mcp.mcp.hacker_news_server import run_mcp_server

    run_mcp_server(transport, host=host or resolve_host(), port=port or resolve_port())


@app.command()
def hackmd(
    transport: TransportOption = "streamable-http",
    host: HostOption = None,
    port: PortOption = None,
) -> None:
    """Start the HackMD MCP server."""
    _check_transport(transport)
    from rest_mcp.mcp.hackmd_server import run_mcp_server

    run_mcp_server(transport, host=host or resolve_host(), port=port or resolve_port())
