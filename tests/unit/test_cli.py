"""Tests for the serve CLI."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from rest_mcp.cli import app

runner = CliRunner()


def test_hacker_news_command_runs_server_with_options() -> None:
    with patch("rest_mcp.mcp.hacker_news_server.run_mcp_server") as mock_run:
        result = runner.invoke(
            app, ["hacker-news", "--transport", "sse", "--host", "0.0.0.0", "--port", "3000"]
        )

    assert result.exit_code == 0
    mock_run.assert_called_once_with("sse", host="0.0.0.0", port=3000)


def test_hackmd_command_uses_environment_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MCP_HOST", "localhost")
    monkeypatch.setenv("MCP_PORT", "3001")

    with patch("rest_mcp.mcp.hackmd_server.run_mcp_server") as mock_run:
        result = runner.invoke(app, ["hackmd"])

    assert result.exit_code == 0
    mock_run.assert_called_once_with("streamable-http", host="localhost", port=3001)


def test_unknown_transport_exits_with_error() -> None:
    with patch("rest_mcp.mcp.hackmd_server.run_mcp_server") as mock_run:
        result = runner.invoke(app, ["hackmd", "--transport", "carrier-pigeon"])

    assert result.exit_code == 1
    mock_run.assert_not_called()
