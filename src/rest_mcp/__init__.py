"""Hacker News and HackMD exposed as MCP tool servers."""

from rest_mcp.api import UpstreamApi
from rest_mcp.core.hackmd import HackmdError
from rest_mcp.protocols import ApiProtocol

__all__ = ["ApiProtocol", "HackmdError", "UpstreamApi"]
