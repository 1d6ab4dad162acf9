"""MCP server exposing the Hacker News API as tools."""

import asyncio
from typing import Annotated

from mcp.server.fastmcp import Context
from mcp.types import CallToolResult
from pydantic import Field

from rest_mcp.api import UpstreamApi
from rest_mcp.config import resolve_hacker_news_url
from rest_mcp.core.hacker_news import get_story, get_top_stories
from rest_mcp.mcp.registry import ToolSpec, api_from, build_server, json_result, run_server
from rest_mcp.models.hacker_news import StoryResult, TopStoriesResult


def _make_api() -> UpstreamApi:
    return UpstreamApi(resolve_hacker_news_url())


# --- MCP Tool Wrappers ---


async def get_top_stories_tool(ctx: Context) -> Annotated[CallToolResult, TopStoriesResult]:
    """Return the IDs of the current top stories, best first."""
    ids = await asyncio.to_thread(get_top_stories, api_from(ctx))
    return json_result(ids)


async def get_story_tool(
    ctx: Context,
    id: Annotated[int, Field(description="The ID of the story to retrieve.")],
) -> Annotated[CallToolResult, StoryResult]:
    """Return a story by ID, or null if Hacker News has no such item.

    The item is passed through as received; FastMCP checks it against Story.
    """
    data = await asyncio.to_thread(get_story, api_from(ctx), story_id=id)
    return json_result(data)


TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="get_top_stories",
        description="Get the top stories from Hacker News.",
        handler=get_top_stories_tool,
    ),
    ToolSpec(
        name="get_story",
        description=(
            "Get the details of a story from Hacker News by its ID. "
            "The ID should be provided as a parameter."
        ),
        handler=get_story_tool,
    ),
)

mcp_server = build_server(
    "hacker-news-mcp",
    instructions="This MCP server provides access to Hacker News data.",
    api_factory=_make_api,
    tools=TOOLS,
)


def run_mcp_server(
    transport: str = "streamable-http", host: str | None = None, port: int | None = None
) -> None:
    run_server(mcp_server, transport=transport, host=host, port=port)
