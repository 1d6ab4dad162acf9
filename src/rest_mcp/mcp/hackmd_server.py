"""MCP server exposing the HackMD API as tools."""

import asyncio
from typing import Annotated

from loguru import logger
from mcp.server.fastmcp import Context
from pydantic import Field

from rest_mcp.api import UpstreamApi
from rest_mcp.config import resolve_hackmd_token, resolve_hackmd_url
from rest_mcp.core.hackmd import get_note, get_user, list_notes, post_note, update_note
from rest_mcp.mcp.registry import ToolSpec, api_from, build_server, run_server
from rest_mcp.models.hackmd import (
    CommentPermissionType,
    CreatedNote,
    Note,
    NoteList,
    NotePermissionRole,
    SuggestEditPermissionType,
    User,
)


def _make_api() -> UpstreamApi:
    token = resolve_hackmd_token()
    if not token:
        logger.warning("HACKMD_API_TOKEN is not set; HackMD will reject most requests")
    return UpstreamApi(resolve_hackmd_url(), token=token)


# --- MCP Tool Wrappers ---


async def get_user_tool(ctx: Context) -> User:
    """Return the HackMD profile of the token's owner, including teams."""
    data = await asyncio.to_thread(get_user, api_from(ctx))
    return User.model_validate(data)


async def list_notes_tool(ctx: Context) -> NoteList:
    """Return every note the user has access to."""
    data = await asyncio.to_thread(list_notes, api_from(ctx))
    return NoteList.model_validate(data)


async def get_note_tool(
    ctx: Context,
    id: Annotated[str, Field(description="The unique identifier of the note to retrieve.")],
) -> Note:
    """Return the note with the given ID."""
    data = await asyncio.to_thread(get_note, api_from(ctx), note_id=id)
    return Note.model_validate(data)


async def post_note_tool(
    ctx: Context,
    content: Annotated[str, Field(description="The content of the note in Markdown format.")],
    parentFolderId: Annotated[
        str | None,
        Field(
            description="The ID of the parent folder to place the note in. "
            "If not provided, the note will be created in the root directory."
        ),
    ] = None,
    permalink: Annotated[
        str | None,
        Field(
            description="The permalink for the note. "
            "If not provided, a default permalink will be generated."
        ),
    ] = None,
    suggestEditPermission: Annotated[
        SuggestEditPermissionType | None,
        Field(description="The suggest edit permission level for the note. Default is disabled."),
    ] = None,
    commentPermission: Annotated[
        CommentPermissionType | None,
        Field(description="The comment permission level for the note. Default is disabled."),
    ] = None,
    readPermission: Annotated[
        NotePermissionRole | None,
        Field(description="The read permission level for the note. Default is owner."),
    ] = None,
    writePermission: Annotated[
        NotePermissionRole | None,
        Field(description="The write permission level for the note. Default is owner."),
    ] = None,
) -> CreatedNote:
    """Create a note and return it."""
    data = await asyncio.to_thread(
        post_note,
        api_from(ctx),
        content=content,
        parent_folder_id=parentFolderId,
        permalink=permalink,
        suggest_edit_permission=suggestEditPermission,
        comment_permission=commentPermission,
        read_permission=readPermission,
        write_permission=writePermission,
    )
    return CreatedNote.model_validate(data)


async def update_note_tool(
    ctx: Context,
    noteId: Annotated[str, Field(description="The unique identifier of the note to update.")],
    content: Annotated[
        str | None,
        Field(
            description="The new content for the note in Markdown format. "
            "If not provided, the content will remain unchanged."
        ),
    ] = None,
    readPermission: Annotated[
        NotePermissionRole | None,
        Field(
            description="The new read permission level for the note. "
            "If not provided, the read permission will remain unchanged."
        ),
    ] = None,
    writePermission: Annotated[
        NotePermissionRole | None,
        Field(
            description="The new write permission level for the note. "
            "If not provided, the write permission will remain unchanged."
        ),
    ] = None,
) -> Note:
    """Patch a note and return its state as re-read from HackMD."""
    data = await asyncio.to_thread(
        update_note,
        api_from(ctx),
        note_id=noteId,
        content=content,
        read_permission=readPermission,
        write_permission=writePermission,
    )
    return Note.model_validate(data)


TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="get_user",
        description="Get user information from HackMD.",
        handler=get_user_tool,
    ),
    ToolSpec(
        name="list_notes",
        description="List all notes the user has access to in HackMD.",
        handler=list_notes_tool,
    ),
    ToolSpec(
        name="get_note",
        description="Get a specific note by its ID from HackMD.",
        handler=get_note_tool,
    ),
    ToolSpec(
        name="post_note",
        description="Post a new note to HackMD.",
        handler=post_note_tool,
    ),
    ToolSpec(
        name="update_note",
        description="Update a note's content or permissions from HackMD for the current user",
        handler=update_note_tool,
    ),
)

mcp_server = build_server(
    "hackmd-mcp-server",
    instructions=(
        "This MCP server provides access to HackMD data and posting notes capabilities."
    ),
    api_factory=_make_api,
    tools=TOOLS,
)


def run_mcp_server(
    transport: str = "streamable-http", host: str | None = None, port: int | None = None
) -> None:
    run_server(mcp_server, transport=transport, host=host, port=port)
