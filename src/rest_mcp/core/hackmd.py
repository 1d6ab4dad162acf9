"""Operations against the HackMD API.

Every upstream failure is re-raised at its call site as HackmdError, with a
message naming the operation that failed. Nothing is retried.
"""

from typing import Any

import requests
from loguru import logger

from rest_mcp.protocols import ApiProtocol


class HackmdError(RuntimeError):
    """An upstream HackMD call failed."""


def get_user(api: ApiProtocol) -> dict[str, Any]:
    """Return the profile of the token's owner, including their teams."""
    try:
        return api.get("/v1/me")
    except requests.RequestException as e:
        msg = f"Error fetching user data from HackMD: {e}"
        raise HackmdError(msg) from e


def list_notes(api: ApiProtocol) -> dict[str, Any]:
    """Return all notes the token's owner can access, as {"notes": [...]}."""
    try:
        notes = api.get("/v1/notes")
    except requests.RequestException as e:
        msg = f"Error fetching notes from HackMD: {e}"
        raise HackmdError(msg) from e
    return {"notes": notes or []}


def get_note(api: ApiProtocol, *, note_id: str) -> dict[str, Any]:
    """Return a single note, including its folder paths."""
    try:
        return api.get(f"/v1/notes/{note_id}")
    except requests.RequestException as e:
        msg = f"Error fetching note from HackMD: {e}"
        raise HackmdError(msg) from e


def post_note(
    api: ApiProtocol,
    *,
    content: str,
    parent_folder_id: str | None = None,
    permalink: str | None = None,
    suggest_edit_permission: str | None = None,
    comment_permission: str | None = None,
    read_permission: str | None = None,
    write_permission: str | None = None,
) -> dict[str, Any]:
    """Create a note and return it as given by HackMD.

    Unset options are left out of the request so HackMD applies its own
    defaults.

    Args:
        api: HackMD API client.
        content: Markdown content of the note.
        parent_folder_id: Folder to place the note in (root if unset).
        permalink: Custom permalink.
        suggest_edit_permission: Who may suggest edits.
        comment_permission: Who may comment.
        read_permission: Who may read the note.
        write_permission: Who may write the note.
    """
    body: dict[str, Any] = {"content": content}
    optional = {
        "parentFolderId": parent_folder_id,
        "permalink": permalink,
        "suggestEditPermission": suggest_edit_permission,
        "commentPermission": comment_permission,
        "readPermission": read_permission,
        "writePermission": write_permission,
    }
    body.update({key: value for key, value in optional.items() if value is not None})

    try:
        return api.post("/v1/notes", body)
    except requests.RequestException as e:
        msg = f"Error posting note to HackMD: {e}"
        raise HackmdError(msg) from e


def update_note(
    api: ApiProtocol,
    *,
    note_id: str,
    content: str | None = None,
    read_permission: str | None = None,
    write_permission: str | None = None,
) -> dict[str, Any]:
    """Patch a note, then fetch and return its current state.

    Only the given fields are sent; the rest are left unchanged. The PATCH
    response carries no usable note, hence the second read. If that read
    fails the patch has still been applied: it is not rolled back.

    Args:
        api: HackMD API client.
        note_id: ID of the note to update.
        content: New Markdown content.
        read_permission: New read permission.
        write_permission: New write permission.
    """
    change: dict[str, Any] = {}
    if content is not None:
        change["content"] = content
    if read_permission is not None:
        change["readPermission"] = read_permission
    if write_permission is not None:
        change["writePermission"] = write_permission

    try:
        api.patch(f"/v1/notes/{note_id}", change)
    except requests.RequestException as e:
        msg = f"Error updating note in HackMD: {e}"
        raise HackmdError(msg) from e

    try:
        return api.get(f"/v1/notes/{note_id}")
    except requests.RequestException as e:
        logger.warning("Note {} was updated but could not be re-read", note_id)
        msg = f"Error fetching note from HackMD: {e}"
        raise HackmdError(msg) from e
