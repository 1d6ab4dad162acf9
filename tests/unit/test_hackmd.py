"""Tests for the HackMD core functions."""

import pytest
import requests

from rest_mcp.core.hackmd import (
    HackmdError,
    get_note,
    get_user,
    list_notes,
    post_note,
    update_note,
)
from tests.unit.fakes import FakeApi, FakeNoteStore, make_note, make_team, make_user


def test_get_user_returns_profile_with_teams(fake_api: FakeApi) -> None:
    user = make_user(teams=[make_team()])
    fake_api.add_response("GET", "/v1/me", user)

    result = get_user(fake_api)

    assert result == user
    assert result["id"]
    assert isinstance(result["teams"], list)


def test_get_user_wraps_failure(fake_api: FakeApi) -> None:
    fake_api.add_response("GET", "/v1/me", requests.ConnectionError("Request failed"))

    with pytest.raises(HackmdError) as exc_info:
        get_user(fake_api)

    assert str(exc_info.value) == "Error fetching user data from HackMD: Request failed"
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


@pytest.mark.parametrize("count", [0, 1, 3])
def test_list_notes_wraps_notes_in_container(fake_api: FakeApi, count: int) -> None:
    notes = [make_note(id=f"note-{i}") for i in range(count)]
    fake_api.add_response("GET", "/v1/notes", notes)

    assert list_notes(fake_api) == {"notes": notes}


def test_list_notes_wraps_failure(fake_api: FakeApi) -> None:
    fake_api.add_response("GET", "/v1/notes", requests.HTTPError("401 Client Error"))

    with pytest.raises(HackmdError, match="^Error fetching notes from HackMD: 401 Client Error$"):
        list_notes(fake_api)


def test_get_note_returns_note_with_folder_paths(fake_api: FakeApi) -> None:
    folder = {
        "id": "f1",
        "name": "Work",
        "icon": "",
        "parentId": None,
        "color": "#fff",
        "clientId": "c1",
    }
    note = make_note(folderPaths=[folder])
    fake_api.add_response("GET", "/v1/notes/note-123", note)

    assert get_note(fake_api, note_id="note-123") == note


def test_get_note_wraps_failure(fake_api: FakeApi) -> None:
    fake_api.add_response("GET", "/v1/notes/missing", requests.HTTPError("404 Client Error"))

    with pytest.raises(HackmdError, match="^Error fetching note from HackMD: 404 Client Error$"):
        get_note(fake_api, note_id="missing")


def test_post_note_sends_only_given_fields(fake_api: FakeApi) -> None:
    fake_api.add_response("POST", "/v1/notes", make_note())

    post_note(fake_api, content="# Hi", read_permission="guest", comment_permission="owners")

    assert fake_api.calls == [
        (
            "POST",
            "/v1/notes",
            {"content": "# Hi", "readPermission": "guest", "commentPermission": "owners"},
        )
    ]


def test_post_note_sends_every_option(fake_api: FakeApi) -> None:
    fake_api.add_response("POST", "/v1/notes", make_note())

    post_note(
        fake_api,
        content="x",
        parent_folder_id="f1",
        permalink="my-note",
        suggest_edit_permission="disabled",
        comment_permission="everyone",
        read_permission="signed_in",
        write_permission="owner",
    )

    body = fake_api.calls[0][2]
    assert body == {
        "content": "x",
        "parentFolderId": "f1",
        "permalink": "my-note",
        "suggestEditPermission": "disabled",
        "commentPermission": "everyone",
        "readPermission": "signed_in",
        "writePermission": "owner",
    }


def test_post_note_wraps_failure(fake_api: FakeApi) -> None:
    fake_api.add_response("POST", "/v1/notes", requests.Timeout("timed out"))

    with pytest.raises(HackmdError, match="^Error posting note to HackMD: timed out$"):
        post_note(fake_api, content="x")


def test_update_note_patches_then_gets(fake_api: FakeApi) -> None:
    updated = make_note(content="new content")
    fake_api.add_response("PATCH", "/v1/notes/note-123", None)
    fake_api.add_response("GET", "/v1/notes/note-123", updated)

    result = update_note(fake_api, note_id="note-123", content="new content")

    assert fake_api.calls == [
        ("PATCH", "/v1/notes/note-123", {"content": "new content"}),
        ("GET", "/v1/notes/note-123", None),
    ]
    assert result == updated
    assert result["content"] == "new content"


def test_update_note_sends_empty_patch_when_nothing_given(fake_api: FakeApi) -> None:
    fake_api.add_response("PATCH", "/v1/notes/note-123", None)
    fake_api.add_response("GET", "/v1/notes/note-123", make_note())

    update_note(fake_api, note_id="note-123")

    assert fake_api.calls[0] == ("PATCH", "/v1/notes/note-123", {})


def test_update_note_patch_failure_skips_get(fake_api: FakeApi) -> None:
    fake_api.add_response("PATCH", "/v1/notes/note-123", requests.HTTPError("Update failed"))
    fake_api.add_response("GET", "/v1/notes/note-123", make_note())

    with pytest.raises(HackmdError, match="^Error updating note in HackMD: Update failed$"):
        update_note(fake_api, note_id="note-123", content="new content")

    assert [method for method, _path, _body in fake_api.calls] == ["PATCH"]


def test_update_note_get_failure_after_patch(fake_api: FakeApi) -> None:
    fake_api.add_response("PATCH", "/v1/notes/note-123", None)
    fake_api.add_response(
        "GET", "/v1/notes/note-123", requests.ConnectionError("Get after update failed")
    )

    with pytest.raises(
        HackmdError, match="^Error fetching note from HackMD: Get after update failed$"
    ):
        update_note(fake_api, note_id="note-123", content="new content")

    assert [method for method, _path, _body in fake_api.calls] == ["PATCH", "GET"]


def test_post_update_get_lifecycle(note_store: FakeNoteStore) -> None:
    created = post_note(note_store, content="# T\nbody")
    assert created["content"] == "# T\nbody"
    assert created["id"]

    updated = update_note(note_store, note_id=created["id"], content="# T\nbody v2")
    assert updated["content"] == "# T\nbody v2"

    fetched = get_note(note_store, note_id=created["id"])
    assert fetched["id"] == created["id"]
    assert fetched["title"] == "T"
    assert fetched["content"] == "# T\nbody v2"
