"""Domain models for the HackMD API.

Models are frozen value records. Unknown upstream fields are kept so that
payloads pass through unchanged.
"""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class NotePermissionRole(StrEnum):
    owner = "owner"
    signed_in = "signed_in"
    guest = "guest"


class NotePublishType(StrEnum):
    edit = "edit"
    view = "view"
    slide = "slide"
    book = "book"


class CommentPermissionType(StrEnum):
    disabled = "disabled"
    forbidden = "forbidden"
    owners = "owners"
    signed_in_users = "signed_in_users"
    everyone = "everyone"


class SuggestEditPermissionType(StrEnum):
    disabled = "disabled"
    forbidden = "forbidden"
    owners = "owners"
    signed_in_users = "signed_in_users"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")


class Team(_Record):
    id: str = Field(description="The unique identifier of the team.")
    ownerId: str = Field(description="The unique identifier of the team owner.")
    name: str = Field(description="The name of the team.")
    logo: str = Field(description="The URL of the team logo.")
    path: str = Field(description="The team path.")
    description: str = Field(description="The description of the team.")
    visibility: Literal["public", "private"] = Field(description="The visibility of the team.")
    upgraded: bool = Field(description="Indicates if the team has an upgraded account.")
    createdAt: int = Field(description="The creation timestamp of the team.")


class User(_Record):
    """The authenticated HackMD user."""

    id: str = Field(description="The unique identifier of the user.")
    name: str = Field(description="The name of the user.")
    email: str = Field(description="The email of the user.")
    userPath: str = Field(description="The user path or username.")
    photo: str = Field(description="The URL of the user's photo.")
    teams: list[Team] = Field(description="The teams the user belongs to.")
    upgraded: bool = Field(description="Indicates if the user has an upgraded account.")


class LastChangeUser(_Record):
    name: str = Field(description="The name of the user who last changed the note.")
    userPath: str = Field(description="The user path of the user who last changed the note.")
    photo: str = Field(description="The photo URL of the user who last changed the note.")
    biography: str | None = Field(
        description="The biography of the user who last changed the note, or null."
    )


class Folder(_Record):
    id: str = Field(description="The unique identifier of the folder.")
    name: str = Field(description="The name of the folder.")
    icon: str = Field(description="The icon associated with the folder.")
    parentId: str | None = Field(
        description="The identifier of the parent folder, or null for a root folder."
    )
    color: str = Field(description="The color associated with the folder.")
    clientId: str = Field(description="The client identifier associated with the folder.")


class CreatedNote(_Record):
    """A note as returned on creation, before it has been filed into folders."""

    id: str = Field(description="The unique identifier of the note.")
    title: str = Field(description="The title of the note.")
    tags: list[str] = Field(description="Tags associated with the note.")
    createdAt: int = Field(description="The creation timestamp of the note.")
    titleUpdatedAt: int | None = Field(
        description="The timestamp when the title was last updated."
    )
    tagsUpdatedAt: int | None = Field(
        description="The timestamp when the tags were last updated, or null if never updated."
    )
    publishType: NotePublishType = Field(description="The publish type of the note.")
    publishedAt: int | None = Field(
        description="The timestamp when the note was published, or null if not published."
    )
    permalink: str | None = Field(description="The permalink of the note, or null.")
    publishLink: str = Field(description="The publish link of the note.")
    shortId: str = Field(description="The short identifier of the note.")
    content: str = Field(description="The content of the note in Markdown format.")
    lastChangedAt: int = Field(description="The timestamp when the note was last changed.")
    lastChangeUser: LastChangeUser = Field(
        description="Information about the user who last changed the note."
    )
    userPath: str = Field(description="The user path of the note owner.")
    teamPath: str | None = Field(
        description="The team path if the note belongs to a team, or null if it does not."
    )
    readPermission: NotePermissionRole = Field(
        description="The read permission level of the note."
    )
    writePermission: NotePermissionRole = Field(
        description="The write permission level of the note."
    )


class Note(CreatedNote):
    """A note with its folder placement."""

    folderPaths: list[Folder] | None = Field(
        default=None, description="An array of folders the note belongs to."
    )


class NoteList(_Record):
    notes: list[Note] = Field(description="An array of note objects.")
