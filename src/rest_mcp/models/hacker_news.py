"""Domain models for the Hacker News API."""

from pydantic import BaseModel, ConfigDict, Field


class Story(BaseModel):
    """A Hacker News item as returned by /v0/item/{id}.json.

    Only ``id`` is guaranteed. Job postings carry no ``descendants`` and
    deleted or dead items drop most fields, so everything else is optional.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: int = Field(description="The unique identifier of the story.")
    title: str | None = Field(default=None, description="The title of the story.")
    by: str | None = Field(default=None, description="The username of the story's author.")
    score: int | None = Field(default=None, description="The story's points.")
    time: int | None = Field(default=None, description="Creation time of the story, in Unix time.")
    type: str | None = Field(default=None, description='The type of item, e.g. "story".')
    descendants: int | None = Field(default=None, description="The total comment count.")
    url: str | None = Field(default=None, description="The URL of the story.")
    kids: list[int] | None = Field(
        default=None, description="The IDs of the story's comments, in ranked display order."
    )


class TopStoriesResult(BaseModel):
    """Structured output of get_top_stories."""

    result: list[int] = Field(description="Top story IDs, best first.")


class StoryResult(BaseModel):
    """Structured output of get_story; null when the item does not exist."""

    result: Story | None
