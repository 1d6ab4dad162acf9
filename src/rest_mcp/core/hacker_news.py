"""Read operations against the Hacker News API.

Upstream failures degrade to an empty result instead of raising.
"""

from typing import Any

import requests
from loguru import logger

from rest_mcp.protocols import ApiProtocol


def get_top_stories(api: ApiProtocol) -> list[int]:
    """Return the current top story IDs, in upstream order."""
    try:
        data = api.get("/v0/topstories.json")
    except requests.RequestException as e:
        logger.warning("Fetching top stories failed: {}", e)
        return []
    return data or []


def get_story(api: ApiProtocol, *, story_id: int) -> dict[str, Any] | None:
    """Return the story with the given ID, or None if upstream has no such item.

    Args:
        api: Hacker News API client.
        story_id: Item ID of the story.
    """
    try:
        data = api.get(f"/v0/item/{story_id}.json")
    except requests.RequestException as e:
        logger.warning("Fetching story {} failed: {}", story_id, e)
        return None
    return data or None
