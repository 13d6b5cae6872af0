"""Shared fixtures: canned YouTube Data API payloads and mock clients."""

from typing import List, Optional
from unittest.mock import MagicMock

import pytest


def make_search_page(video_ids: List[str], next_page_token: Optional[str] = None) -> dict:
    """Build a search.list response body."""
    page = {
        "kind": "youtube#searchListResponse",
        "items": [
            {
                "kind": "youtube#searchResult",
                "id": {"kind": "youtube#video", "videoId": video_id},
                "snippet": {
                    "title": f"Title {video_id}",
                    "channelTitle": "Some Channel",
                    "publishedAt": "2024-01-01T00:00:00Z",
                },
            }
            for video_id in video_ids
        ],
    }
    if next_page_token:
        page["nextPageToken"] = next_page_token
    return page


def make_video_item(video_id: str, **overrides) -> dict:
    """Build a fully populated videos.list resource."""
    item = {
        "kind": "youtube#video",
        "id": video_id,
        "snippet": {
            "title": f"Title {video_id}",
            "description": f"Description of {video_id}",
            "channelTitle": "Some Channel",
            "tags": ["jazz", "live"],
            "categoryId": "10",
            "publishedAt": "2024-01-01T00:00:00Z",
        },
        "contentDetails": {"duration": "PT4M13S"},
        "statistics": {"viewCount": "1234", "commentCount": "56"},
        "topicDetails": {
            "topicCategories": [
                "https://en.wikipedia.org/wiki/Jazz",
                "https://en.wikipedia.org/wiki/Music",
            ]
        },
        "recordingDetails": {"locationDescription": "New Orleans"},
    }
    item.update(overrides)
    return item


@pytest.fixture
def youtube_client() -> MagicMock:
    """A stand-in for the googleapiclient YouTube resource."""
    return MagicMock()


def set_search_pages(client: MagicMock, pages: List[dict]) -> None:
    client.search.return_value.list.return_value.execute.side_effect = pages


def set_video_batches(client: MagicMock, batches: List[dict]) -> None:
    client.videos.return_value.list.return_value.execute.side_effect = batches


def caption_response(text: str = "", status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    return response
