"""YouTube Data API service for keyword search and video metadata lookup."""

import logging
from typing import Dict, Iterable, List, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from tubegenre.models.video import SearchResultItem, VideoDetail
from tubegenre.utils.errors import YouTubeAPIError

logger = logging.getLogger(__name__)

# Upper bound imposed by the API on search page size and on ids per videos.list call
MAX_PAGE_SIZE = 50
MAX_IDS_PER_REQUEST = 50

DETAIL_PARTS = "snippet,contentDetails,statistics,topicDetails,recordingDetails"


class YouTubeService:
    """Service for searching YouTube videos and fetching their details."""

    def __init__(self, api_key: str, client=None):
        """Initialize the YouTube Data API client.

        Args:
            api_key: YouTube Data API key
            client: Pre-built API client, used instead of building one
        """
        if client is None:
            client = build("youtube", "v3", developerKey=api_key, cache_discovery=False)
        self.client = client
        logger.debug("YouTube Data API client ready")

    def search_videos(self, keyword: str, max_results: int = 500) -> List[SearchResultItem]:
        """Search for videos matching a keyword, following result pages.

        Args:
            keyword: Search query, passed to the API verbatim
            max_results: Maximum number of items to return

        Returns:
            Search hits in the order the API returned them, at most
            max_results long. Duplicates across pages are kept.
        """
        logger.info(f"Searching YouTube for: '{keyword}'")

        results: List[SearchResultItem] = []
        page_token: Optional[str] = None
        pages = 0

        while len(results) < max_results:
            remaining = max_results - len(results)
            params = {
                "part": "snippet",
                "q": keyword,
                "type": "video",
                "maxResults": min(MAX_PAGE_SIZE, remaining),
            }
            if page_token:
                params["pageToken"] = page_token

            response = self._execute(self.client.search().list(**params), "search.list")
            pages += 1

            items = response.get("items", [])[:remaining]
            results.extend(SearchResultItem.from_api_item(item) for item in items)
            logger.debug(f"Page {pages}: {len(items)} items ({len(results)} total)")

            page_token = response.get("nextPageToken")
            if not page_token:
                break

        logger.info(f"Search for '{keyword}' returned {len(results)} videos over {pages} pages")
        return results

    def fetch_video_details(self, video_ids: Iterable[str]) -> Dict[str, VideoDetail]:
        """Fetch full metadata for a set of videos.

        Ids are looked up in batches of up to 50. Videos the API does not
        return (deleted, private) are absent from the result.

        Args:
            video_ids: Video ids to look up; repeated ids are requested once

        Returns:
            Mapping from video id to its details
        """
        unique_ids = list(dict.fromkeys(video_ids))
        details: Dict[str, VideoDetail] = {}

        for start in range(0, len(unique_ids), MAX_IDS_PER_REQUEST):
            batch = unique_ids[start:start + MAX_IDS_PER_REQUEST]
            request = self.client.videos().list(part=DETAIL_PARTS, id=",".join(batch))
            response = self._execute(request, "videos.list")

            for item in response.get("items", []):
                detail = VideoDetail.from_api_item(item)
                details[detail.video_id] = detail

        missing = len(unique_ids) - len(details)
        if missing:
            logger.info(f"{missing} videos had no details available and will be skipped")
        return details

    def _execute(self, request, operation: str) -> Dict:
        """Execute an API request, converting HTTP failures to YouTubeAPIError."""
        try:
            return request.execute()
        except HttpError as e:
            status = getattr(e.resp, "status", None)
            logger.error(f"YouTube {operation} failed with status {status}: {e}")
            raise YouTubeAPIError(f"YouTube {operation} failed: {e}", status=status) from e
