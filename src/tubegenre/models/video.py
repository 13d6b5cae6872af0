"""Video-related data models."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

PLACEHOLDER = "N/A"
WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

CSV_COLUMNS = [
    "URL",
    "Title",
    "Description",
    "Channel Title",
    "Keyword Tags",
    "Category",
    "Topic Details",
    "Published At",
    "Duration",
    "View Count",
    "Comment Count",
    "Captions Available",
    "Caption Text",
    "Recording Location",
]


@dataclass
class SearchResultItem:
    """Represents a single hit from a YouTube keyword search."""

    video_id: str
    title: str = ""
    channel_title: str = ""
    published_at: str = ""

    @classmethod
    def from_api_item(cls, item: Dict) -> "SearchResultItem":
        snippet = item.get("snippet", {})
        return cls(
            video_id=item["id"]["videoId"],
            title=snippet.get("title", ""),
            channel_title=snippet.get("channelTitle", ""),
            published_at=snippet.get("publishedAt", ""),
        )


@dataclass
class VideoDetail:
    """Full metadata for one video as returned by videos.list."""

    video_id: str
    title: str
    description: str
    channel_title: str
    category_id: str
    published_at: str
    duration: str
    view_count: str
    tags: Optional[List[str]] = None
    topic_categories: Optional[List[str]] = None
    comment_count: Optional[str] = None
    location_description: Optional[str] = None

    @classmethod
    def from_api_item(cls, item: Dict) -> "VideoDetail":
        """Build a VideoDetail from a videos.list resource.

        Optional parts (topicDetails, recordingDetails) and optional
        statistics are left as None when the API omits them.
        """
        snippet = item.get("snippet", {})
        content_details = item.get("contentDetails", {})
        statistics = item.get("statistics", {})
        topic_details = item.get("topicDetails") or {}
        recording_details = item.get("recordingDetails") or {}

        return cls(
            video_id=item["id"],
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            channel_title=snippet.get("channelTitle", ""),
            category_id=snippet.get("categoryId", ""),
            published_at=snippet.get("publishedAt", ""),
            duration=content_details.get("duration", ""),
            view_count=statistics.get("viewCount", ""),
            tags=snippet.get("tags"),
            topic_categories=topic_details.get("topicCategories"),
            comment_count=statistics.get("commentCount"),
            location_description=recording_details.get("locationDescription"),
        )


@dataclass(frozen=True)
class CaptionText:
    """A caption track was retrieved."""

    video_id: str
    payload: str

    @property
    def available(self) -> bool:
        return True


@dataclass(frozen=True)
class NoCaptions:
    """No caption track could be retrieved for the video."""

    video_id: str

    @property
    def available(self) -> bool:
        return False


CaptionResult = Union[CaptionText, NoCaptions]


@dataclass
class OutputRecord:
    """One flattened CSV row describing a video."""

    url: str
    title: str
    description: str
    channel_title: str
    keyword_tags: str
    category: str
    topic_details: str
    published_at: str
    duration: str
    view_count: str
    comment_count: Union[str, int]
    captions_available: bool
    caption_text: str
    recording_location: str

    @staticmethod
    def watch_url(video_id: str) -> str:
        return WATCH_URL.format(video_id=video_id)

    @classmethod
    def from_detail(cls, detail: VideoDetail, captions: CaptionResult) -> "OutputRecord":
        """Merge a video's metadata and caption result, applying fallbacks."""
        return cls(
            url=cls.watch_url(detail.video_id),
            title=detail.title,
            description=detail.description,
            channel_title=detail.channel_title,
            keyword_tags=_join_or_placeholder(detail.tags),
            category=detail.category_id,
            topic_details=_join_or_placeholder(detail.topic_categories),
            published_at=detail.published_at,
            duration=detail.duration,
            view_count=detail.view_count,
            comment_count=detail.comment_count or 0,
            captions_available=captions.available,
            caption_text=captions.payload if isinstance(captions, CaptionText) else PLACEHOLDER,
            recording_location=detail.location_description or PLACEHOLDER,
        )

    def to_row(self) -> Dict[str, str]:
        """Convert the record to a CSV row keyed by column name."""
        values = [
            self.url,
            self.title,
            self.description,
            self.channel_title,
            self.keyword_tags,
            self.category,
            self.topic_details,
            self.published_at,
            self.duration,
            self.view_count,
            self.comment_count,
            "true" if self.captions_available else "false",
            self.caption_text,
            self.recording_location,
        ]
        return {column: str(value) for column, value in zip(CSV_COLUMNS, values)}


def _join_or_placeholder(values: Optional[List[str]]) -> str:
    return ", ".join(values) if values else PLACEHOLDER
