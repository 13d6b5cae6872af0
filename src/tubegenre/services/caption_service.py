"""Best-effort caption lookup through YouTube's timedtext endpoint."""

import logging
from typing import Optional

import requests

from tubegenre.models.video import CaptionResult, CaptionText, NoCaptions

logger = logging.getLogger(__name__)

TIMEDTEXT_URL = "https://www.youtube.com/api/timedtext"


class CaptionService:
    """Service for retrieving caption tracks without API authentication."""

    def __init__(
        self,
        language: str = "en",
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize caption service.

        Args:
            language: Caption language code requested from the endpoint
            timeout: Request timeout in seconds, None for no timeout
            session: HTTP session to reuse across requests
        """
        self.language = language
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_captions(self, video_id: str) -> CaptionResult:
        """Fetch the caption track for a video.

        Network errors, non-success responses and empty bodies all
        return NoCaptions.
        """
        try:
            response = self.session.get(
                TIMEDTEXT_URL,
                params={"lang": self.language, "v": video_id},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.debug(f"Caption request failed for {video_id}: {e}")
            return NoCaptions(video_id)

        if not response.ok:
            logger.debug(f"No captions for {video_id}: HTTP {response.status_code}")
            return NoCaptions(video_id)

        if not response.text:
            logger.debug(f"No captions for {video_id}: empty response")
            return NoCaptions(video_id)

        return CaptionText(video_id, response.text)

    def close(self) -> None:
        self.session.close()
