"""Main GenreExporter class for orchestrating the export workflow."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from tubegenre.models.video import OutputRecord, SearchResultItem, VideoDetail
from tubegenre.services.caption_service import CaptionService
from tubegenre.services.csv_writer import CsvWriter
from tubegenre.services.youtube_service import YouTubeService
from tubegenre.utils.config import DEFAULT_MAX_RESULTS, load_config, validate_config
from tubegenre.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


class GenreExporter:
    """Central orchestrator: search, enrich and export videos for a genre."""

    def __init__(
        self,
        config: Optional[Dict] = None,
        youtube_service: Optional[YouTubeService] = None,
        caption_service: Optional[CaptionService] = None,
    ):
        """Initialize the exporter and its services from configuration."""
        self.config = config if config is not None else load_config()

        config_errors = validate_config(self.config)
        if config_errors:
            error_msg = "Configuration errors: " + "; ".join(config_errors)
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        self.max_results = self.config.get("max_results", DEFAULT_MAX_RESULTS)

        self.youtube_service = youtube_service or YouTubeService(
            self.config["youtube_api_key"]
        )
        self.caption_service = caption_service or CaptionService(
            language=self.config.get("caption_language", "en"),
            timeout=self.config.get("caption_timeout_seconds"),
        )
        self.csv_writer = CsvWriter(self.config.get("output_dir", "."))

        logger.debug("GenreExporter initialized")

    def run(self, genre: str) -> Path:
        """Run the full pipeline for a genre and return the CSV path."""
        logger.info(f"Fetching videos for genre: {genre}")

        items = self.youtube_service.search_videos(genre, self.max_results)
        logger.info(f"Found {len(items)} videos")

        records = self.assemble_records(items)
        path = self.csv_writer.write(genre, records)

        with_captions = sum(1 for record in records if record.captions_available)
        logger.info(
            f"Data saved to {path} "
            f"({len(records)} written, {len(items) - len(records)} skipped, "
            f"{with_captions} with captions)"
        )
        return path

    def assemble_records(self, items: Sequence[SearchResultItem]) -> List[OutputRecord]:
        """Build one output record per search hit that has details.

        Hits whose details are unavailable are skipped. Captions are
        fetched only for hits that produce a record.
        """
        details = self.fetch_details(items)
        records = []

        for item in items:
            detail = details.get(item.video_id)
            if detail is None:
                logger.debug(f"Skipping {item.video_id}: no details returned")
                continue

            captions = self.caption_service.fetch_captions(item.video_id)
            records.append(OutputRecord.from_detail(detail, captions))

        return records

    def fetch_details(self, items: Sequence[SearchResultItem]) -> Dict[str, VideoDetail]:
        if not items:
            return {}
        return self.youtube_service.fetch_video_details(item.video_id for item in items)

    def close(self) -> None:
        self.caption_service.close()
