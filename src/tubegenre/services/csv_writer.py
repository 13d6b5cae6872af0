"""CSV export of assembled video records."""

import csv
import logging
from pathlib import Path
from typing import Iterable

from tubegenre.models.video import CSV_COLUMNS, OutputRecord

logger = logging.getLogger(__name__)

FILENAME_PATTERN = "videos_{genre}.csv"


class CsvWriter:
    """Writes video records to a CSV file named after the genre."""

    def __init__(self, output_dir: str = "."):
        """Initialize writer with the directory files are written to.

        Args:
            output_dir: Directory for CSV files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def output_path(self, genre: str) -> Path:
        """Return the CSV path for a genre. The genre is used verbatim."""
        return self.output_dir / FILENAME_PATTERN.format(genre=genre)

    def write(self, genre: str, records: Iterable[OutputRecord]) -> Path:
        """Write records, in order, under the fixed column schema.

        Args:
            genre: Genre used to name the file
            records: Records to write

        Returns:
            Path of the written file
        """
        path = self.output_path(genre)
        count = 0

        with path.open("w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
            writer.writeheader()
            for record in records:
                writer.writerow(record.to_row())
                count += 1

        logger.info(f"Wrote {count} rows to {path}")
        return path
