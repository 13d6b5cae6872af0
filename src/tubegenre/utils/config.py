"""Configuration loading and validation for tubegenre."""

import os
import logging
from typing import Dict, List, Optional
from pathlib import Path
from dotenv import load_dotenv
from rich.logging import RichHandler

from tubegenre.utils.errors import ConfigurationError

# Get the project root directory (parent of src)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Load environment variables from .env file in project root
load_dotenv(PROJECT_ROOT / '.env')

DEFAULT_MAX_RESULTS = 500
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_number(value: Optional[str], kind=int):
    """Parse a numeric setting, keeping unparseable values for validate_config to report."""
    if value is None or not value.strip():
        return None
    try:
        return kind(value)
    except ValueError:
        return value


def load_config() -> Dict:
    """Load configuration from environment variables."""
    max_results = _parse_number(os.getenv('MAX_RESULTS'))
    if max_results is None:
        max_results = DEFAULT_MAX_RESULTS

    config = {
        # Required API key for the YouTube Data API
        'youtube_api_key': os.getenv('YOUTUBE_API_KEY'),

        # Search settings
        'max_results': max_results,
        'caption_language': os.getenv('CAPTION_LANGUAGE', 'en'),
        'caption_timeout_seconds': _parse_number(os.getenv('CAPTION_TIMEOUT_SECONDS'), float),

        # Output
        'output_dir': os.getenv('OUTPUT_DIR', '.'),

        # Logging
        'log_level': os.getenv('LOG_LEVEL', 'INFO'),
        'log_file': os.getenv('LOG_FILE'),
    }

    return config


def validate_config(config: Dict) -> List[str]:
    """Validate configuration and return list of errors."""
    errors = []

    if not config.get('youtube_api_key'):
        errors.append("YOUTUBE_API_KEY is required")

    max_results = config.get('max_results', DEFAULT_MAX_RESULTS)
    if not isinstance(max_results, int) or max_results < 1:
        errors.append(f"MAX_RESULTS must be a positive integer, got {max_results!r}")

    if not config.get('caption_language'):
        errors.append("CAPTION_LANGUAGE must not be empty")

    timeout = config.get('caption_timeout_seconds')
    if timeout is not None and (not isinstance(timeout, (int, float)) or timeout <= 0):
        errors.append(f"CAPTION_TIMEOUT_SECONDS must be a positive number, got {timeout!r}")

    log_level = config.get('log_level', 'INFO')
    if str(log_level).upper() not in LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    output_dir = config.get('output_dir')
    if output_dir:
        try:
            Path(output_dir).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            errors.append(f"Cannot create output folder: {e}")

    return errors


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Set up logging with Rich console output and an optional log file."""
    level = log_level.upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
        )

    # Clear any existing handlers
    logging.root.handlers.clear()

    rich_handler = RichHandler(
        show_time=True,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False  # Genre strings and titles may contain brackets
    )
    handlers: List[logging.Handler] = [rich_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, level),
        handlers=handlers,
        format="%(message)s"
    )

    # Suppress noisy third-party loggers
    noisy_loggers = [
        'googleapiclient.discovery',
        'googleapiclient.discovery_cache',
        'urllib3.connectionpool',
        'requests.packages.urllib3.connectionpool'
    ]

    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
