"""Exception types for tubegenre."""

from typing import Optional


class TubeGenreError(Exception):
    """Base class for tubegenre errors."""
    pass


class ConfigurationError(TubeGenreError):
    """Raised when the configuration is missing or invalid."""
    pass


class YouTubeAPIError(TubeGenreError):
    """Raised when a YouTube Data API request fails."""

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message)
