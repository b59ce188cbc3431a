"""Custom exception hierarchy for thumbnailer."""
from __future__ import annotations


class ThumbnailerError(Exception):
    """Base exception for all thumbnailer errors."""


class MediaToolError(ThumbnailerError):
    """Raised when the external media tool cannot complete a run."""


class MediaToolUnavailableError(MediaToolError):
    """Raised when the media tool binary cannot be found or executed."""

    def __init__(self, binary: str) -> None:
        self.binary = binary
        super().__init__(f"Media tool not available: {binary}")


class FilmstripError(ThumbnailerError):
    """Raised when a filmstrip image cannot be composed."""
