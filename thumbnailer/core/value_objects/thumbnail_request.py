"""ThumbnailRequest value object describing one frame extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ThumbnailRequest:
    """Immutable request for a single frame at ``timestamp_ms``.

    ``quality`` is kept as given (nominally 1-100, higher is better); the
    ffmpeg scale mapping clamps out-of-range values. When ``output_path`` is
    ``None`` the generator writes to a scratch file and removes it again.
    """

    video_path: str
    timestamp_ms: int
    quality: int
    output_path: Optional[str] = None

    def __post_init__(self) -> None:
        if self.timestamp_ms < 0:
            raise ValueError(f"timestamp_ms must be non-negative, got {self.timestamp_ms}")
        if self.output_path is not None and not self.output_path:
            raise ValueError("output_path must be a non-empty path or None")

    @property
    def is_temporary(self) -> bool:
        return self.output_path is None
