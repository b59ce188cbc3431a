"""DTO for thumbnail series requests."""
from __future__ import annotations
from dataclasses import dataclass

from thumbnailer.core.services.timestamp_planner import check_series_bounds


@dataclass
class SeriesRequest:
    video_path: str
    duration_ms: int
    count: int
    quality: int = 50

    def validate(self) -> None:
        check_series_bounds(self.duration_ms, self.count)
